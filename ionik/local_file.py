"""Local files accessed through raw operating-system descriptors."""

from __future__ import annotations

import contextlib
import enum
import errno
import os
from typing import Iterator, Union

from ionik.errors import IonikError

PathLike = Union[str, "os.PathLike[str]"]

_INVALID = -1
_CHUNK_SIZE = 512
_BINARY = getattr(os, "O_BINARY", 0)


class TruncateMode(enum.Enum):
    """Whether opening a file for writing truncates it."""

    OFF = 0
    ON = 1


@contextlib.contextmanager
def _os_errors(message: str) -> Iterator[None]:
    try:
        yield
    except OSError as exc:
        detail = exc.strerror or str(exc)
        raise IonikError(f"{message}: {detail}", exc.errno) from exc


class LocalFile:
    """An open local file with a known size limit for positioning."""

    def __init__(self, fd: int, size: int) -> None:
        if size < 0:
            raise ValueError("file size must be unsigned")
        self._fd = fd
        self._size = size

    def __bool__(self) -> bool:
        return self._fd != _INVALID

    def __enter__(self) -> "LocalFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except Exception:
            pass

    @property
    def size(self) -> int:
        """Size of the file as known when it was opened."""
        return self._size

    def native(self) -> int:
        """Return the underlying descriptor (-1 when closed)."""
        return self._fd

    def close(self) -> None:
        """Close the file; closing twice is harmless."""
        fd, self._fd = self._fd, _INVALID
        if fd != _INVALID:
            with contextlib.suppress(OSError):
                os.close(fd)

    def offset(self) -> int:
        """Return the current file position."""
        with _os_errors("get file position failure"):
            return os.lseek(self._fd, 0, os.SEEK_CUR)

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; an empty result means end of file."""
        with _os_errors("read from file failure"):
            return os.read(self._fd, size)

    def read_all(self) -> bytes:
        """Read everything from the current position to the end of file."""
        chunks = []
        while True:
            chunk = self.read(_CHUNK_SIZE)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    def write(self, data: bytes) -> int:
        """Write all of ``data`` and return the number of bytes written."""
        view = memoryview(data)
        total = 0
        with _os_errors("write to file failure"):
            while total < len(view):
                n = os.write(self._fd, view[total:])
                if n <= 0:
                    break
                total += n
        return total

    def set_pos(self, pos: int) -> None:
        """Move the file position to ``pos``, which must be inside the file."""
        if pos < 0 or pos >= self._size:
            raise IonikError("new file position is out of bounds", errno.EINVAL)
        with _os_errors("set file position failure"):
            os.lseek(self._fd, pos, os.SEEK_SET)

    def skip(self, nbytes: int) -> None:
        """Advance the file position by ``nbytes``."""
        self.set_pos(self.offset() + nbytes)

    @classmethod
    def open_read_only(cls, path: PathLike) -> "LocalFile":
        """Open ``path`` for reading."""
        with _os_errors(f"open file for reading failure: {os.fspath(path)}"):
            fd = os.open(path, os.O_RDONLY | _BINARY)
        try:
            with _os_errors(f"get file size failure: {os.fspath(path)}"):
                size = os.fstat(fd).st_size
        except IonikError:
            os.close(fd)
            raise
        return cls(fd, size)

    @classmethod
    def open_write_only(
        cls,
        path: PathLike,
        trunc: TruncateMode = TruncateMode.OFF,
        initial_size: int = 0,
    ) -> "LocalFile":
        """Open ``path`` for writing, creating it if needed.

        When ``trunc`` is ON the file is truncated and then resized to
        ``initial_size``.
        """
        flags = os.O_WRONLY | os.O_CREAT | _BINARY
        if trunc is TruncateMode.ON:
            flags |= os.O_TRUNC
        with _os_errors(f"open file for writing failure: {os.fspath(path)}"):
            fd = os.open(path, flags, 0o644)
        try:
            if trunc is TruncateMode.ON:
                if initial_size > 0:
                    with _os_errors(f"resize file failure: {os.fspath(path)}"):
                        os.ftruncate(fd, initial_size)
                size = 0
            else:
                with _os_errors(f"get file size failure: {os.fspath(path)}"):
                    size = os.fstat(fd).st_size
        except IonikError:
            os.close(fd)
            raise
        return cls(fd, size)


def rewrite_file(path: PathLike, data: bytes | str) -> int:
    """Replace the content of ``path`` with ``data``; return bytes written."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    with LocalFile.open_write_only(path, TruncateMode.ON) as f:
        return f.write(data)


def read_file(path: PathLike) -> bytes:
    """Return the whole content of ``path``."""
    with LocalFile.open_read_only(path) as f:
        return f.read_all()
"""Video capture device discovery through video4linux2."""

from __future__ import annotations

import os
import stat
import struct
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from ionik.errors import IonikError
from ionik.video.capture_device import (
    CaptureDeviceInfo,
    DiscreteFrameSize,
    FrameRate,
    PixelFormat,
    Subsystem,
)

try:
    import fcntl
except ImportError:  # not available on this platform
    fcntl = None  # type: ignore[assignment]

PathLike = Union[str, "os.PathLike[str]"]

_IOC_WRITE = 1
_IOC_READ = 2


def _ioc(direction: int, nr: int, size: int) -> int:
    return (direction << 30) | (size << 16) | (ord("V") << 8) | nr


_CAPABILITY = struct.Struct("=16s32s32sIII12x")
_FMTDESC = struct.Struct("=III32sII12x")
_FRMSIZEENUM = struct.Struct("=IIIII16x8x")
_FRMIVALENUM = struct.Struct("=IIIIIII16x8x")
_PIX_FORMAT_HEAD = struct.Struct("=III")
_FORMAT_UNION_OFFSET = 8 if struct.calcsize("P") == 8 else 4
_FORMAT_SIZE = _FORMAT_UNION_OFFSET + 200

VIDIOC_QUERYCAP = _ioc(_IOC_READ, 0, _CAPABILITY.size)
VIDIOC_ENUM_FMT = _ioc(_IOC_READ | _IOC_WRITE, 2, _FMTDESC.size)
VIDIOC_G_FMT = _ioc(_IOC_READ | _IOC_WRITE, 4, _FORMAT_SIZE)
VIDIOC_ENUM_FRAMESIZES = _ioc(_IOC_READ | _IOC_WRITE, 74, _FRMSIZEENUM.size)
VIDIOC_ENUM_FRAMEINTERVALS = _ioc(_IOC_READ | _IOC_WRITE, 75, _FRMIVALENUM.size)

V4L2_CAP_VIDEO_CAPTURE = 0x00000001
V4L2_BUF_TYPE_VIDEO_CAPTURE = 1
V4L2_FRMSIZE_TYPE_DISCRETE = 1
V4L2_FRMIVAL_TYPE_DISCRETE = 1


def pixel_format_name(pixfmt: int) -> str:
    """Return the four-character code of a V4L2 pixel format."""
    return "".join(chr((pixfmt >> shift) & 0xFF) for shift in (0, 8, 16, 24))


def version_string(version: int) -> str:
    """Format a kernel version number as ``major.minor.patch``."""
    return f"{(version >> 16) & 0xFFFF}.{(version >> 8) & 0xFF}.{version & 0xFF}"


def _interval(rate: FrameRate) -> float:
    if rate.denom == 0:
        return float("inf")
    return rate.num / rate.denom


def sort_frame_rates(rates: Iterable[FrameRate]) -> List[FrameRate]:
    """Return frame rates ordered by frame interval, longest first."""
    return sorted(rates, key=_interval, reverse=True)


def sort_frame_sizes(sizes: Iterable[DiscreteFrameSize]) -> List[DiscreteFrameSize]:
    """Return frame sizes ordered by area, smallest first."""
    return sorted(sizes, key=lambda s: float(s.width) * s.height)


def find_video_devices(device_dir: PathLike = "/dev") -> List[Path]:
    """Return unique character devices named ``video*`` in ``device_dir``.

    Symbolic links are resolved to their targets.
    """
    base = Path(device_dir)
    try:
        entries = sorted(os.scandir(base), key=lambda e: e.name)
    except OSError as exc:
        raise IonikError(f"scan directory failure: {base}: {exc.strerror or exc}", exc.errno) from exc

    found: List[Path] = []
    for entry in entries:
        if not entry.name.startswith("video"):
            continue
        path = base / entry.name
        try:
            if not stat.S_ISCHR(os.stat(path).st_mode):
                continue
            target = path.resolve() if path.is_symlink() else path
        except OSError:
            continue
        if target not in found:
            found.append(target)
    return found


def _xioctl(fd: int, request: int, buf: bytearray) -> bool:
    while True:
        try:
            fcntl.ioctl(fd, request, buf, True)
            return True
        except InterruptedError:
            continue
        except OSError:
            return False


def _cstr(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", "replace")


def _current_format(fd: int) -> Optional[Tuple[int, int, int]]:
    buf = bytearray(_FORMAT_SIZE)
    struct.pack_into("=I", buf, 0, V4L2_BUF_TYPE_VIDEO_CAPTURE)
    if not _xioctl(fd, VIDIOC_G_FMT, buf):
        return None
    width, height, pixfmt = _PIX_FORMAT_HEAD.unpack_from(buf, _FORMAT_UNION_OFFSET)
    return pixfmt, width, height


def _enum_formats(fd: int) -> Iterator[Tuple[int, int, str]]:
    index = 0
    while True:
        buf = bytearray(_FMTDESC.pack(index, V4L2_BUF_TYPE_VIDEO_CAPTURE, 0, b"", 0, 0))
        if not _xioctl(fd, VIDIOC_ENUM_FMT, buf):
            return
        idx, _type, _flags, desc, pixfmt, _mbus = _FMTDESC.unpack(buf)
        yield idx, pixfmt, _cstr(desc)
        index += 1


def _enum_frame_sizes(fd: int, pixfmt: int) -> Iterator[Tuple[int, int]]:
    index = 0
    while True:
        buf = bytearray(_FRMSIZEENUM.pack(index, pixfmt, 0, 0, 0))
        if not _xioctl(fd, VIDIOC_ENUM_FRAMESIZES, buf):
            return
        _idx, _fmt, kind, width, height = _FRMSIZEENUM.unpack(buf)
        if kind == V4L2_FRMSIZE_TYPE_DISCRETE:
            yield width, height
        index += 1


def _enum_frame_rates(fd: int, pixfmt: int, width: int, height: int) -> Iterator[FrameRate]:
    index = 0
    while True:
        buf = bytearray(_FRMIVALENUM.pack(index, pixfmt, width, height, 0, 0, 0))
        if not _xioctl(fd, VIDIOC_ENUM_FRAMEINTERVALS, buf):
            return
        *_, kind, num, denom = _FRMIVALENUM.unpack(buf)
        if kind == V4L2_FRMIVAL_TYPE_DISCRETE:
            yield FrameRate(num, denom)
        index += 1


def _query_device(fd: int, path: Path) -> Optional[CaptureDeviceInfo]:
    buf = bytearray(_CAPABILITY.size)
    if not _xioctl(fd, VIDIOC_QUERYCAP, buf):
        return None
    driver, card, bus, version, capabilities, _device_caps = _CAPABILITY.unpack(buf)
    if not capabilities & V4L2_CAP_VIDEO_CAPTURE:
        return None

    dev_id = os.fspath(path)
    info = CaptureDeviceInfo(
        subsystem=Subsystem.VIDEO4LINUX2,
        id=dev_id,
        readable_name=_cstr(card),
        orientation=0,
        data={
            "path": dev_id,
            "driver": _cstr(driver),
            "card": _cstr(card),
            "bus": _cstr(bus),
            "version": version_string(version),
        },
    )

    current_pixfmt = 0
    current = _current_format(fd)
    if current is not None:
        current_pixfmt, info.current_frame_size.width, info.current_frame_size.height = current

    for index, pixfmt, description in _enum_formats(fd):
        if pixfmt == current_pixfmt:
            info.current_pixel_format_index = index
        sizes = [
            DiscreteFrameSize(
                width,
                height,
                sort_frame_rates(_enum_frame_rates(fd, pixfmt, width, height)),
            )
            for width, height in _enum_frame_sizes(fd, pixfmt)
        ]
        info.pixel_formats.append(
            PixelFormat(pixel_format_name(pixfmt), description, sort_frame_sizes(sizes))
        )
    return info


def fetch_capture_devices(device_dir: PathLike = "/dev") -> List[CaptureDeviceInfo]:
    """Return the video capture devices found in ``device_dir``.

    Devices that cannot be opened or queried are skipped.
    """
    if fcntl is None:
        raise IonikError("video4linux2 is not available on this platform")

    result: List[CaptureDeviceInfo] = []
    for path in find_video_devices(device_dir):
        try:
            fd = os.open(path, os.O_RDWR)
        except OSError:
            continue
        try:
            info = _query_device(fd, path)
        finally:
            os.close(fd)
        if info is not None:
            result.append(info)
    return result
import errno
import os

import pytest

from ionik.errors import IonikError
from ionik.local_file import LocalFile, TruncateMode, read_file, rewrite_file


@pytest.fixture
def sample_path(tmp_path):
    return tmp_path / "sample.ionik"


def test_local_file(sample_path):
    binary_data = bytes(range(256))

    test_file = LocalFile.open_write_only(sample_path)
    assert bool(test_file) is True
    written = test_file.write(binary_data)
    test_file.close()
    assert written == len(binary_data)

    test_file = LocalFile.open_read_only(sample_path)
    assert bool(test_file) is True
    content = test_file.read_all()
    assert len(content) == len(binary_data)
    assert content == binary_data
    assert test_file.offset() == len(content)

    test_file.set_pos(0)
    assert test_file.offset() == 0

    with pytest.raises(IonikError) as info:
        test_file.set_pos(len(content) + 1)
    assert info.value.code == errno.EINVAL
    test_file.close()

    test_file = LocalFile.open_read_only(sample_path)
    assert bool(test_file) is True
    assert test_file.read(1) == b"\x00"
    assert test_file.read(1) == b"\x01"
    test_file.set_pos(127)
    assert test_file.read(1) == b"\x7f"
    test_file.close()


def test_initial_size(sample_path):
    initial_size = 10 * 1024 * 1024
    test_file = LocalFile.open_write_only(sample_path, TruncateMode.ON, initial_size)
    test_file.close()
    assert os.path.getsize(sample_path) == initial_size


def test_close_invalidates(sample_path):
    f = LocalFile.open_write_only(sample_path)
    assert f.native() >= 0
    f.close()
    assert bool(f) is False
    assert f.native() == -1
    f.close()
    assert bool(f) is False


def test_context_manager_closes(sample_path):
    rewrite_file(sample_path, b"abc")
    with LocalFile.open_read_only(sample_path) as f:
        assert f.read_all() == b"abc"
    assert bool(f) is False


def test_read_at_eof_returns_empty(sample_path):
    rewrite_file(sample_path, b"xy")
    with LocalFile.open_read_only(sample_path) as f:
        assert f.read(10) == b"xy"
        assert f.read(10) == b""


def test_skip(sample_path):
    rewrite_file(sample_path, bytes(range(16)))
    with LocalFile.open_read_only(sample_path) as f:
        f.skip(5)
        assert f.read(1) == b"\x05"
        with pytest.raises(IonikError):
            f.skip(100)


def test_set_pos_at_size_is_out_of_bounds(sample_path):
    rewrite_file(sample_path, b"1234")
    with LocalFile.open_read_only(sample_path) as f:
        with pytest.raises(IonikError):
            f.set_pos(4)
        f.set_pos(3)
        assert f.read(1) == b"4"


def test_truncated_file_has_zero_size(sample_path):
    rewrite_file(sample_path, b"old content")
    with LocalFile.open_write_only(sample_path, TruncateMode.ON) as f:
        assert f.size == 0
        with pytest.raises(IonikError):
            f.set_pos(0)
    assert os.path.getsize(sample_path) == 0


def test_write_only_without_truncate_keeps_content(sample_path):
    rewrite_file(sample_path, b"hello world")
    with LocalFile.open_write_only(sample_path) as f:
        assert f.size == 11
        f.set_pos(6)
        assert f.write(b"WORLD") == 5
    assert read_file(sample_path) == b"hello WORLD"


def test_rewrite_and_read_round_trip(sample_path):
    assert rewrite_file(sample_path, "text content") == 12
    assert read_file(sample_path) == b"text content"
    assert rewrite_file(sample_path, b"short") == 5
    assert read_file(sample_path) == b"short"


def test_read_all_larger_than_chunk(sample_path):
    data = bytes(i % 251 for i in range(5000))
    rewrite_file(sample_path, data)
    assert read_file(sample_path) == data


def test_open_missing_file_raises(tmp_path):
    with pytest.raises(IonikError) as info:
        LocalFile.open_read_only(tmp_path / "missing.ionik")
    assert info.value.code == errno.ENOENT
    with pytest.raises(IonikError):
        read_file(tmp_path / "missing.ionik")


def test_read_after_close_raises(sample_path):
    rewrite_file(sample_path, b"data")
    f = LocalFile.open_read_only(sample_path)
    f.close()
    with pytest.raises(IonikError):
        f.read(1)
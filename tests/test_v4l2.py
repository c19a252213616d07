import os
from pathlib import Path

import pytest

from ionik.errors import IonikError
from ionik.video.capture_device import DiscreteFrameSize, FrameRate
from ionik.video.v4l2 import (
    fetch_capture_devices,
    find_video_devices,
    pixel_format_name,
    sort_frame_rates,
    sort_frame_sizes,
    version_string,
)


@pytest.mark.parametrize("code", ["YUYV", "MJPG", "GRBG"])
def test_pixel_format_name_round_trip(code):
    assert pixel_format_name(int.from_bytes(code.encode("ascii"), "little")) == code


def test_pixel_format_name_is_four_characters():
    assert len(pixel_format_name(0)) == 4


def test_version_string():
    assert version_string((5 << 16) | (15 << 8) | 3) == "5.15.3"


def test_version_string_masks_fields():
    assert version_string(0) == "0.0.0"


def test_sort_frame_rates_longest_interval_first():
    rates = [FrameRate(1, 30), FrameRate(1, 15), FrameRate(1, 60)]
    result = sort_frame_rates(rates)
    assert [r.denom for r in result] == [15, 30, 60]
    fps = [r.fps() for r in result]
    assert fps == sorted(fps)


def test_sort_frame_rates_keeps_all():
    rates = [FrameRate(1, 30), FrameRate(1001, 30000), FrameRate(1, 5)]
    assert sorted(map(repr, sort_frame_rates(rates))) == sorted(map(repr, rates))


def test_sort_frame_sizes_by_area():
    sizes = [DiscreteFrameSize(1920, 1080), DiscreteFrameSize(320, 240), DiscreteFrameSize(640, 480)]
    result = sort_frame_sizes(sizes)
    assert [(s.width, s.height) for s in result] == [(320, 240), (640, 480), (1920, 1080)]


def test_find_video_devices_resolves_symlinks_and_dedups(tmp_path):
    os.symlink(os.devnull, tmp_path / "video0")
    os.symlink(os.devnull, tmp_path / "video2")
    os.symlink(os.devnull, tmp_path / "audio0")
    assert find_video_devices(tmp_path) == [Path(os.devnull).resolve()]


def test_find_video_devices_ignores_regular_files(tmp_path):
    (tmp_path / "video0").write_bytes(b"")
    assert find_video_devices(tmp_path) == []


def test_find_video_devices_missing_directory(tmp_path):
    with pytest.raises(IonikError):
        find_video_devices(tmp_path / "missing")


def test_fetch_skips_devices_that_are_not_video(tmp_path):
    os.symlink(os.devnull, tmp_path / "video0")
    assert fetch_capture_devices(tmp_path) == []


def test_fetch_missing_directory(tmp_path):
    with pytest.raises(IonikError):
        fetch_capture_devices(tmp_path / "missing")
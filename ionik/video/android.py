"""Capture device descriptions built from Android camera characteristics."""

from __future__ import annotations

import enum
from typing import Dict, Iterable, List, Optional, Tuple

from ionik.video.capture_device import (
    CaptureDeviceInfo,
    DiscreteFrameSize,
    FrameRate,
    PixelFormat,
    Subsystem,
)

CAPABILITY_BACKWARD_COMPATIBLE = 0
"""Capability value of a camera that supports the standard capture modes."""

_MAX_FPS = 199

FpsRange = Tuple[int, int]
StreamConfiguration = Tuple[int, int, int, int]


class ImageFormat(enum.IntEnum):
    """Image formats a camera may report in its stream configurations."""

    RGBA_8888 = 0x1
    RGBX_8888 = 0x2
    RGB_888 = 0x3
    RGB_565 = 0x4
    RGBA_FP16 = 0x16
    YUV_420_888 = 0x23
    JPEG = 0x100
    RAW16 = 0x20
    RAW_PRIVATE = 0x24
    RAW10 = 0x25
    RAW12 = 0x26
    DEPTH16 = 0x44363159
    DEPTH_POINT_CLOUD = 0x101
    PRIVATE = 0x22
    Y8 = 0x20203859
    HEIC = 0x48454946
    DEPTH_JPEG = 0x69656963


class LensFacing(enum.IntEnum):
    """Direction a camera lens faces."""

    FRONT = 0
    BACK = 1
    EXTERNAL = 2


_IMAGE_FORMAT_NAMES: Dict[int, Tuple[str, str]] = {
    ImageFormat.RGBA_8888: ("AB24", "32 bits RGBA"),
    ImageFormat.RGBX_8888: ("XB24", "32 bits RGBX"),
    ImageFormat.RGB_888: ("RGB3", "24 bits RGB"),
    ImageFormat.RGB_565: ("RGBP", "16 bits RGB"),
    ImageFormat.RGBA_FP16: ("FP16", "64 bits RGBA"),
    ImageFormat.YUV_420_888: ("YV12", "Multi-plane YUV 420"),
    ImageFormat.JPEG: ("JPEG", "Compressed JPEG"),
    ImageFormat.RAW16: ("RW16", "16 bits per pixel raw camera sensor image"),
    ImageFormat.RAW_PRIVATE: ("RWPV", "Private raw camera sensor image"),
    ImageFormat.RAW10: ("RW10", "Android 10-bit raw"),
    ImageFormat.RAW12: ("RW12", "Android 10-bit raw"),
    ImageFormat.DEPTH16: ("DP16", "Android dense depth image"),
    ImageFormat.DEPTH_POINT_CLOUD: ("ADPC", "Android sparse depth point cloud format"),
    ImageFormat.PRIVATE: ("APRV", "Android private opaque image"),
    ImageFormat.Y8: ("APY8", "Android private opaque image"),
    ImageFormat.HEIC: ("HEIC", "Compressed HEIC"),
    ImageFormat.DEPTH_JPEG: ("HEIC", "Depth augmented compressed JPEG"),
}

_FACING_NAMES: Dict[int, str] = {
    LensFacing.FRONT: "Front",
    LensFacing.BACK: "Rear",
    LensFacing.EXTERNAL: "External",
}

_FACING_CODES: Dict[int, str] = {
    LensFacing.FRONT: "0",
    LensFacing.BACK: "1",
    LensFacing.EXTERNAL: "2",
}


def image_format_name(format_id: int) -> Tuple[str, str]:
    """Return the four-character name and description of an image format."""
    known = _IMAGE_FORMAT_NAMES.get(format_id)
    if known is not None:
        return known
    return f"{format_id:x}", f"Unknown image format {format_id:x}"


def stringify_camera_facing(facing: Optional[int]) -> str:
    """Return a readable name of the lens facing."""
    return _FACING_NAMES.get(facing, "Unknown camera facing")


def encode_camera_facing(facing: Optional[int]) -> str:
    """Return the one-character code of the lens facing ("?" if unknown)."""
    return _FACING_CODES.get(facing, "?")


def _valid_range(fps_range: FpsRange) -> bool:
    min_fps, max_fps = fps_range
    if min_fps > _MAX_FPS or max_fps > _MAX_FPS:
        return False
    return min_fps >= 0 and max_fps >= 0


def select_frame_rates(fps_ranges: Iterable[FpsRange]) -> List[FpsRange]:
    """Pick the usable (min, max) FPS ranges, ordered by minimum.

    Ranges with a value above 199 or below 0 are dropped. Fixed ranges
    (min equal to max) are preferred; only when there are none are the
    remaining variable ranges used.
    """
    valid = [(int(lo), int(hi)) for lo, hi in fps_ranges if _valid_range((lo, hi))]
    fixed = [r for r in valid if r[0] == r[1]]
    chosen = fixed if fixed else valid
    return sorted(chosen, key=lambda r: r[0])


def group_stream_configurations(
    configurations: Iterable[StreamConfiguration],
) -> Dict[int, List[Tuple[int, int]]]:
    """Group output stream configurations by image format.

    Each configuration is ``(format, width, height, is_input)``. Input
    streams and configurations with a zero dimension are skipped. The
    result is ordered by format id.
    """
    grouped: Dict[int, List[Tuple[int, int]]] = {}
    for image_format, width, height, is_input in configurations:
        if is_input:
            continue
        if width == 0 or height == 0:
            continue
        grouped.setdefault(image_format, []).append((width, height))
    return {key: grouped[key] for key in sorted(grouped)}


def build_capture_device(
    camera_id: str,
    capabilities: Iterable[int] = (),
    facing: Optional[int] = None,
    orientation: int = 0,
    stream_configurations: Iterable[StreamConfiguration] = (),
    fps_ranges: Iterable[FpsRange] = (),
) -> CaptureDeviceInfo:
    """Describe a camera from the characteristics it reports.

    The pixel format chosen as current is YUV 420 when the camera offers
    it, otherwise the first one. Frame sizes are ordered by area.
    """
    backward_compatible = CAPABILITY_BACKWARD_COMPATIBLE in set(capabilities)
    frame_rates = select_frame_rates(fps_ranges)

    info = CaptureDeviceInfo(
        subsystem=Subsystem.CAMERA2ANDROID,
        id=camera_id,
        readable_name=f"{stringify_camera_facing(facing)} ({camera_id})",
        orientation=int(orientation),
        data={
            "backward_compatible": "1" if backward_compatible else "0",
            "facing": encode_camera_facing(facing),
        },
        current_pixel_format_index=0,
    )

    grouped = group_stream_configurations(stream_configurations)
    for index, (image_format, resolutions) in enumerate(grouped.items()):
        if image_format == ImageFormat.YUV_420_888:
            info.current_pixel_format_index = index
        name, description = image_format_name(image_format)
        sizes = [
            DiscreteFrameSize(
                width,
                height,
                [FrameRate(1, max_fps, 1, min_fps) for min_fps, max_fps in frame_rates],
            )
            for width, height in resolutions
        ]
        sizes.sort(key=lambda s: float(s.width) * s.height)
        info.pixel_formats.append(PixelFormat(name, description, sizes))

    return info
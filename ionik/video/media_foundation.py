"""Capture device descriptions built from Media Foundation media types."""

from __future__ import annotations

import uuid
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ionik.errors import IonikError
from ionik.video.capture_device import (
    CaptureDeviceInfo,
    DiscreteFrameSize,
    FrameRate,
    FrameSize,
    PixelFormat,
    Subsystem,
)

Subtype = Union[uuid.UUID, str]
Ratio = Tuple[int, int]
MediaType = Tuple[Subtype, int, int, Ratio, Ratio]
"""A native media type: ``(subtype, width, height, max_rate, min_rate)``."""


def _media_type_guid(data1: int) -> uuid.UUID:
    # Media subtypes share one base GUID and differ only in the first field.
    return uuid.UUID(fields=(data1, 0x0000, 0x0010, 0x80, 0x00, 0x00AA00389B71))


def _fourcc(code: str) -> uuid.UUID:
    return _media_type_guid(int.from_bytes(code.encode("ascii"), "little"))


_D3DFMT_R8G8B8 = 20
_D3DFMT_A8R8G8B8 = 21
_D3DFMT_X8R8G8B8 = 22
_D3DFMT_R5G6B5 = 23
_D3DFMT_X1R5G5B5 = 24
_D3DFMT_P8 = 41
_D3DFMT_L8 = 50
_D3DFMT_D16 = 80
_D3DFMT_L16 = 81

_VIDEO_FORMATS: Dict[uuid.UUID, Tuple[str, str]] = {
    _media_type_guid(_D3DFMT_X8R8G8B8): ("RGB4", "32-bit RGB"),
    _media_type_guid(_D3DFMT_A8R8G8B8): ("BA4 ", "32-bit RGB with alpha channel"),
    _media_type_guid(_D3DFMT_R8G8B8): ("RGB3", "24-bit RGB"),
    _media_type_guid(_D3DFMT_X1R5G5B5): ("RGBO", "16-bit RGB 555"),
    _media_type_guid(_D3DFMT_R5G6B5): ("RGBP", "16-bit RGB 565"),
    _media_type_guid(_D3DFMT_P8): ("RGB8", "8-bit RGB"),
    # Luminance and depth formats
    _media_type_guid(_D3DFMT_L8): ("L8  ", "8-bit luminance only"),
    _media_type_guid(_D3DFMT_L16): ("L16 ", "16-bit luminance only"),
    _media_type_guid(_D3DFMT_D16): ("D16 ", "16-bit z-buffer depth"),
    # YUV formats
    _fourcc("AI44"): ("AI44", "AI44 YUV format"),
    _fourcc("AYUV"): ("AYUV", "AYUV YUV format"),
    _fourcc("YUY2"): ("YUY2", "YUY2 YUV format"),
    _fourcc("YVYU"): ("YVYU", "YVYU YUV format"),
    _fourcc("YVU9"): ("YVU9", "YVU9 YUV format"),
    _fourcc("UYVY"): ("UYVY", "UYVY YUV format"),
    _fourcc("NV11"): ("NV11", "NV11 YUV format"),
    _fourcc("NV12"): ("NV12", "NV12 YUV format"),
    _fourcc("NV21"): ("NV21", "NV21 YUV format"),
    _fourcc("YV12"): ("YV12", "YV12 YUV format"),
    _fourcc("I420"): ("I420", "I420 YUV format"),
    _fourcc("IYUV"): ("IYUV", "IYUV YUV format"),
    _fourcc("Y210"): ("Y210", "Y210 YUV format"),
    _fourcc("Y216"): ("Y216", "Y216 YUV format"),
    _fourcc("Y410"): ("Y410", "Y410 YUV format"),
    _fourcc("Y416"): ("Y416", "Y416 YUV format"),
    _fourcc("Y41P"): ("Y41P", "Y41P YUV format"),
    _fourcc("Y41T"): ("Y41T", "Y41T YUV format"),
    _fourcc("Y42T"): ("Y42T", "Y42T YUV format"),
    _fourcc("P210"): ("P210", "P210 YUV format"),
    _fourcc("P216"): ("P216", "P216 YUV format"),
    _fourcc("P010"): ("P010", "P010 YUV format"),
    _fourcc("P016"): ("P016", "P016 YUV format"),
    _fourcc("v210"): ("V210", "v210 YUV format"),
    _fourcc("v216"): ("V216", "v216 YUV format"),
    _fourcc("v410"): ("V410", "v410 YUV format"),
    _fourcc("420O"): ("420O", "8-bit per channel planar YUV 4:2:0 video"),
    # Encoded video types
    _fourcc("MP43"): ("MP43", "Microsoft MPEG 4 codec version 3"),
    _fourcc("MP4S"): ("MP4S", "ISO MPEG 4 codec version 1"),
    _fourcc("M4S2"): ("M4S2", "MPEG-4 part 2 video (M4S2)"),
    _fourcc("MP4V"): ("MP4V", "MPEG-4 part 2 video (MP4V)"),
    _fourcc("WMV1"): ("WMV1", "Windows Media Video codec version 7"),
    _fourcc("WMV2"): ("WMV2", "Windows Media Video 8 codec"),
    _fourcc("WMV3"): ("WMV3", "Windows Media Video 9 codec"),
    _fourcc("WVC1"): ("WVC1", "SMPTE 421M"),
    _fourcc("MSS1"): ("MSS1", "Windows Media Screen codec version 1"),
    _fourcc("MSS2"): ("MSS2", "Windows Media Video 9 Screen codec"),
    _fourcc("MPG1"): ("MPG1", "MPEG-1 video"),
    _fourcc("dvsl"): ("DVSL", "SD-DVCR"),
    _fourcc("dvsd"): ("DVSD", "SDL-DVCR"),
    _fourcc("dvhd"): ("DVHD", "HD-DVCR"),
    _fourcc("dv25"): ("DV25", "DVCPRO 25"),
    _fourcc("dv50"): ("DV50", "DVCPRO 50"),
    _fourcc("dvh1"): ("DVH1", "DVCPRO 100"),
    _fourcc("dvc "): ("DVC ", "DVC/DV Video"),
    _fourcc("H264"): ("H264", "H.264 video"),
    _fourcc("H265"): ("H265", "H.265 video"),
    _fourcc("MJPG"): ("MJPG", "Motion JPEG"),
    _fourcc("HEVC"): ("HEVC", "HEVC"),
    _fourcc("HEVS"): ("HEVS", "HEVS"),
    _fourcc("VP80"): ("VP80", "VP8 video"),
    _fourcc("VP90"): ("VP90", "VP9 video"),
    _fourcc("ORAW"): ("ORAW", ""),
    _fourcc("H263"): ("H263", "H.263 video"),
    _fourcc("VP10"): ("VP10", "VP10"),
    _fourcc("AV01"): ("AV01", "AV1 video"),
}


def _as_guid(subtype: Subtype) -> uuid.UUID:
    if isinstance(subtype, uuid.UUID):
        return subtype
    try:
        return uuid.UUID(subtype)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid media subtype GUID: {subtype!r}") from exc


def video_format(subtype: Subtype) -> Optional[Tuple[str, str]]:
    """Return the four-character name and description of a video subtype.

    ``None`` is returned for subtypes that are not recognised.
    """
    return _VIDEO_FORMATS.get(_as_guid(subtype))


def make_pixel_format(
    subtype: Subtype,
    width: int,
    height: int,
    max_rate: Ratio = (0, 0),
    min_rate: Ratio = (0, 0),
) -> Optional[PixelFormat]:
    """Describe one media type as a pixel format with a single frame size.

    Rates are ``(numerator, denominator)`` pairs of the frame rate range.
    ``None`` is returned when the subtype is not recognised.
    """
    names = video_format(subtype)
    if names is None:
        return None
    name, description = names
    max_num, max_denom = max_rate
    min_num, min_denom = min_rate
    rate = FrameRate(num=max_num, denom=max_denom, min_num=min_num, min_denom=min_denom)
    return PixelFormat(name, description, [DiscreteFrameSize(width, height, [rate])])


def merge_pixel_format(pixel_formats: List[PixelFormat], pxf: PixelFormat) -> None:
    """Merge a single-size pixel format into ``pixel_formats`` in place.

    A new format name is appended; a known name gains the frame size, or,
    when that size is already listed, its frame rate.
    """
    existing = next((p for p in pixel_formats if p.name == pxf.name), None)
    if existing is None:
        pixel_formats.append(pxf)
        return

    size = pxf.discrete_frame_sizes[0]
    known_size = next(
        (
            s
            for s in existing.discrete_frame_sizes
            if s.width == size.width and s.height == size.height
        ),
        None,
    )
    if known_size is None:
        existing.discrete_frame_sizes.append(size)
    else:
        known_size.frame_rates.append(size.frame_rates[0])


def build_capture_device(
    device_id: str,
    readable_name: str,
    media_types: Iterable[MediaType],
    current: MediaType,
) -> CaptureDeviceInfo:
    """Describe a capture device from its native and current media types.

    Unrecognised native media types are skipped. Raises IonikError when the
    current media type is not recognised or matches none of the formats.
    """
    info = CaptureDeviceInfo(
        subsystem=Subsystem.WINDOWS,
        id=device_id,
        readable_name=readable_name,
        orientation=0,
    )

    for media_type in media_types:
        pxf = make_pixel_format(*media_type)
        if pxf is not None:
            merge_pixel_format(info.pixel_formats, pxf)

    current_pxf = make_pixel_format(*current)
    if current_pxf is None:
        raise IonikError("unsupported current media type for video capture device")

    for index, pxf in enumerate(info.pixel_formats):
        if pxf.description == current_pxf.description:
            size = current_pxf.discrete_frame_sizes[0]
            info.current_pixel_format_index = index
            info.current_frame_size = FrameSize(size.width, size.height)
            return info

    raise IonikError(
        "none of the pixel formats match current one for video capture device: "
        f"{readable_name}"
    )
"""Video capture device descriptions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, Iterable, List


class Subsystem(enum.Enum):
    """Video subsystem a capture device belongs to."""

    VIDEO4LINUX2 = enum.auto()
    CAMERA2ANDROID = enum.auto()
    WINDOWS = enum.auto()


@dataclass
class FrameSize:
    """Frame dimensions in pixels."""

    width: int = 0
    height: int = 0


@dataclass
class FrameRate:
    """A frame interval ``num / denom`` seconds, i.e. ``denom / num`` FPS.

    ``min_num`` and ``min_denom`` describe the lower end of a range where
    the platform reports one (Android, Windows); otherwise they are zero.
    """

    num: int = 0
    denom: int = 0
    min_num: int = 0
    min_denom: int = 0

    def fps(self) -> float:
        """Frames per second."""
        if self.num == 0:
            raise ValueError("frame rate numerator is zero")
        return self.denom / self.num


@dataclass
class DiscreteFrameSize(FrameSize):
    """A frame size with the frame rates supported for it."""

    frame_rates: List[FrameRate] = field(default_factory=list)


@dataclass
class PixelFormat:
    """A pixel format: four-character name, description and frame sizes."""

    name: str = ""
    description: str = ""
    discrete_frame_sizes: List[DiscreteFrameSize] = field(default_factory=list)


@dataclass
class CaptureDeviceInfo:
    """A video capture device.

    ``id`` is the device path for video4linux2 and the camera id on Android.
    ``data`` holds subsystem-specific values: ``driver``, ``card``, ``path``,
    ``bus`` and ``version`` for video4linux2; ``backward_compatible`` and
    ``facing`` on Android.
    """

    subsystem: Subsystem = Subsystem.VIDEO4LINUX2
    id: str = ""
    readable_name: str = ""
    orientation: int = 0
    data: Dict[str, str] = field(default_factory=dict)
    pixel_formats: List[PixelFormat] = field(default_factory=list)
    current_pixel_format_index: int = 0
    current_frame_size: FrameSize = field(default_factory=FrameSize)


def sanitize_capture_devices(devices: Iterable[CaptureDeviceInfo]) -> List[CaptureDeviceInfo]:
    """Return the devices that are complete, i.e. have at least one pixel format."""
    return [dev for dev in devices if dev.pixel_formats]
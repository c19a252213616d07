"""Audio device descriptions."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class DeviceMode(enum.IntEnum):
    """Direction of an audio device."""

    OUTPUT = 0x01
    INPUT = 0x02


@dataclass
class AudioDeviceInfo:
    """An audio device: its system name and a human-readable name."""

    name: str = ""
    readable_name: str = ""
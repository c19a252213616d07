"""WAV description records and views of raw sample data as frames."""

from __future__ import annotations

import enum
import struct
import sys
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple, Union


class Endian(enum.Enum):
    """Byte order of sample data."""

    LITTLE = "little"
    BIG = "big"

    @classmethod
    def native(cls) -> "Endian":
        """Byte order of the running platform."""
        return cls(sys.byteorder)


class DurationPrecision(enum.Enum):
    """Smallest unit shown when a duration is turned into text."""

    MICROSECONDS = enum.auto()
    MILLISECONDS = enum.auto()
    SECONDS = enum.auto()
    MINUTES = enum.auto()
    HOURS = enum.auto()


@dataclass
class WavChunkInfo:
    """A RIFF chunk: its id, size and the file offset of its data."""

    id: int = 0
    size: int = 0
    start_offset: int = 0


@dataclass
class WavInfo:
    """Parameters read from a WAV header."""

    byte_order: Endian = Endian.LITTLE
    audio_format: int = 0  # 1 -> PCM
    num_channels: int = 0
    sample_rate: int = 0
    sample_size: int = 0  # bits per sample
    byte_rate: int = 0
    sample_count: int = 0
    frame_count: int = 0
    duration: int = 0  # microseconds
    data: WavChunkInfo = field(default_factory=WavChunkInfo)
    extra: List[WavChunkInfo] = field(default_factory=list)


def is_mono8(info: WavInfo) -> bool:
    return info.sample_size <= 8 and info.num_channels == 1


def is_stereo8(info: WavInfo) -> bool:
    return info.sample_size <= 8 and info.num_channels == 2


def is_mono16(info: WavInfo) -> bool:
    return info.sample_size <= 16 and info.num_channels == 1


def is_stereo16(info: WavInfo) -> bool:
    return info.sample_size <= 16 and info.num_channels == 2


UnifiedFrame = Tuple[float, float]


@dataclass
class WavSpectrum:
    """Reduced amplitude data of a WAV file; mono frames leave the second value unused."""

    min_frame: UnifiedFrame = (0.0, 0.0)
    max_frame: UnifiedFrame = (0.0, 0.0)
    data: List[UnifiedFrame] = field(default_factory=list)
    info: WavInfo = field(default_factory=WavInfo)


class SampleType(enum.Enum):
    """Sample encodings, stored little endian."""

    U8 = "B"
    S8 = "b"
    U16 = "H"
    S16 = "h"
    F32 = "f"

    @property
    def size(self) -> int:
        """Size of one sample in bytes."""
        return struct.calcsize("<" + self.value)


Sample = Union[int, float]


@dataclass(frozen=True)
class MonoFrame:
    """A frame of one channel."""

    sample: Sample = 0

    @classmethod
    def from_bytes(cls, data: bytes, sample_type: SampleType, offset: int = 0) -> "MonoFrame":
        (sample,) = struct.unpack_from("<" + sample_type.value, data, offset)
        return cls(sample)


@dataclass(frozen=True)
class StereoFrame:
    """A frame of two channels."""

    left: Sample = 0
    right: Sample = 0

    @classmethod
    def from_bytes(cls, data: bytes, sample_type: SampleType, offset: int = 0) -> "StereoFrame":
        left, right = struct.unpack_from("<" + sample_type.value * 2, data, offset)
        return cls(left, right)


Frame = Union[MonoFrame, StereoFrame]


class FrameView:
    """Random-access sequence of frames over raw little-endian sample bytes.

    A trailing partial frame is ignored.
    """

    def __init__(self, data: bytes, sample_type: SampleType, stereo: bool = False) -> None:
        self._data = memoryview(data).cast("B")
        self._sample_type = sample_type
        self._stereo = stereo
        channels = 2 if stereo else 1
        self._format = "<" + sample_type.value * channels
        self._frame_size = sample_type.size * channels

    @property
    def frame_size(self) -> int:
        """Size of one frame in bytes."""
        return self._frame_size

    def __len__(self) -> int:
        return len(self._data) // self._frame_size

    def _make(self, values: tuple) -> Frame:
        return StereoFrame(*values) if self._stereo else MonoFrame(values[0])

    def __getitem__(self, index: int) -> Frame:
        count = len(self)
        if index < 0:
            index += count
        if not 0 <= index < count:
            raise IndexError("frame index out of range")
        return self._make(struct.unpack_from(self._format, self._data, index * self._frame_size))

    def __iter__(self) -> Iterator[Frame]:
        usable = self._data[: len(self) * self._frame_size]
        for values in struct.iter_unpack(self._format, usable):
            yield self._make(values)
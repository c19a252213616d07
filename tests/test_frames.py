import struct

import pytest

from ionik.audio.frames import (
    Endian,
    FrameView,
    MonoFrame,
    SampleType,
    StereoFrame,
    WavChunkInfo,
    WavInfo,
    is_mono8,
    is_mono16,
    is_stereo8,
    is_stereo16,
)

PCM0808M = WavInfo(
    Endian.LITTLE, 1, 1, 8000, 8, 8000, 53499, 53499, 6687375,
    WavChunkInfo(0x64617461, 53499, 44), [],
)

STEREOL = WavInfo(
    Endian.LITTLE, 1, 2, 22050, 16, 88200, 58032, 29016, 1315918,
    WavChunkInfo(0x64617461, 116064, 2136),
    [WavChunkInfo(0x5045414B, 0, 0), WavChunkInfo(0x63756520, 0, 0), WavChunkInfo(0x4C495354, 0, 0)],
)

M1F1_UINT8 = WavInfo(
    Endian.LITTLE, 1, 2, 8000, 8, 16000, 46986, 23493, 2936625,
    WavChunkInfo(0x64617461, 46986, 44), [],
)


def test_pcm0808m_is_mono8():
    assert is_mono8(PCM0808M)
    assert is_mono16(PCM0808M)
    assert not is_stereo8(PCM0808M)
    assert not is_stereo16(PCM0808M)


def test_stereol_is_stereo16():
    assert is_stereo16(STEREOL)
    assert not is_stereo8(STEREOL)
    assert not is_mono16(STEREOL)
    assert STEREOL.frame_count * 2 == STEREOL.sample_count
    assert [chunk.id for chunk in STEREOL.extra] == [0x5045414B, 0x63756520, 0x4C495354]


def test_uint8_stereo_is_stereo8():
    assert is_stereo8(M1F1_UINT8)
    assert is_stereo16(M1F1_UINT8)
    assert not is_mono8(M1F1_UINT8)


def test_s16_stereo_iteration_matches_samples():
    samples = list(range(-3000, 3000, 7))
    if len(samples) % 2:
        samples.append(0)
    raw = struct.pack("<%dh" % len(samples), *samples)
    view = FrameView(raw, SampleType.S16, stereo=True)

    i = 0
    for frame in view:
        assert frame.left == samples[i]
        assert frame.right == samples[i + 1]
        i += 2
    assert i == len(samples)
    assert len(view) == len(samples) // 2


def test_random_access_and_negative_index():
    raw = struct.pack("<4h", 1, 2, 3, 4)
    view = FrameView(raw, SampleType.S16, stereo=True)
    assert view[0] == StereoFrame(1, 2)
    assert view[1] == StereoFrame(3, 4)
    assert view[-1] == view[1]
    with pytest.raises(IndexError):
        view[2]
    with pytest.raises(IndexError):
        view[-3]


def test_partial_trailing_frame_is_ignored():
    raw = struct.pack("<3h", 10, 20, 30)
    view = FrameView(raw, SampleType.S16, stereo=True)
    assert len(view) == 1
    assert list(view) == [StereoFrame(10, 20)]


def test_u8_and_s8_mono_interpretation():
    raw = bytes([0, 255, 128])
    assert [f.sample for f in FrameView(raw, SampleType.U8)] == [0, 255, 128]
    assert [f.sample for f in FrameView(raw, SampleType.S8)] == [0, -1, -128]


def test_f32_stereo_round_trip():
    values = [0.5, -0.25, 1.0, -1.0]
    raw = struct.pack("<4f", *values)
    view = FrameView(raw, SampleType.F32, stereo=True)
    assert view.frame_size == 8
    assert list(view) == [StereoFrame(0.5, -0.25), StereoFrame(1.0, -1.0)]


def test_frame_from_bytes_is_little_endian():
    raw = struct.pack("<H", 0x1234)
    assert MonoFrame.from_bytes(raw, SampleType.U16) == MonoFrame(0x1234)
    raw2 = struct.pack("<2h", -5, 6)
    assert StereoFrame.from_bytes(raw2, SampleType.S16) == StereoFrame(-5, 6)


def test_frame_sizes_per_sample_type():
    raw = bytes(16)
    assert [FrameView(raw, t).frame_size for t in SampleType] == [1, 1, 2, 2, 4]
    assert [FrameView(raw, t, stereo=True).frame_size for t in SampleType] == [2, 2, 4, 4, 8]
    assert [len(FrameView(raw, t)) for t in SampleType] == [16, 16, 8, 8, 4]


def test_native_endian_is_a_member():
    assert Endian.native() in (Endian.LITTLE, Endian.BIG)
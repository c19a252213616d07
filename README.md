# ionik

A small library of system-level building blocks. It has no dependencies
outside the standard library.

## Modules

- `ionik.errors`: `IonikError`, the exception raised by the package. It
  holds a `message` and, where one is known, the `errno` value in `code`.
- `ionik.local_file`: `LocalFile`, a file opened through a raw OS
  descriptor. It has `read`, `read_all`, `write`, `offset`, `set_pos` and
  `skip`, and it works as a context manager. `set_pos` raises `IonikError`
  when the position is outside the size the file had when it was opened.
  `LocalFile.open_write_only` takes a `TruncateMode`. With
  `TruncateMode.ON` the file is truncated and then resized to
  `initial_size`. The helpers `rewrite_file` and `read_file` replace or
  read a whole file.
- `ionik.audio.frames`: WAV description records (`WavInfo`,
  `WavChunkInfo`, `WavSpectrum`, `Endian`, `DurationPrecision`) and the
  predicates `is_mono8`, `is_stereo8`, `is_mono16` and `is_stereo16`.
  `FrameView` is a random-access sequence that decodes raw little-endian
  sample bytes into `MonoFrame` or `StereoFrame` values. A `SampleType`
  selects the sample encoding: `U8`, `S8`, `U16`, `S16` or `F32`.
- `ionik.audio.device`: `DeviceMode` and `AudioDeviceInfo` records.
- `ionik.metrics.counter`: the counter conversions `to_double` and
  `to_integer`. `to_integer` rounds halves away from zero. The module also
  holds the records `OsInfo`, `NetCounterGroup`, `NetworkCounterGroup`,
  `SystemCounterGroup`, `MetricLimits` and `NetworkMetricLimits`.
- `ionik.device_observer`: the `DeviceInfo` record.
- `ionik.filesystem_monitor.callbacks`: `FunctionalCallbacks`, a set of
  optional per-event callbacks.
- `ionik.video.capture_device`: records that describe capture devices
  (`CaptureDeviceInfo`, `PixelFormat`, `DiscreteFrameSize`, `FrameSize`,
  `FrameRate`, `Subsystem`). `sanitize_capture_devices` keeps only the
  devices that have at least one pixel format.
- `ionik.video.v4l2`: finds capture devices through video4linux2.
  - `find_video_devices` lists the `video*` character devices in a
    directory.
  - `fetch_capture_devices` queries each of them with ioctls.
  - The helpers are `pixel_format_name`, `version_string`,
    `sort_frame_rates` and `sort_frame_sizes`.
  - Where `fcntl` is unavailable, `fetch_capture_devices` raises
    `IonikError`.
- `ionik.video.android`: `build_capture_device` turns the characteristics
  an Android camera reports into a `CaptureDeviceInfo`. The values it
  takes are capabilities, lens facing, orientation, stream configurations
  and FPS ranges. The helpers are `image_format_name`,
  `stringify_camera_facing`, `encode_camera_facing`, `select_frame_rates`
  and `group_stream_configurations`.
- `ionik.video.media_foundation`: `build_capture_device` turns Media
  Foundation media types into a `CaptureDeviceInfo`. A media type is given
  as a subtype GUID, a frame size and rate ratios. The helpers are
  `video_format`, `make_pixel_format` and `merge_pixel_format`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from ionik.local_file import LocalFile, TruncateMode, read_file

with LocalFile.open_write_only("data.bin", TruncateMode.ON, 0) as f:
    f.write(bytes(range(256)))

assert read_file("data.bin")[127] == 0x7F
```

```python
import struct
from ionik.audio.frames import FrameView, SampleType

raw = struct.pack("<4h", 1, -1, 2, -2)
view = FrameView(raw, SampleType.S16, stereo=True)
assert len(view) == 2
assert view[1].left == 2 and view[1].right == -2
```

```python
from ionik.video.v4l2 import fetch_capture_devices
from ionik.video.capture_device import sanitize_capture_devices

for dev in sanitize_capture_devices(fetch_capture_devices("/dev")):
    print(dev.readable_name, [p.name for p in dev.pixel_formats])
```

## What the package does not do

- It does not parse or decode WAV files. `WavInfo`, `WavSpectrum` and
  `FrameView` describe and view data that the caller supplies.
- It does not collect system or network metrics. The counter group
  records and limits are data types only.
- It does not watch for devices or filesystem changes, and it does not
  list audio devices. `DeviceInfo`, `FunctionalCallbacks` and
  `AudioDeviceInfo` are records only.
- It does not query Android cameras or Media Foundation itself. Those
  modules build descriptions from values the caller passes in.
- It has no command-line interface.
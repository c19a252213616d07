"""Description of devices reported by a device observer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DeviceInfo:
    """A device that arrived, was removed, bound or unbound.

    ``subsystem`` is e.g. ``block``, ``hid`` or ``usb`` on Linux and
    ``System``, ``Display``, ``USB`` or ``HIDClass`` on Windows.
    ``sysname`` is empty on Windows.
    """

    subsystem: str = ""
    devpath: str = ""
    sysname: str = ""
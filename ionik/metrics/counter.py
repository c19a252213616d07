"""Counter values and the record types filled by metric providers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

Counter = Union[int, float]
"""A counter holds either a 64-bit integer or a floating-point value."""

Range = Tuple[int, int]


def _check_counter(value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"counter must be int or float, got {type(value).__name__}")


def to_double(value: Counter) -> float:
    """Return the counter as a float."""
    _check_counter(value)
    return float(value)


def to_integer(value: Counter) -> int:
    """Return the counter as an integer, rounding halves away from zero."""
    _check_counter(value)
    if isinstance(value, int):
        return value
    if not math.isfinite(value):
        raise ValueError(f"counter value is not finite: {value}")
    magnitude = math.floor(abs(value) + 0.5)
    return -magnitude if value < 0 else magnitude


@dataclass
class OsInfo:
    """Operating system and device description."""

    # Freedesktop compatible
    name: str = ""
    pretty_name: str = ""
    version: str = ""
    version_id: str = ""
    codename: str = ""
    id: str = ""
    id_like: str = ""

    # Device specification
    device_name: str = ""
    cpu_vendor: str = ""
    cpu_brand: str = ""
    ram_installed: float = 0.0  # megabytes

    # Kernel (Linux specific)
    sysname: str = ""
    kernel_release: str = ""
    machine: str = ""


@dataclass
class NetCounterGroup:
    """Traffic totals and speeds of one network interface."""

    rx_bytes: int = 0
    tx_bytes: int = 0
    rx_speed: float = 0.0  # bytes per second
    tx_speed: float = 0.0
    rx_speed_max: float = 0.0
    tx_speed_max: float = 0.0


@dataclass
class NetworkCounterGroup:
    """Network counters together with the interface they belong to."""

    iface: str = ""
    readable_name: str = ""
    rx_bytes: int = 0
    tx_bytes: int = 0
    rx_speed: float = 0.0
    tx_speed: float = 0.0
    rx_speed_max: float = 0.0
    tx_speed_max: float = 0.0


@dataclass
class SystemCounterGroup:
    """System-wide and current-process counters; None where unavailable."""

    cpu_usage_total: Optional[float] = None  # percents
    cpu_usage: Optional[float] = None  # percents

    ram_total: Optional[int] = None  # bytes
    ram_free: Optional[int] = None  # bytes
    ram_usage_total: Optional[float] = None  # percents
    swap_total: Optional[int] = None  # bytes
    swap_free: Optional[int] = None  # bytes
    swap_usage_total: Optional[float] = None  # percents

    mem_usage: Optional[int] = None  # bytes
    mem_peak_usage: Optional[int] = None  # bytes
    swap_usage: Optional[int] = None  # bytes


@dataclass
class MetricLimits:
    """Ranges used to generate random system metrics."""

    precision: int = 2
    cpu_usage_total_range: Range = (15, 20)  # percents
    cpu_usage_range: Range = (5, 10)  # percents
    ram_total: int = 16 * 1024 * 1024 * 1024  # bytes
    ram_free_range: Range = (90, 95)  # percents
    swap_total: int = 2 * 1024 * 1024 * 1024  # bytes
    swap_free_range: Range = (98, 100)  # percents
    mem_usage: Range = (3, 5)  # percents


@dataclass
class NetworkMetricLimits:
    """Ranges of per-query byte increments for random network metrics."""

    rx_bytes_inc: Range = (150, 2000)
    tx_bytes_inc: Range = (150, 2000)
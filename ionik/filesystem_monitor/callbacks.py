"""Callbacks invoked by a filesystem monitor."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

PathCallback = Optional[Callable[[Path], None]]


@dataclass
class FunctionalCallbacks:
    """Per-event callbacks; an unset callback is ``None`` and is not called.

    Every event is reported by inotify; ``modified``, ``created``,
    ``deleted`` and ``moved`` are also reported on Windows.
    """

    accessed: PathCallback = None
    modified: PathCallback = None
    metadata_changed: PathCallback = None
    opened: PathCallback = None
    closed: PathCallback = None
    created: PathCallback = None
    deleted: PathCallback = None
    moved: PathCallback = None
"""Local files, WAV frame views, metric records and video capture device descriptions."""

__version__ = "0.1.0"
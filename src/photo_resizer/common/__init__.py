"""Common module - schemas and errors."""

from .errors import ResizeError
from .schemas import GrayscaleFilter, ImageInfo, ResizeJob, ResizerSettings, ResizeResult

__all__ = [
    "ResizeError",
    "GrayscaleFilter",
    "ResizeJob",
    "ResizerSettings",
    "ResizeResult",
    "ImageInfo",
]

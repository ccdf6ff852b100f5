"""photo_resizer - Resize JPEG images while keeping their aspect ratio."""

from .common.errors import (
    CapabilityUnavailable,
    ConfigurationError,
    DecodeError,
    PreconditionError,
    ProcessingError,
    ResizeError,
    SizeError,
    UnsupportedFormatError,
)
from .common.schemas import GrayscaleFilter, ImageInfo, ResizeJob, ResizerSettings, ResizeResult
from .resizer import ImageResizer, Reporter

__version__ = "0.1.0"

__all__ = [
    "ImageResizer",
    "Reporter",
    "ResizerSettings",
    "GrayscaleFilter",
    "ResizeJob",
    "ResizeResult",
    "ImageInfo",
    "ResizeError",
    "ConfigurationError",
    "CapabilityUnavailable",
    "PreconditionError",
    "DecodeError",
    "UnsupportedFormatError",
    "SizeError",
    "ProcessingError",
    "__version__",
]

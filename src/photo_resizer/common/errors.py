"""Exception taxonomy for the image resizer.

Algorithm functions raise these; ``ImageResizer.resize`` turns them into a
failed ``ResizeResult`` so none of them escapes a resize call.
"""


class ResizeError(Exception):
    """Base class for every failure the resizer can report."""

    def __init__(self, message: str = "An unknown resize error occurred."):
        self.message: str = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ConfigurationError(ResizeError):
    """Invalid or empty settings, or an invalid resize request."""


class CapabilityUnavailable(ResizeError):
    """An image-processing capability is missing from the runtime."""


class PreconditionError(ResizeError):
    """Source missing or unreadable, or target not writable."""


class DecodeError(ResizeError):
    """Source could not be decoded as an image."""


class UnsupportedFormatError(ResizeError):
    """Source decoded, but is not a JPEG."""


class SizeError(ResizeError):
    """Source is smaller than the computed target and upscaling is disallowed."""


class ProcessingError(ResizeError):
    """Allocation, resampling, filtering or encoding failed in the codec."""

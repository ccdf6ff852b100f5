"""ImageResizer - resize one JPEG into another, reporting failures as results."""

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from loguru import logger

from .algo.grayscale import grayscale_available
from .algo.image_resize import image_resize
from .common.errors import CapabilityUnavailable, ConfigurationError, ResizeError
from .common.schemas import (
    DEFAULT_CONTRAST,
    DEFAULT_QUALITY,
    GrayscaleFilter,
    ImageInfo,
    ResizeJob,
    ResizerSettings,
    ResizeResult,
)
from .utils.image_info import read_image_info

Reporter = Callable[[str], None]


def log_reporter(message: str) -> None:
    """Default reporter: send messages to the error log."""
    logger.error(message)


class ImageResizer:
    """Resize JPEG images to a target size while keeping their aspect ratio.

    Settings (quality, upscale policy, grayscale filter) live on the
    instance; every ``resize`` call snapshots them into an immutable
    ``ResizeJob``. Failures never raise out of ``resize``: they go to the
    ``reporter`` and come back as a falsy ``ResizeResult``.

    Usage:
        resizer = ImageResizer()
        resizer.set_grayscale_filter(True, -5)
        if resizer.resize("in.jpg", "out.jpg", 640, 640):
            ...
    """

    def __init__(
        self,
        settings: ResizerSettings | Mapping[str, Any] | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        if settings is None:
            settings = ResizerSettings()
        elif not isinstance(settings, ResizerSettings):
            settings = ResizerSettings.from_mapping(settings)
        self.settings: ResizerSettings = settings
        self.reporter: Reporter = reporter or log_reporter

    def configure(
        self, quality: int = DEFAULT_QUALITY, allow_upscale: bool = False
    ) -> ResizerSettings:
        """Replace the quality and upscale policy, keeping the grayscale filter.

        Raises:
            ConfigurationError: If a value is out of range or of the wrong type
        """
        self.settings = ResizerSettings.build(
            quality=quality,
            allow_upscale=allow_upscale,
            grayscale=self.settings.grayscale,
        )
        return self.settings

    def set_grayscale_filter(self, enabled: bool = False, contrast: int = DEFAULT_CONTRAST) -> bool:
        """Enable or disable the black & white filter.

        When the runtime lacks grayscale support the problem is reported and
        the current filter is left as it was; resizing keeps working without
        the filter.

        Returns:
            True if the filter setting was applied

        Raises:
            ConfigurationError: If ``contrast`` is outside -100..100
        """
        if not grayscale_available():
            self._report(
                CapabilityUnavailable(
                    "Your Pillow build does not support grayscale conversion. "
                    + "Black & White conversions aren't available."
                )
            )
            return False

        try:
            grayscale = GrayscaleFilter(enabled=enabled, contrast=contrast)
        except ValueError as exc:
            raise ConfigurationError(f"Invalid grayscale filter: {exc}") from exc

        self.settings = self.settings.model_copy(update={"grayscale": grayscale})
        return True

    def resize(
        self,
        source_path: str | Path,
        target_path: str | Path,
        width: int,
        height: int,
        quality: int | None = None,
    ) -> ResizeResult:
        """Resize ``source_path`` into ``target_path``.

        Args:
            source_path: JPEG file to read
            target_path: JPEG file to write; may equal ``source_path``
            width: Requested width (kept for landscape images)
            height: Requested height (kept for portrait images)
            quality: Per-call JPEG quality, overriding the configured one

        Returns:
            ResizeResult, truthy on success
        """
        result = ResizeResult(ok=False, source_path=str(source_path), target_path=str(target_path))

        try:
            job = ResizeJob.create(
                source_path=source_path,
                target_path=target_path,
                target_width=width,
                target_height=height,
                quality=self.settings.quality if quality is None else quality,
                grayscale=self.settings.grayscale,
                allow_upscale=self.settings.allow_upscale,
            )
            resolved = image_resize(job)
        except ResizeError as exc:
            self._report(exc)
            return result.model_copy(update={"error": exc.message, "error_type": type(exc).__name__})

        return result.model_copy(
            update={
                "ok": True,
                "source_size": (resolved.source_width, resolved.source_height),
                "output_size": resolved.target_size,
            }
        )

    def image_info(self, path: str | Path) -> ImageInfo:
        """Read mime type, size and EXIF data of ``path`` (informational only)."""
        return read_image_info(path)

    def _report(self, exc: ResizeError) -> None:
        logger.debug(f"{type(exc).__name__}: {exc.message}")
        self.reporter(exc.message)

"""Pydantic schemas for resizer settings, resize jobs and results."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, ClassVar, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from typing_extensions import TypeAliasType

from .errors import ConfigurationError

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue = TypeAliasType(
    "JSONValue", JSONPrimitive | list["JSONValue"] | dict[str, "JSONValue"]
)

DEFAULT_QUALITY = 85
DEFAULT_CONTRAST = 4

# Keys accepted by ResizerSettings.from_mapping besides the field names.
SETTING_ALIASES = {
    "jpg_quality": "quality",
    "resize_if_smaller": "allow_upscale",
}


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one readable line."""
    parts: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "value"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


# ─────────────────────────────────────────────────────────────
# Settings
# ─────────────────────────────────────────────────────────────


class GrayscaleFilter(BaseModel):
    """Black & white filter configuration.

    Attributes:
        enabled: Convert the output to grayscale when True
        contrast: -100..100; negative values add contrast, positive values
                  reduce it, 0 leaves it unchanged
    """

    enabled: bool = False
    contrast: int = Field(default=DEFAULT_CONTRAST, ge=-100, le=100)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, strict=True)


class ResizerSettings(BaseModel):
    """Long-lived resizer configuration, shared by every resize call."""

    quality: int = Field(default=DEFAULT_QUALITY, ge=0, le=100, description="JPEG quality")
    allow_upscale: bool = Field(
        default=False, description="Resize even when the source is smaller than the target"
    )
    grayscale: GrayscaleFilter = Field(default_factory=GrayscaleFilter)

    model_config: ClassVar[ConfigDict] = ConfigDict(
        extra="forbid",
        strict=True,
        validate_assignment=True,
    )

    @classmethod
    def build(cls, **values: Any) -> "ResizerSettings":
        """Construct settings, raising ConfigurationError instead of ValidationError."""
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid resizer settings: {describe_validation_error(exc)}"
            ) from exc

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any]) -> "ResizerSettings":
        """Build settings from a plain mapping.

        Accepts ``jpg_quality`` and ``resize_if_smaller`` as aliases of
        ``quality`` and ``allow_upscale``. Empty values (anything falsy that
        is not a bool or a number) are rejected.
        """
        values: dict[str, Any] = {}
        for key, value in settings.items():
            if value is None or (not isinstance(value, (bool, int, float)) and not value):
                raise ConfigurationError(f"Value for setting `{key}` cannot be empty!")
            values[SETTING_ALIASES.get(key, key)] = value
        return cls.build(**values)


# ─────────────────────────────────────────────────────────────
# Resize job
# ─────────────────────────────────────────────────────────────


class ResizeJob(BaseModel):
    """One resize request, built fresh for every call and never mutated.

    ``target_width``/``target_height`` hold the requested box until the
    source has been decoded; ``with_source_size`` returns a copy carrying the
    source dimensions and the aspect-corrected target dimensions.
    """

    source_path: Path
    target_path: Path
    target_width: int = Field(ge=1, description="Requested (then resolved) width")
    target_height: int = Field(ge=1, description="Requested (then resolved) height")
    quality: int = Field(default=DEFAULT_QUALITY, ge=0, le=100)
    grayscale: GrayscaleFilter = Field(default_factory=GrayscaleFilter)
    allow_upscale: bool = False

    source_width: int | None = Field(default=None, ge=1)
    source_height: int | None = Field(default=None, ge=1)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @classmethod
    def create(cls, **values: Any) -> "ResizeJob":
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid resize request: {describe_validation_error(exc)}"
            ) from exc

    @property
    def same_file(self) -> bool:
        return self.source_path.resolve() == self.target_path.resolve()

    @property
    def target_size(self) -> tuple[int, int]:
        return self.target_width, self.target_height

    def with_source_size(
        self, source_width: int, source_height: int, target_width: int, target_height: int
    ) -> "ResizeJob":
        # Resolved target may be 0 for extreme ratios; allocation reports it.
        return self.model_copy(
            update={
                "source_width": source_width,
                "source_height": source_height,
                "target_width": target_width,
                "target_height": target_height,
            }
        )


# ─────────────────────────────────────────────────────────────
# Results
# ─────────────────────────────────────────────────────────────


class ResizeResult(BaseModel):
    """Outcome of ``ImageResizer.resize``; truthy only on success."""

    ok: bool
    source_path: str
    target_path: str
    error: str | None = None
    error_type: str | None = None
    source_size: tuple[int, int] | None = None
    output_size: tuple[int, int] | None = None

    def __bool__(self) -> bool:
        return self.ok


class ImageInfo(BaseModel):
    """Informational metadata about an image file.

    Attributes:
        mime_type: MIME type reported by the decoder (e.g. image/jpeg)
        width: Image width in pixels
        height: Image height in pixels
        exif: EXIF tags keyed by their names; empty when the file has none
    """

    mime_type: str | None = None
    width: int
    height: int
    exif: dict[str, JSONValue] = Field(default_factory=dict)

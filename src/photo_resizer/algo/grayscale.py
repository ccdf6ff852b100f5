"""Black & white filter: luminance conversion followed by a contrast step.

The contrast step reproduces GD's ``IMG_FILTER_CONTRAST``: the level runs
from -100 to 100, negative values increase contrast and positive values
decrease it.
"""

from loguru import logger
from PIL import Image

from ..common.errors import ProcessingError


def grayscale_available() -> bool:
    """Return True if the running Pillow build can convert to grayscale.

    Converts a 1x1 test image; any failure counts as unavailable.
    """
    try:
        from PIL import ImageOps

        converted = ImageOps.grayscale(Image.new("RGB", (1, 1), color=(255, 0, 0)))
    except (ImportError, AttributeError, OSError, ValueError) as exc:
        logger.debug(f"Grayscale conversion unavailable: {exc}")
        return False
    return converted.mode == "L"


def contrast_table(level: int) -> list[int]:
    """Build the 256-entry lookup table for a contrast level."""
    factor = ((100.0 - level) / 100.0) ** 2
    table: list[int] = []
    for value in range(256):
        scaled = ((value / 255.0 - 0.5) * factor + 0.5) * 255.0
        table.append(int(min(255.0, max(0.0, scaled))))
    return table


def apply_grayscale(image: Image.Image, contrast: int) -> Image.Image:
    """Convert ``image`` to single-channel luminance and adjust contrast.

    Raises:
        ProcessingError: If either step fails
    """
    from PIL import ImageOps

    try:
        gray = ImageOps.grayscale(image)
        result = gray.point(contrast_table(contrast))
    except (OSError, ValueError) as exc:
        raise ProcessingError(f"Black & White conversion filter failed. {exc}") from exc

    logger.debug(f"Applied grayscale filter with contrast {contrast}")
    return result

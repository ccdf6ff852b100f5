"""Informational image metadata (mime type, size, EXIF) read through Pillow.

Nothing in the resize pipeline depends on this data.
"""

from pathlib import Path

from loguru import logger
from PIL import ExifTags, Image, UnidentifiedImageError

from ..algo.preconditions import check_source
from ..common.errors import DecodeError
from ..common.schemas import ImageInfo, JSONValue


def _to_json_value(value: object) -> JSONValue:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, bytes):
        return value.decode("latin-1").rstrip("\x00")
    if isinstance(value, (tuple, list)):
        return [_to_json_value(v) for v in value]
    # IFDRational and friends
    try:
        return float(value)  # pyright: ignore[reportArgumentType]
    except (TypeError, ValueError, ZeroDivisionError):
        return str(value)


def read_exif(img: Image.Image) -> dict[str, JSONValue]:
    exif = img.getexif()
    return {ExifTags.TAGS.get(tag, str(tag)): _to_json_value(value) for tag, value in exif.items()}


def read_image_info(path: str | Path) -> ImageInfo:
    """Read mime type, dimensions and EXIF tags of an image.

    Raises:
        PreconditionError: If the file is missing or unreadable
        DecodeError: If the file is not a recognised image
    """
    path = Path(path)
    check_source(path)

    try:
        with Image.open(path) as img:
            # MPF-tagged JPEGs open as MPO but are still JPEG files
            fmt = "JPEG" if img.format == "MPO" else img.format
            mime_type = Image.MIME.get(fmt or "")
            width, height = img.size
            exif = read_exif(img)
    except UnidentifiedImageError as exc:
        raise DecodeError(
            f"A valid mimetype couldn't be found for `{path}`. "
            + "Verify the file IS a valid image file."
        ) from exc
    except OSError as exc:
        raise DecodeError(f"Failed to read image info for `{path}`: {exc}") from exc

    logger.debug(f"{path.name}: {mime_type} {width}x{height}, {len(exif)} EXIF tags")
    return ImageInfo(mime_type=mime_type, width=width, height=height, exif=exif)

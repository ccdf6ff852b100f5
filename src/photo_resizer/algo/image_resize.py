"""Pure JPEG resize pipeline (single file).

Each step raises a ``ResizeError`` subclass on failure; callers decide how
to report it.
"""

from pathlib import Path

from loguru import logger
from PIL import Image, UnidentifiedImageError

from ..common.errors import DecodeError, ProcessingError, UnsupportedFormatError
from ..common.schemas import ResizeJob
from .aspect import check_upscale, resolve_target_size
from .grayscale import apply_grayscale
from .preconditions import check_paths

SUPPORTED_FORMAT = "JPEG"
# Pillow reports JPEGs carrying a multi-picture (MPF) header as MPO.
JPEG_FORMATS = {SUPPORTED_FORMAT, "MPO"}


def decode_jpeg(path: Path) -> Image.Image:
    """Decode a JPEG file into an RGB buffer.

    Raises:
        DecodeError: If the file is not a decodable image
        UnsupportedFormatError: If the file is an image, but not a JPEG
    """
    try:
        with Image.open(path) as img:
            if img.format not in JPEG_FORMATS:
                mime = Image.MIME.get(img.format or "", "unknown")
                raise UnsupportedFormatError(
                    f"An unsupported mimetype has been encountered: `{mime}` for `{path}`. "
                    + "Only image/jpeg is supported."
                )
            img.seek(0)
            img.load()
            return img.convert("RGB")
    except UnidentifiedImageError as exc:
        raise DecodeError(
            f"A valid mimetype couldn't be found for `{path}`. "
            + "Verify the file IS a valid image file."
        ) from exc
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Failed to decode `{path}`: {exc}") from exc


def resample(source: Image.Image, width: int, height: int) -> Image.Image:
    """Scale the whole of ``source`` into a new ``width`` x ``height`` buffer.

    The output buffer is allocated by the resample itself, so allocation and
    scaling happen in one step.

    Raises:
        ProcessingError: If the buffer cannot be allocated or scaling fails
    """
    if width < 1 or height < 1:
        raise ProcessingError(f"Cannot create a {width}x{height} image.")
    try:
        return source.resize(
            (width, height),
            Image.Resampling.LANCZOS,
            box=(0, 0, source.width, source.height),
        )
    except (MemoryError, OverflowError) as exc:
        raise ProcessingError(f"Failed to create a {width}x{height} image: {exc}") from exc
    except (OSError, ValueError) as exc:
        raise ProcessingError(f"Resampling failed: {exc}") from exc


def encode_jpeg(image: Image.Image, target_path: Path, quality: int) -> None:
    try:
        image.save(target_path, format=SUPPORTED_FORMAT, quality=quality)
    except (OSError, ValueError) as exc:
        raise ProcessingError(f"JPEG image creation failed. {exc}") from exc


def image_resize(job: ResizeJob) -> ResizeJob:
    """
    Resize the job's source JPEG and write the target JPEG.

    Framework-agnostic, single-image operation.

    Args:
        job: Resize request; its target size is the requested box

    Returns:
        Copy of ``job`` with source dimensions and the resolved target size

    Raises:
        PreconditionError: Source missing/unreadable or target not writable
        DecodeError: Source is not a decodable image
        UnsupportedFormatError: Source is not a JPEG
        SizeError: Target exceeds the source and upscaling is disallowed
        ProcessingError: Allocation, resampling, filtering or encoding failed
    """
    check_paths(job.source_path, job.target_path, job.same_file)

    source = decode_jpeg(job.source_path)
    canvas: Image.Image | None = None
    try:
        sw, sh = source.size
        tw, th = resolve_target_size(sw, sh, job.target_width, job.target_height)
        logger.debug(
            f"{job.source_path.name}: {sw}x{sh} -> {tw}x{th} "
            + f"(requested {job.target_width}x{job.target_height})"
        )
        resolved = job.with_source_size(sw, sh, tw, th)

        check_upscale(sw, sh, tw, th, job.allow_upscale)

        canvas = resample(source, tw, th)
        output = canvas
        if job.grayscale.enabled:
            output = apply_grayscale(canvas, job.grayscale.contrast)

        encode_jpeg(output, job.target_path, job.quality)
    finally:
        source.close()
        if canvas is not None:
            canvas.close()

    logger.info(f"Wrote {tw}x{th} JPEG (quality {job.quality}) to {job.target_path}")
    return resolved

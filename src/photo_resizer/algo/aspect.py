"""Aspect-ratio resolution for resize targets.

The rule derives the secondary dimension from the requested primary one and
ignores the requested secondary value. It is not a "fit inside the box"
resize: a 1200x800 source asked for 640x100 comes out 640x427.
"""

import math

from ..common.errors import SizeError


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def resolve_target_size(
    source_width: int,
    source_height: int,
    target_width: int,
    target_height: int,
) -> tuple[int, int]:
    """Compute the output size for a source image and a requested box.

    - Landscape (``sw > sh``): width is kept, height follows the ratio.
    - Portrait (``sh > sw``): height is kept, width follows the ratio.
    - Square: when the requested sides differ, both become the smaller one.

    Returns:
        (width, height) of the output image
    """
    tw, th = target_width, target_height

    if source_width > source_height:
        th = round_half_up(tw / (source_width / source_height))
    elif source_height > source_width:
        tw = round_half_up(th / (source_height / source_width))
    elif tw != th:
        tw = th = min(tw, th)

    return tw, th


def check_upscale(
    source_width: int,
    source_height: int,
    target_width: int,
    target_height: int,
    allow_upscale: bool,
) -> None:
    """Raise SizeError if the target exceeds the source and upscaling is off."""
    if allow_upscale:
        return

    if source_height < target_height or source_width < target_width:
        raise SizeError(
            "The source image is smaller than the resize size. "
            + f"The source image is `{source_width}x{source_height}` and the "
            + f"resize size is `{target_width}x{target_height}`."
        )

"""Resize algorithms."""

from .aspect import resolve_target_size
from .image_resize import image_resize

__all__ = ["image_resize", "resolve_target_size"]

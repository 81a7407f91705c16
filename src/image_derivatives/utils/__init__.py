"""Utility helpers."""

from .media_types import get_pil_format, mimetype_for_format, normalize_format
from .profiling import timed

__all__ = ["get_pil_format", "mimetype_for_format", "normalize_format", "timed"]

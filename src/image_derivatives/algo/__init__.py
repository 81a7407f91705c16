"""Pure per-image algorithms, independent of the orchestration layer."""

from .derivative import build_derivative
from .metadata import decode_source, extract_metadata
from .preview import create_lqip
from .region import clamp, compute_region
from .size_spec import normalize

__all__ = [
    "build_derivative",
    "clamp",
    "compute_region",
    "create_lqip",
    "decode_source",
    "extract_metadata",
    "normalize",
]

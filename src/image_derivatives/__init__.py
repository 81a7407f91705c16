"""image_derivatives - named size derivatives, LQIP previews and metadata for images."""

from .common.engine import FitMode, ImageEngine, ImageProbe, Region, ResizeDirective
from .common.errors import ImageProcessingError, InvalidImageError
from .common.schemas import (
    BoxSize,
    Derivative,
    Hotspot,
    MaxDimensionSize,
    NamedSize,
    OriginalSize,
    ProcessedImage,
    ProcessingOptions,
    SourceMetadata,
    TupleSize,
    parse_named_size,
)
from .engines.pillow_engine import PillowEngine
from .processing import create_image_size, create_preview, process_image

__version__ = "0.1.0"

__all__ = [
    "BoxSize",
    "Derivative",
    "FitMode",
    "Hotspot",
    "ImageEngine",
    "ImageProbe",
    "ImageProcessingError",
    "InvalidImageError",
    "MaxDimensionSize",
    "NamedSize",
    "OriginalSize",
    "PillowEngine",
    "ProcessedImage",
    "ProcessingOptions",
    "Region",
    "ResizeDirective",
    "SourceMetadata",
    "TupleSize",
    "__version__",
    "create_image_size",
    "create_preview",
    "parse_named_size",
    "process_image",
]

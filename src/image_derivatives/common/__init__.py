"""Common module - engine protocol, schemas and errors."""

from .engine import FitMode, ImageEngine, ImageProbe, Region, ResizeDirective
from .errors import ImageProcessingError, InvalidImageError
from .schemas import (
    BoxSize,
    Derivative,
    Hotspot,
    MaxDimensionSize,
    NamedSize,
    OriginalSize,
    OutputFormat,
    ProcessedImage,
    ProcessingOptions,
    SourceMetadata,
    TupleSize,
    parse_named_size,
)

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
    "OutputFormat",
    "ProcessedImage",
    "ProcessingOptions",
    "Region",
    "ResizeDirective",
    "SourceMetadata",
    "TupleSize",
    "parse_named_size",
]

"""Single derivative rendering."""

from typing import TypeVar

from loguru import logger

from ..common.engine import ImageEngine
from ..common.schemas import BoxSize, Hotspot, MaxDimensionSize, OriginalSize, TupleSize
from ..utils.profiling import timed
from .size_spec import normalize

H = TypeVar("H")


@timed
def build_derivative(
    engine: ImageEngine[H],
    image: H,
    size: OriginalSize | MaxDimensionSize | BoxSize | TupleSize,
    format: str,
    source_width: int,
    source_height: int,
    default_hotspot: Hotspot | None = None,
    quality: int | None = None,
) -> bytes:
    """
    Render one named size of ``image`` and encode it.

    Steps run in a fixed order: format conversion, extract, resize, encode.
    Extracting first makes the resize fit the cropped region rather than
    the whole source.

    Args:
        engine: Image engine owning ``image``
        image: Decoded source handle (not modified)
        size: Parsed named size
        format: Output format, e.g. ``webp``
        source_width: Natural width of the source
        source_height: Natural height of the source
        default_hotspot: Focal point for box sizes without their own
        quality: Optional encoder quality

    Returns:
        Encoded image bytes
    """
    directive, region = normalize(size, source_width, source_height, default_hotspot)
    logger.debug(f"Building {size.kind} derivative as {format}: resize={directive} extract={region}")

    result = engine.to_format(image, format)
    if region is not None:
        result = engine.extract(result, region)
    if directive is not None:
        result = engine.resize(result, directive)

    return engine.encode(result, format, quality)

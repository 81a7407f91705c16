"""Source decoding and metadata extraction.

This is the only place the source is validated: later stages trust the
handle and the dimensions produced here.
"""

from typing import TypeVar

from loguru import logger

from ..common.engine import ImageEngine
from ..common.errors import InvalidImageError
from ..common.schemas import SourceMetadata
from ..utils.media_types import mimetype_for_format, normalize_format

H = TypeVar("H")


def decode_source(engine: ImageEngine[H], data: bytes) -> H:
    """Decode ``data`` with ``engine``.

    Raises:
        InvalidImageError: If the input is empty or the engine cannot decode
            it. The engine's exception is chained as ``__cause__``.
    """
    if not data:
        raise InvalidImageError("Source image is empty.")

    try:
        return engine.decode(data)
    except Exception as exc:
        logger.debug(f"Decode failed for {len(data)} byte source: {exc}")
        raise InvalidImageError(f"Could not decode image: {exc}") from exc


def extract_metadata(
    engine: ImageEngine[H],
    image: H,
    filename: str,
    filesize: int,
) -> SourceMetadata:
    """Describe the decoded source.

    Raises:
        InvalidImageError: If width, height or format cannot be determined.
    """
    probe = engine.probe(image)

    if not probe.width or not probe.height or not probe.format:
        raise InvalidImageError()

    fmt = normalize_format(probe.format)

    return SourceMetadata(
        width=probe.width,
        height=probe.height,
        ratio=probe.width / probe.height,
        format=fmt,
        filesize=filesize,
        filename=filename,
        mimetype=mimetype_for_format(fmt),
    )

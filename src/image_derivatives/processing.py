"""Public entry point: one source image in, all derivatives out."""

import asyncio
from collections.abc import Mapping
from typing import BinaryIO

from loguru import logger

from . import config
from .algo.derivative import build_derivative
from .algo.metadata import decode_source, extract_metadata
from .algo.preview import create_lqip
from .common.engine import ImageEngine
from .common.schemas import (
    Derivative,
    Hotspot,
    ProcessedImage,
    ProcessingOptions,
    SourceMetadata,
    parse_named_size,
)
from .engines.pillow_engine import PillowEngine

Source = bytes | bytearray | memoryview | BinaryIO


def _read_source(source: Source) -> bytes:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    data = source.read()
    if not isinstance(data, bytes):
        raise TypeError(f"Source stream must yield bytes, got {type(data).__name__}")
    return data


def _load_source(
    engine: ImageEngine[object], source: Source, filename: str
) -> tuple[object, SourceMetadata]:
    """Read, decode and probe ``source``; runs in a worker thread."""
    data = _read_source(source)
    image = decode_source(engine, data)
    return image, extract_metadata(engine, image, filename, len(data))


async def process_image(
    source: Source,
    filename: str,
    options: ProcessingOptions | Mapping[str, object] | None = None,
    *,
    engine: ImageEngine[object] | None = None,
) -> ProcessedImage:
    """
    Generate every requested derivative, the LQIP preview and metadata.

    The preview and all derivatives are rendered concurrently in worker
    threads. The first failure is raised as-is and no partial result is
    returned.

    Args:
        source: Encoded image bytes or a binary stream
        filename: Caller supplied name, copied into the metadata
        options: Format, named sizes, default hotspot and quality. Omitted
            fields fall back to the configured defaults.
        engine: Image engine to use (default: a new PillowEngine)

    Returns:
        ProcessedImage with one derivative per requested label

    Raises:
        InvalidImageError: If the source cannot be decoded or has no
            determinable width, height or format
        pydantic.ValidationError: If ``options`` is malformed
    """
    if options is None:
        options = ProcessingOptions()
    elif not isinstance(options, ProcessingOptions):
        options = ProcessingOptions.model_validate(options)

    if engine is None:
        engine = PillowEngine()

    image, metadata = await asyncio.to_thread(_load_source, engine, source, filename)
    logger.debug(
        f"Processing {filename}: {metadata.width}x{metadata.height} {metadata.format}, "
        f"{len(options.sizes)} sizes as {options.format}"
    )

    labels = list(options.sizes)
    lqip, *rendered = await asyncio.gather(
        asyncio.to_thread(create_lqip, engine, image),
        *(
            asyncio.to_thread(
                build_derivative,
                engine,
                image,
                options.sizes[label],
                options.format,
                metadata.width,
                metadata.height,
                options.hotspot,
                options.quality,
            )
            for label in labels
        ),
    )

    sizes = {
        label: Derivative(data=rendered_bytes, format=options.format)
        for label, rendered_bytes in zip(labels, rendered)
    }
    logger.debug(f"Processed {filename}: {', '.join(labels) or 'no sizes'}")

    return ProcessedImage(sizes=sizes, metadata=metadata, lqip=lqip)


async def create_image_size(
    source: Source,
    size: object,
    format: str | None = None,
    *,
    hotspot: Hotspot | None = None,
    quality: int | None = None,
    engine: ImageEngine[object] | None = None,
) -> bytes:
    """Render a single named size without the rest of the pipeline.

    ``size`` accepts any named size form (``"original"``, ``300``,
    ``[w, h]``, ``{"width": w, "height": h, ...}``).

    Raises:
        InvalidImageError: If the source cannot be decoded
    """
    named_size = parse_named_size(size)
    if engine is None:
        engine = PillowEngine()

    image, metadata = await asyncio.to_thread(_load_source, engine, source, "")

    return await asyncio.to_thread(
        build_derivative,
        engine,
        image,
        named_size,
        format or config.DEFAULT_FORMAT,
        metadata.width,
        metadata.height,
        hotspot,
        quality,
    )


async def create_preview(source: Source, *, engine: ImageEngine[object] | None = None) -> str:
    """LQIP data URL for ``source``."""
    if engine is None:
        engine = PillowEngine()

    image, _ = await asyncio.to_thread(_load_source, engine, source, "")
    return await asyncio.to_thread(create_lqip, engine, image)

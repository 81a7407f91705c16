"""LQIP (low quality image placeholder) generation."""

import base64
from typing import TypeVar

from .. import config
from ..common.engine import FitMode, ImageEngine, ResizeDirective
from ..utils.media_types import mimetype_for_format
from ..utils.profiling import timed

H = TypeVar("H")


@timed
def create_lqip(engine: ImageEngine[H], image: H) -> str:
    """Tiny blurred preview of ``image`` as a ``data:`` URL."""
    fmt = config.LQIP_FORMAT

    preview = engine.to_format(image, fmt)
    preview = engine.resize(
        preview,
        ResizeDirective(width=config.LQIP_SIZE, height=config.LQIP_SIZE, fit=FitMode.INSIDE),
    )
    preview = engine.blur(preview, config.LQIP_BLUR)
    data = engine.encode(preview, fmt)

    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mimetype_for_format(fmt)};base64,{payload}"

"""Unit tests for LQIP preview generation."""

import base64

from image_derivatives.algo.preview import create_lqip
from image_derivatives.engines.pillow_engine import PillowEngine

PREFIX = "data:image/webp;base64,"


def test_create_lqip_returns_data_url(solid_png: bytes):
    """Test the preview is a webp data URL."""
    engine = PillowEngine()

    url = create_lqip(engine, engine.decode(solid_png))

    assert url.startswith(PREFIX)


def test_create_lqip_is_tiny(wide_png: bytes, open_image):
    """Test the preview's longest edge is at most 15 px and keeps the ratio."""
    engine = PillowEngine()

    url = create_lqip(engine, engine.decode(wide_png))
    payload = base64.b64decode(url.removeprefix(PREFIX))

    with open_image(payload) as img:
        assert img.format == "WEBP"
        assert max(img.size) <= 15
        assert img.size == (15, 8)


def test_create_lqip_is_deterministic(solid_png: bytes):
    """Test identical sources give identical previews."""
    engine = PillowEngine()

    first = create_lqip(engine, engine.decode(solid_png))
    second = create_lqip(engine, engine.decode(solid_png))

    assert first == second


def test_create_lqip_small_source_not_enlarged(image_factory, open_image):
    """Test sources smaller than the preview bound keep their size."""
    engine = PillowEngine()

    url = create_lqip(engine, engine.decode(image_factory(8, 4)))

    with open_image(base64.b64decode(url.removeprefix(PREFIX))) as img:
        assert img.size == (8, 4)


def test_create_lqip_pipeline(recording_engine):
    """Test the preview converts, resizes, blurs and encodes as webp."""
    image = recording_engine.decode(b"300x200")
    recording_engine.calls.clear()

    url = create_lqip(recording_engine, image)

    assert recording_engine.names() == ["to_format", "resize", "blur", "encode"]
    assert recording_engine.calls[0] == ("to_format", "webp")
    assert base64.b64decode(url.removeprefix(PREFIX)) == b"15x10.webp"

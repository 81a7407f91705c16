"""Test configuration and fixtures for image_derivatives.

This module provides:
- Synthetic source images generated in memory with Pillow
- A recording fake engine for checking operation order without a codec
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass, replace
from io import BytesIO
from typing import override

import pytest
from PIL import Image, ImageDraw

from image_derivatives.common.engine import (
    FitMode,
    ImageEngine,
    ImageProbe,
    Region,
    ResizeDirective,
)

# ============================================================================
# Synthetic Images
# ============================================================================


def make_image_bytes(
    width: int = 64,
    height: int = 48,
    format: str = "PNG",
    mode: str = "RGB",
    color: tuple[int, ...] = (0, 128, 255),
) -> bytes:
    """Encode a solid image with a diagonal line so encoders see some detail."""
    img = Image.new(mode, (width, height), color=color)
    if mode == "RGB":
        ImageDraw.Draw(img).line([(0, 0), (width, height)], fill=(255, 255, 255), width=2)

    output = BytesIO()
    img.save(output, format=format)
    return output.getvalue()


def open_bytes(data: bytes) -> Image.Image:
    img = Image.open(BytesIO(data))
    img.load()
    return img


@pytest.fixture
def image_factory() -> Callable[..., bytes]:
    """Factory producing encoded synthetic images."""
    return make_image_bytes


@pytest.fixture
def solid_png() -> bytes:
    """120x80 landscape PNG."""
    return make_image_bytes(120, 80)


@pytest.fixture
def wide_png() -> bytes:
    """400x200 landscape PNG (2:1)."""
    return make_image_bytes(400, 200)


@pytest.fixture
def tall_png() -> bytes:
    """80x120 portrait PNG."""
    return make_image_bytes(80, 120)


# ============================================================================
# Fake Engine
# ============================================================================


@dataclass(frozen=True)
class FakeImage:
    width: int
    height: int
    format: str | None = "PNG"


class RecordingEngine(ImageEngine[FakeImage]):
    """In-memory engine that records every call.

    Geometry is tracked so resize/extract results can be asserted; encoded
    output is a short text description of the final image.
    """

    def __init__(
        self,
        probe_result: ImageProbe | None = None,
        fail_on_encode: str | None = None,
    ):
        self.calls: list[tuple[str, object]] = []
        self.probe_result: ImageProbe | None = probe_result
        self.fail_on_encode: str | None = fail_on_encode
        self._lock = threading.Lock()

    def _record(self, name: str, arg: object = None) -> None:
        with self._lock:
            self.calls.append((name, arg))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    @override
    def decode(self, data: bytes) -> FakeImage:
        self._record("decode", len(data))
        if data.startswith(b"bad"):
            raise ValueError("cannot identify image")
        width, height = (int(part) for part in data.decode().split("x"))
        return FakeImage(width=width, height=height)

    @override
    def probe(self, image: FakeImage) -> ImageProbe:
        self._record("probe")
        if self.probe_result is not None:
            return self.probe_result
        return ImageProbe(width=image.width, height=image.height, format=image.format)

    @override
    def to_format(self, image: FakeImage, format: str) -> FakeImage:
        self._record("to_format", format)
        return replace(image, format=format)

    @override
    def extract(self, image: FakeImage, region: Region) -> FakeImage:
        self._record("extract", region)
        return replace(image, width=region.width, height=region.height)

    @override
    def resize(self, image: FakeImage, directive: ResizeDirective) -> FakeImage:
        self._record("resize", directive)
        width = directive.width or image.width
        height = directive.height or image.height
        if directive.fit == FitMode.INSIDE:
            scale = min(width / image.width, height / image.height, 1)
            width, height = round(image.width * scale), round(image.height * scale)
        return replace(image, width=width, height=height)

    @override
    def blur(self, image: FakeImage, sigma: float) -> FakeImage:
        self._record("blur", sigma)
        return image

    @override
    def encode(self, image: FakeImage, format: str, quality: int | None = None) -> bytes:
        self._record("encode", format)
        if self.fail_on_encode == format:
            raise RuntimeError(f"encoder for {format} unavailable")
        return f"{image.width}x{image.height}.{format}".encode()


@pytest.fixture
def recording_engine() -> RecordingEngine:
    return RecordingEngine()


@pytest.fixture
def engine_factory() -> type[RecordingEngine]:
    """RecordingEngine class, for tests that need a custom probe or failure."""
    return RecordingEngine


@pytest.fixture
def open_image() -> Callable[[bytes], Image.Image]:
    """Decode encoded bytes with Pillow for assertions."""
    return open_bytes

"""Pillow implementation of the image engine."""

from io import BytesIO
from typing import override

from PIL import Image, ImageFilter, ImageOps

from ..common.engine import FitMode, ImageEngine, ImageProbe, Region, ResizeDirective
from ..utils.media_types import get_pil_format

# Pixel modes each encoder accepts without conversion
_SUPPORTED_MODES: dict[str, frozenset[str]] = {
    "JPEG": frozenset({"RGB", "L", "CMYK"}),
    "BMP": frozenset({"RGB", "L", "P", "1"}),
    "WEBP": frozenset({"RGB", "RGBA"}),
    "PNG": frozenset({"RGB", "RGBA", "L", "LA", "P", "1"}),
    "GIF": frozenset({"RGB", "RGBA", "L", "P"}),
    "TIFF": frozenset({"RGB", "RGBA", "L", "LA", "CMYK", "P"}),
}

_ALPHA_FORMATS = frozenset({"WEBP", "PNG", "GIF", "TIFF"})


class PillowEngine(ImageEngine[Image.Image]):
    """Engine backed by ``PIL.Image``.

    Handles are fully loaded images; every operation returns a new image.
    """

    def __init__(self, resample: Image.Resampling = Image.Resampling.LANCZOS):
        self.resample: Image.Resampling = resample

    @override
    def decode(self, data: bytes) -> Image.Image:
        img = Image.open(BytesIO(data))
        # Force full decode so truncated input fails here and the handle is
        # safe to read from several threads
        img.load()
        return img

    @override
    def probe(self, image: Image.Image) -> ImageProbe:
        return ImageProbe(width=image.width, height=image.height, format=image.format)

    @override
    def to_format(self, image: Image.Image, format: str) -> Image.Image:
        pil_format = get_pil_format(format)
        supported = _SUPPORTED_MODES.get(pil_format)
        if supported is None or image.mode in supported:
            return image.copy()

        if pil_format in _ALPHA_FORMATS and image.has_transparency_data:
            return image.convert("RGBA")
        return image.convert("RGB")

    @override
    def extract(self, image: Image.Image, region: Region) -> Image.Image:
        return image.crop(
            (
                region.left,
                region.top,
                region.left + region.width,
                region.top + region.height,
            )
        )

    @override
    def resize(self, image: Image.Image, directive: ResizeDirective) -> Image.Image:
        source_width, source_height = image.size
        width, height = directive.width, directive.height

        if width is None and height is None:
            return image.copy()

        # One axis given: the other follows the aspect ratio
        if height is None:
            return self._scale(image, width / source_width, directive.without_enlargement)
        if width is None:
            return self._scale(image, height / source_height, directive.without_enlargement)

        if directive.fit == FitMode.INSIDE:
            scale = min(width / source_width, height / source_height)
            return self._scale(image, scale, directive.without_enlargement)

        if directive.fit == FitMode.OUTSIDE:
            scale = max(width / source_width, height / source_height)
            return self._scale(image, scale, directive.without_enlargement)

        if directive.without_enlargement and (width > source_width or height > source_height):
            # Shrink the box, keeping its ratio, until it fits the source
            factor = min(source_width / width, source_height / height)
            width = max(1, round(width * factor))
            height = max(1, round(height * factor))

        if directive.fit == FitMode.FILL:
            return image.resize((width, height), self.resample)
        if directive.fit == FitMode.COVER:
            return ImageOps.fit(image, (width, height), self.resample)
        return ImageOps.pad(image, (width, height), self.resample)

    @override
    def blur(self, image: Image.Image, sigma: float) -> Image.Image:
        return image.filter(ImageFilter.GaussianBlur(radius=sigma))

    @override
    def encode(self, image: Image.Image, format: str, quality: int | None = None) -> bytes:
        pil_format = get_pil_format(format)

        save_kwargs: dict[str, object] = {}
        if pil_format in ("JPEG", "WEBP") and quality is not None:
            save_kwargs["quality"] = quality
        if pil_format == "PNG":
            save_kwargs["optimize"] = True

        output = BytesIO()
        image.save(output, format=pil_format, **save_kwargs)
        return output.getvalue()

    def _scale(self, image: Image.Image, scale: float, without_enlargement: bool) -> Image.Image:
        if without_enlargement and scale > 1:
            return image.copy()
        size = (
            max(1, round(image.width * scale)),
            max(1, round(image.height * scale)),
        )
        if size == image.size:
            return image.copy()
        return image.resize(size, self.resample)

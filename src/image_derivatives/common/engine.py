"""Image engine capability interface and the value types passed through it."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol, TypeVar


class FitMode(StrEnum):
    COVER = "cover"
    CONTAIN = "contain"
    FILL = "fill"
    INSIDE = "inside"
    OUTSIDE = "outside"


@dataclass(frozen=True)
class Region:
    """Crop rectangle in source-pixel coordinates."""

    left: int
    top: int
    width: int
    height: int


@dataclass(frozen=True)
class ResizeDirective:
    """What a resize should do.

    ``width`` or ``height`` may be None, in which case that axis follows
    the aspect ratio of the image being resized.
    """

    width: int | None
    height: int | None
    fit: FitMode = FitMode.INSIDE
    without_enlargement: bool = True


@dataclass(frozen=True)
class ImageProbe:
    width: int | None
    height: int | None
    format: str | None


H = TypeVar("H")


class ImageEngine(Protocol[H]):
    """Decode, transform and encode images.

    Every transforming call returns a new handle and leaves its input
    untouched, so one decoded source can feed several jobs at once.
    """

    def decode(self, data: bytes) -> H: ...

    def probe(self, image: H) -> ImageProbe: ...

    def to_format(self, image: H, format: str) -> H: ...

    def extract(self, image: H, region: Region) -> H: ...

    def resize(self, image: H, directive: ResizeDirective) -> H: ...

    def blur(self, image: H, sigma: float) -> H: ...

    def encode(self, image: H, format: str, quality: int | None = None) -> bytes: ...

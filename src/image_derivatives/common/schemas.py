"""Pydantic schemas for processing options and results."""

from collections.abc import Mapping
from typing import Annotated, ClassVar, Literal

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PositiveInt,
    TypeAdapter,
)

from .. import config
from .engine import FitMode

# ─────────────────────────────────────────────────────────────
# Named sizes
# ─────────────────────────────────────────────────────────────

Hotspot = tuple[float, float]

OutputFormat = Literal["jpeg", "jpg", "png", "webp", "gif", "tiff", "bmp"]


class OriginalSize(BaseModel):
    """Keep the source geometry; only the format changes."""

    kind: Literal["original"] = "original"

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class MaxDimensionSize(BaseModel):
    """Fit inside a ``size`` x ``size`` box, constraining the source's long side."""

    kind: Literal["max"] = "max"
    size: PositiveInt

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class BoxSize(BaseModel):
    """Fit into an explicit box, optionally cropped around a hotspot."""

    kind: Literal["box"] = "box"
    width: PositiveInt
    height: PositiveInt
    fit: FitMode | None = None
    hotspot: Hotspot | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


class TupleSize(BaseModel):
    """Positional ``[width, height, hotspot?, fit?]`` form of a box size."""

    kind: Literal["tuple"] = "tuple"
    width: PositiveInt
    height: PositiveInt
    hotspot: Hotspot | None = None
    fit: FitMode | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


def _coerce_named_size(value: object) -> object:
    """Turn the loose caller forms into tagged data for the union below."""
    if isinstance(value, (OriginalSize, MaxDimensionSize, BoxSize, TupleSize)):
        return value

    if value == "original":
        return {"kind": "original"}

    # bool is an int subclass but never a valid size
    if isinstance(value, bool):
        raise ValueError(f"Unsupported named size: {value!r}")

    if isinstance(value, int):
        return {"kind": "max", "size": value}

    if isinstance(value, (list, tuple)):
        if not 2 <= len(value) <= 4:
            raise ValueError(
                f"Named size sequence must be [width, height, hotspot?, fit?], got {value!r}"
            )
        width, height, *rest = value
        return {
            "kind": "tuple",
            "width": width,
            "height": height,
            "hotspot": rest[0] if len(rest) > 0 else None,
            "fit": rest[1] if len(rest) > 1 else None,
        }

    if isinstance(value, Mapping):
        if "kind" in value:
            return value
        return {"kind": "box", **value}

    raise ValueError(f"Unsupported named size: {value!r}")


NamedSize = Annotated[
    OriginalSize | MaxDimensionSize | BoxSize | TupleSize,
    Field(discriminator="kind"),
    BeforeValidator(_coerce_named_size),
]

_named_size_adapter: TypeAdapter[NamedSize] = TypeAdapter(NamedSize)


def parse_named_size(value: object) -> OriginalSize | MaxDimensionSize | BoxSize | TupleSize:
    """Validate one named size given in any accepted form.

    Raises:
        pydantic.ValidationError: If the value has an unsupported shape or
            non-positive dimensions.
    """
    return _named_size_adapter.validate_python(value)


# ─────────────────────────────────────────────────────────────
# Options
# ─────────────────────────────────────────────────────────────


class ProcessingOptions(BaseModel):
    """What to produce from one source image.

    ``hotspot`` is the default focal point for every box size that does not
    carry its own.
    """

    format: OutputFormat = Field(
        default_factory=lambda: config.DEFAULT_FORMAT,
        validate_default=True,
        description="Output format of every derivative",
    )
    sizes: dict[str, NamedSize] = Field(
        default_factory=config.default_named_sizes,
        validate_default=True,
        description="Label -> named size",
    )
    hotspot: Hotspot | None = Field(default=None, description="Default focal point")
    quality: int | None = Field(
        default=None,
        ge=1,
        le=100,
        description="Encoder quality for lossy formats",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")


# ─────────────────────────────────────────────────────────────
# Results
# ─────────────────────────────────────────────────────────────


class SourceMetadata(BaseModel):
    width: int
    height: int
    ratio: float
    format: str
    filesize: int
    filename: str
    mimetype: str

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class Derivative(BaseModel):
    data: bytes
    format: str

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class ProcessedImage(BaseModel):
    """Everything produced for one source: derivatives, metadata and preview."""

    sizes: dict[str, Derivative]
    metadata: SourceMetadata
    lqip: str

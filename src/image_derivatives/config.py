"""Project-wide defaults, overridable from the environment."""

import os

# Output format used when ProcessingOptions.format is omitted
DEFAULT_FORMAT = os.environ.get("IMAGE_DERIVATIVES_FORMAT", "webp")

# Named sizes produced when ProcessingOptions.sizes is omitted
DEFAULT_NAMED_SIZES: dict[str, object] = {
    "original": "original",
    "large": 1200,
    "medium": 600,
    "small": 300,
    "thumb": 160,
}

# LQIP preview
LQIP_FORMAT = "webp"
LQIP_SIZE = int(os.environ.get("IMAGE_DERIVATIVES_LQIP_SIZE", "15"))
LQIP_BLUR = float(os.environ.get("IMAGE_DERIVATIVES_LQIP_BLUR", "10"))


def default_named_sizes() -> dict[str, object]:
    """Fresh copy of the default size set, safe for callers to mutate."""
    return dict(DEFAULT_NAMED_SIZES)

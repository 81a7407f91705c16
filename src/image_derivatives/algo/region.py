"""Crop rectangle computation around a focal point."""

from ..common.engine import Region
from ..common.schemas import Hotspot


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit ``value`` to the closed interval ``[lower, upper]``."""
    return max(lower, min(value, upper))


def compute_region(
    source_width: int,
    source_height: int,
    target_width: int,
    target_height: int,
    hotspot: Hotspot,
) -> Region:
    """
    Largest rectangle with the target's aspect ratio that fits inside the
    source, centered on ``hotspot``.

    The rectangle is shifted back inside the source when the hotspot is
    near an edge or outside the image altogether; hotspots are never
    rejected.

    Args:
        source_width: Source width in pixels
        source_height: Source height in pixels
        target_width: Requested box width
        target_height: Requested box height
        hotspot: Focal point (x, y) in source pixels

    Returns:
        Region inside the source bounds
    """
    source_ratio = source_width / source_height
    target_ratio = target_width / target_height

    if source_ratio > target_ratio:
        # Source is wider: full height, narrower strip
        height = source_height
        width = int(clamp(round(source_height * target_ratio), 1, source_width))
    else:
        # Source is taller (or same ratio): full width, shorter strip
        width = source_width
        height = int(clamp(round(source_width / target_ratio), 1, source_height))

    hotspot_x, hotspot_y = hotspot
    left = int(clamp(round(hotspot_x - width / 2), 0, source_width - width))
    top = int(clamp(round(hotspot_y - height / 2), 0, source_height - height))

    return Region(left=left, top=top, width=width, height=height)

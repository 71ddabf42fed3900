"""
Bounding box utilities for the org chart workflow.

Handles the union box of laid-out node cards and the camera transform that
fits such a box into a viewport.
"""
from typing import Dict, Sequence, Tuple

import numpy as np

from core.constants import FIT_PADDING, FIT_SCALE_RANGE, FIT_VERTICAL_BIAS, MIN_EXTENT
from core.models import NodeExtent, ViewTransform


def union_bbox(extents: Sequence[NodeExtent]) -> Dict[str, float]:
    """
    Compute the axis-aligned box containing every card body.

    Each extent is a centre point expanded by half its width and height,
    so the whole card lies inside the box, not just its anchor.

    Args:
        extents: Node extents of the visible set

    Returns:
        Dict with x1, y1, x2, y2

    Raises:
        ValueError: If extents is empty
    """
    if not extents:
        raise ValueError("Cannot compute a bounding box of zero nodes")

    arr = np.array([(e.x, e.y, e.width, e.height) for e in extents], dtype=float)
    half_w = np.abs(arr[:, 2]) / 2
    half_h = np.abs(arr[:, 3]) / 2

    return {
        'x1': float(np.min(arr[:, 0] - half_w)),
        'y1': float(np.min(arr[:, 1] - half_h)),
        'x2': float(np.max(arr[:, 0] + half_w)),
        'y2': float(np.max(arr[:, 1] + half_h)),
    }


def bbox_size(bbox: Dict[str, float], min_extent: float = MIN_EXTENT) -> Tuple[float, float]:
    """Width and height of a box, never smaller than min_extent."""
    width = max(bbox['x2'] - bbox['x1'], min_extent)
    height = max(bbox['y2'] - bbox['y1'], min_extent)
    return width, height


def bbox_center(bbox: Dict[str, float]) -> Tuple[float, float]:
    """Centre point of a box."""
    return (bbox['x1'] + bbox['x2']) / 2, (bbox['y1'] + bbox['y2']) / 2


def clamp_scale(scale: float, min_scale: float, max_scale: float) -> float:
    """Clamp a scale into [min_scale, max_scale]; +inf maps to max_scale, NaN and -inf to min_scale."""
    if np.isnan(scale):
        return float(min_scale)
    return float(min(max(scale, min_scale), max_scale))


def fit_transform(
    extents: Sequence[NodeExtent],
    viewport_width: float,
    viewport_height: float,
    padding: float = FIT_PADDING,
    min_scale: float = FIT_SCALE_RANGE[0],
    max_scale: float = FIT_SCALE_RANGE[1],
    vertical_bias: float = FIT_VERTICAL_BIAS,
    min_extent: float = MIN_EXTENT
) -> ViewTransform:
    """
    Fit the union box of the given extents into a viewport.

    The scale is the tighter of the two axis ratios after padding, clamped
    to [min_scale, max_scale]. The box centre lands on the viewport centre,
    then everything is shifted up by vertical_bias so the root card sits
    above the middle.

    Args:
        extents: Node extents of the visible set
        viewport_width: Viewport width in pixels
        viewport_height: Viewport height in pixels
        padding: Pixels subtracted from each viewport dimension
        min_scale: Lower scale bound
        max_scale: Upper scale bound
        vertical_bias: Upward shift in pixels
        min_extent: Smallest box width/height used for the ratio

    Returns:
        ViewTransform with translate_x, translate_y, scale

    Raises:
        ValueError: If extents is empty or the viewport is not positive and finite
    """
    if not (np.isfinite(viewport_width) and np.isfinite(viewport_height)) or viewport_width <= 0 or viewport_height <= 0:
        raise ValueError(f"Viewport must be positive and finite, got {viewport_width}x{viewport_height}")

    bbox = union_bbox(extents)
    box_width, box_height = bbox_size(bbox, min_extent)

    raw_scale = min(
        (viewport_width - padding) / box_width,
        (viewport_height - padding) / box_height
    )
    scale = clamp_scale(raw_scale, min_scale, max_scale)

    center_x, center_y = bbox_center(bbox)
    translate_x = viewport_width / 2 - center_x * scale
    translate_y = viewport_height / 2 - center_y * scale - vertical_bias

    return ViewTransform(
        translate_x=float(translate_x),
        translate_y=float(translate_y),
        scale=scale
    )


def scale_about(
    transform: ViewTransform,
    factor: float,
    anchor_x: float,
    anchor_y: float,
    min_scale: float,
    max_scale: float
) -> ViewTransform:
    """
    Multiply the scale of a transform, keeping one screen point fixed.

    Args:
        transform: Current transform
        factor: Relative multiplier (1.2 zooms in, 0.8 zooms out)
        anchor_x: Screen x that must not move
        anchor_y: Screen y that must not move
        min_scale: Lower scale bound
        max_scale: Upper scale bound

    Returns:
        New ViewTransform
    """
    if factor <= 0 or not np.isfinite(factor):
        raise ValueError(f"Zoom factor must be a positive number, got {factor}")

    new_scale = clamp_scale(transform.scale * factor, min_scale, max_scale)
    world_x, world_y = transform.invert(anchor_x, anchor_y)

    return ViewTransform(
        translate_x=anchor_x - world_x * new_scale,
        translate_y=anchor_y - world_y * new_scale,
        scale=new_scale
    )

"""Utilities package - Helper functions for records and bounding boxes."""

from .record_utils import (
    normalize_record,
    normalize_records,
    resolve_field,
    parse_csv_text,
)

from .bbox_utils import (
    union_bbox,
    bbox_size,
    bbox_center,
    clamp_scale,
    fit_transform,
    scale_about,
)

__all__ = [
    # Record utils
    'normalize_record',
    'normalize_records',
    'resolve_field',
    'parse_csv_text',

    # BBox utils
    'union_bbox',
    'bbox_size',
    'bbox_center',
    'clamp_scale',
    'fit_transform',
    'scale_about',
]

"""Core package - Domain models, constants and errors."""

from .models import Employee, NodeExtent, PositionedNode, ViewTransform, BuildReport
from .constants import (
    FIELD_ALIASES,
    UNKNOWN_NAME,
    FIT_SCALE_RANGE,
    ZOOM_SCALE_RANGE,
    ZOOM_IN_FACTOR,
    ZOOM_OUT_FACTOR,
)
from .exceptions import OrgChartError, EmptyInputError, ViewStateError

__all__ = [
    'Employee',
    'NodeExtent',
    'PositionedNode',
    'ViewTransform',
    'BuildReport',
    'FIELD_ALIASES',
    'UNKNOWN_NAME',
    'FIT_SCALE_RANGE',
    'ZOOM_SCALE_RANGE',
    'ZOOM_IN_FACTOR',
    'ZOOM_OUT_FACTOR',
    'OrgChartError',
    'EmptyInputError',
    'ViewStateError',
]

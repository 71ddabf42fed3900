"""
Unit tests for core.constants module.
"""
import pytest
from core.constants import (
    ID_FIELDS,
    MANAGER_FIELDS,
    NAME_FIELDS,
    FIELD_ALIASES,
    FIT_SCALE_RANGE,
    ZOOM_SCALE_RANGE,
    ZOOM_IN_FACTOR,
    ZOOM_OUT_FACTOR,
)


class TestFieldAliases:
    """Tests for the column alias lists."""

    def test_primary_fields_first(self):
        """Test canonical column names take priority."""
        assert ID_FIELDS[0] == 'EMPLOYEENUMBER'
        assert MANAGER_FIELDS[0] == 'SUPERVISORPARTYID'
        assert NAME_FIELDS[0] == 'FIRSTNAME'

    def test_aliases_upper_case(self):
        """Test aliases are stored upper-cased to match normalized keys."""
        for aliases in FIELD_ALIASES.values():
            for alias in aliases:
                assert alias == alias.upper().strip()

    def test_alias_map_complete(self):
        """Test every consumed field has aliases."""
        assert set(FIELD_ALIASES) == {'id', 'manager_id', 'name'}


class TestScaleRanges:
    """Tests for fit and zoom scale bounds."""

    def test_fit_range_inside_zoom_range(self):
        """Test initial fit never exceeds interactive bounds."""
        assert ZOOM_SCALE_RANGE[0] <= FIT_SCALE_RANGE[0] < FIT_SCALE_RANGE[1] <= ZOOM_SCALE_RANGE[1]

    def test_zoom_factors(self):
        """Test zoom in grows and zoom out shrinks."""
        assert ZOOM_IN_FACTOR > 1
        assert 0 < ZOOM_OUT_FACTOR < 1

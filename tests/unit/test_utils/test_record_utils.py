"""
Unit tests for utils.record_utils module.
"""
import pytest
from core.constants import ID_FIELDS, MANAGER_FIELDS, NAME_FIELDS
from utils.record_utils import (
    normalize_record,
    normalize_records,
    resolve_field,
    parse_csv_text
)


class TestNormalizeRecord:
    """Tests for normalize_record function."""

    def test_upper_cases_and_trims_keys(self):
        """Test key normalization."""
        row = {' EmployeeNumber ': '1', 'supervisorPartyId': '2'}

        result = normalize_record(row)

        assert result == {'EMPLOYEENUMBER': '1', 'SUPERVISORPARTYID': '2'}

    def test_none_values_become_empty(self):
        """Test missing cells become empty strings."""
        result = normalize_record({'FirstName': None})

        assert result == {'FIRSTNAME': ''}

    def test_none_key_dropped(self):
        """Test surplus CSV cells are ignored."""
        result = normalize_record({'Name': 'A', None: ['x', 'y']})

        assert result == {'NAME': 'A'}

    def test_normalize_records(self):
        """Test list normalization keeps order."""
        rows = [{'a': '1'}, {'b': '2'}]

        assert normalize_records(rows) == [{'A': '1'}, {'B': '2'}]


class TestResolveField:
    """Tests for resolve_field function."""

    def test_primary_alias_wins(self):
        """Test first alias with a value wins."""
        record = {'EMPLOYEENUMBER': '10', 'EMPLOYEE ID': '20'}

        assert resolve_field(record, ID_FIELDS) == '10'

    def test_falls_back_to_later_alias(self):
        """Test fallback when the primary column is blank."""
        record = {'SUPERVISORPARTYID': '  ', 'MANAGER ID': '', 'SUPERVISOR ID': '7'}

        assert resolve_field(record, MANAGER_FIELDS) == '7'

    def test_value_trimmed(self):
        """Test values are trimmed."""
        record = {'FULL NAME': '  Jane Doe '}

        assert resolve_field(record, NAME_FIELDS) == 'Jane Doe'

    def test_missing_returns_none(self):
        """Test None when no alias has a value."""
        assert resolve_field({'OTHER': 'x'}, ID_FIELDS) is None


class TestParseCsvText:
    """Tests for parse_csv_text function."""

    def test_parse_and_normalize(self, sample_csv_text):
        """Test header normalization and blank line skipping."""
        records = parse_csv_text(sample_csv_text)

        assert len(records) == 5
        assert records[0]['EMPLOYEENUMBER'] == '1'
        assert records[1]['SUPERVISORPARTYID'] == '1'
        assert records[4]['FIRSTNAME'] == 'Orphan'

    def test_byte_order_mark_stripped(self):
        """Test a leading BOM does not pollute the first header."""
        records = parse_csv_text('\ufeffEmployeeNumber,Name\n1,A\n')

        assert 'EMPLOYEENUMBER' in records[0]

    def test_short_rows_padded(self):
        """Test missing trailing cells become empty strings."""
        records = parse_csv_text('EmployeeNumber,SupervisorPartyId,FirstName\n1\n')

        assert records == [{'EMPLOYEENUMBER': '1', 'SUPERVISORPARTYID': '', 'FIRSTNAME': ''}]

    def test_long_rows_trimmed(self):
        """Test extra cells beyond the header are dropped."""
        records = parse_csv_text('EmployeeNumber,Name\n1,A,extra\n')

        assert records == [{'EMPLOYEENUMBER': '1', 'NAME': 'A'}]

    def test_empty_text(self):
        """Test empty content gives no records."""
        assert parse_csv_text('') == []

    def test_header_only(self):
        """Test header without rows gives no records."""
        assert parse_csv_text('EmployeeNumber,Name\n') == []

    def test_quoted_values(self):
        """Test quoted cells with commas."""
        records = parse_csv_text('EmployeeNumber,Full Name\n1,"Doe, Jane"\n')

        assert records[0]['FULL NAME'] == 'Doe, Jane'

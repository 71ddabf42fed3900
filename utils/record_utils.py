"""
Record utilities for the org chart workflow.

Normalizes raw employee rows (CSV or JSON) to upper-cased column names and
resolves the identifier / manager / name fields through their alias lists.
"""
import csv
import io
import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)


def normalize_record(row: Mapping) -> Dict[str, str]:
    """
    Upper-case and trim the keys of a single row.

    Args:
        row: Raw mapping of column name to value

    Returns:
        Dict with canonical keys; missing values become ""
    """
    normalized = {}
    for key, value in row.items():
        if key is None:
            # csv.DictReader puts surplus cells under a None key
            continue
        normalized[str(key).strip().upper()] = "" if value is None else str(value)
    return normalized


def normalize_records(rows: Iterable[Mapping]) -> List[Dict[str, str]]:
    """Normalize every row of a record set."""
    return [normalize_record(row) for row in rows]


def resolve_field(record: Mapping[str, str], aliases: Sequence[str]) -> Optional[str]:
    """
    Return the first non-blank value among the given aliases.

    Args:
        record: Normalized record
        aliases: Upper-cased column names, in priority order

    Returns:
        Trimmed value or None when no alias carries a value
    """
    for alias in aliases:
        value = record.get(alias)
        if value is None:
            continue
        value = value.strip()
        if value:
            return value
    return None


def parse_csv_text(text: str) -> List[Dict[str, str]]:
    """
    Parse CSV text with a header row into normalized records.

    Blank lines are skipped. Rows shorter than the header get "" for the
    missing columns.

    Args:
        text: Full CSV content

    Returns:
        List of normalized records
    """
    if text.startswith('\ufeff'):
        text = text[1:]

    reader = csv.DictReader(io.StringIO(text), skipinitialspace=True)
    records = []
    for row in reader:
        if not any((value or "").strip() for key, value in row.items() if key is not None):
            continue
        if None in row:
            logger.warning("CSV line %d has more cells than the header; extra cells ignored", reader.line_num)
        records.append(normalize_record(row))

    return records

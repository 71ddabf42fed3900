"""
Exception types raised by the org chart core.
"""


class OrgChartError(Exception):
    """Base class for org chart failures."""


class EmptyInputError(OrgChartError):
    """No record produced a usable employee identifier."""

    def __init__(self, message: str = "Record set is empty or has no employee identifiers", record_count: int = 0):
        super().__init__(message)
        self.record_count = record_count


class ViewStateError(OrgChartError):
    """Navigation requested in a state that does not allow it."""

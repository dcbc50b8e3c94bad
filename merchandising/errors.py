"""Exceptions raised by the analytics engine.

Only conditions the engine cannot recover from locally are raised. Bad
filter input, dangling foreign keys and empty row sets degrade to defaults
instead.
"""


class AnalyticsError(Exception):
    """Base class for analytics engine failures."""


class RowFetchError(AnalyticsError):
    """The row source could not supply a row set; the computation is aborted."""

    def __init__(self, row_set: str, message: str):
        self.row_set = row_set
        super().__init__(f"Failed to fetch {row_set} rows: {message}")


class InvalidRowsError(AnalyticsError):
    """A row set failed schema validation at the ingestion boundary."""

    def __init__(self, row_set: str, errors: list[str]):
        self.row_set = row_set
        self.errors = errors
        detail = "; ".join(errors[:3])
        if len(errors) > 3:
            detail += f" (+{len(errors) - 3} more)"
        super().__init__(f"Invalid {row_set} rows: {detail}")


class ConfigError(AnalyticsError, ValueError):
    """Unknown environment profile or invalid configuration value."""

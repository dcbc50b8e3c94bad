"""Merchandising analytics: sales rollups, inventory valuation, and stock alerts."""

from merchandising.engine import RowSource, build_analytics, build_inventory_report, compute_analytics
from merchandising.errors import AnalyticsError, ConfigError, InvalidRowsError, RowFetchError
from merchandising.report import AnalyticsReport

__version__ = "0.3.0"

"""Shared utilities for the analytics engine."""

from merchandising.utils.io import CsvRowSource, read_row_set, write_output
from merchandising.utils.rounding import round_money
from merchandising.utils.transforms import normalize_columns, to_frame
from merchandising.utils.validators import validate_dataframe, validate_rows

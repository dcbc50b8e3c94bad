"""Coerce raw sale events into a validated DataFrame."""

import pandas as pd

from merchandising.domains.sales.models import SalesSchema
from merchandising.utils.transforms import (
    as_count,
    as_key,
    as_number,
    as_utc_timestamp,
    ensure_columns,
    normalize_columns,
    to_frame,
)
from merchandising.utils.types import RowSet
from merchandising.utils.validators import validate_rows

SALES_COLUMNS = ["product_id", "location_id", "quantity", "unit_price", "total_amount", "sale_date"]


def prepare_sales(rows: RowSet | None) -> pd.DataFrame:
    df = ensure_columns(normalize_columns(to_frame(rows)), SALES_COLUMNS)
    if "id" in df.columns:
        df["id"] = as_key(df["id"])
    df["product_id"] = as_key(df["product_id"])
    df["location_id"] = as_key(df["location_id"])
    df["quantity"] = as_count(df["quantity"])
    df["unit_price"] = as_number(df["unit_price"])
    df["total_amount"] = as_number(df["total_amount"])
    df["sale_date"] = as_utc_timestamp(df["sale_date"])
    return df


def ingest_sales(rows: RowSet | None) -> pd.DataFrame:
    """Validate sale events. totalAmount is trusted, not recomputed."""
    return validate_rows(prepare_sales(rows), SalesSchema, "sales")

"""Common data transformation utilities used at the ingestion boundary."""

from collections.abc import Iterable, Mapping
from datetime import datetime

import pandas as pd

type ColumnMapping = dict[str, str]

# Field names used by the row-fetch collaborator's JSON payloads
CAMEL_CASE_COLUMNS: ColumnMapping = {
    "productId": "product_id",
    "locationId": "location_id",
    "reorderPoint": "reorder_point",
    "unitPrice": "unit_price",
    "totalAmount": "total_amount",
    "saleDate": "sale_date",
    "lastUpdated": "last_updated",
}


def to_frame(rows: pd.DataFrame | Iterable[Mapping[str, object]] | None) -> pd.DataFrame:
    """Materialize a row set as a private DataFrame copy."""
    match rows:
        case None:
            return pd.DataFrame()
        case pd.DataFrame():
            return rows.copy()
        case _:
            return pd.DataFrame.from_records([dict(r) for r in rows])


def normalize_columns(df: pd.DataFrame, mapping: ColumnMapping | None = None) -> pd.DataFrame:
    """Map camelCase payload fields to snake_case, then apply an optional mapping."""
    df = df.rename(columns={k: v for k, v in CAMEL_CASE_COLUMNS.items() if k in df.columns})
    df.columns = [str(col).strip().lower().replace(" ", "_").replace("-", "_") for col in df.columns]

    if mapping:
        df = df.rename(columns=mapping)

    return df


def ensure_columns(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """Add any missing columns as all-null so schema checks can report them."""
    for col in columns:
        if col not in df.columns:
            df[col] = pd.Series([None] * len(df), index=df.index, dtype="object")
    return df


def as_key(series: pd.Series) -> pd.Series:
    """Normalize an identifier column to strings, keeping nulls as None."""
    return series.map(lambda v: None if pd.isna(v) else str(v).strip()).astype("object")


def as_text(series: pd.Series) -> pd.Series:
    """Normalize a free-text column, mapping blanks to None."""

    def _clean(value: object) -> str | None:
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            return None
        text = str(value).strip()
        return text or None

    return series.map(_clean).astype("object")


def as_number(series: pd.Series) -> pd.Series:
    """Parse a numeric column; garbage becomes NaN and is left to schema checks."""
    if series.empty:
        return series.astype("float64")
    if pd.api.types.is_object_dtype(series) or pd.api.types.is_string_dtype(series):
        # text columns may be object or a dedicated string dtype depending on the pandas version
        series = series.astype("object").map(lambda v: v.strip().replace(",", "") if isinstance(v, str) else v)
    return pd.to_numeric(series, errors="coerce")


def as_count(series: pd.Series) -> pd.Series:
    """Parse a whole-number column; fractional values become NaN."""
    parsed = as_number(series)
    return parsed.where(parsed.isna() | (parsed == parsed.round()))


def as_utc_timestamp(series: pd.Series) -> pd.Series:
    """Parse timestamps into tz-aware UTC; naive values are taken as UTC."""
    if series.empty:
        return series.astype("datetime64[ns, UTC]")
    return pd.to_datetime(series, utc=True, errors="coerce", format="mixed")


def as_utc(moment: datetime | pd.Timestamp | str) -> pd.Timestamp:
    """Coerce a single moment to a tz-aware UTC Timestamp; naive values are taken as UTC."""
    ts = pd.Timestamp(moment)
    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")

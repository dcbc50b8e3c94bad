"""Coerce product, location and inventory rows into validated DataFrames.

Rows arrive from the row-fetch collaborator as DataFrames or lists of
mappings, with either camelCase or snake_case field names. All string to
number casts happen here, never inside the aggregations.
"""

import pandas as pd

from merchandising.domains.inventory.models import InventorySchema, LocationSchema, ProductSchema
from merchandising.utils.transforms import (
    as_count,
    as_key,
    as_number,
    as_text,
    ensure_columns,
    normalize_columns,
    to_frame,
)
from merchandising.utils.types import ProductStatus, RowSet
from merchandising.utils.validators import validate_rows

PRODUCT_COLUMNS = ["id", "name", "category", "price", "status"]
LOCATION_COLUMNS = ["id", "name", "type"]
INVENTORY_COLUMNS = ["product_id", "location_id", "quantity", "reorder_point"]


def prepare_products(rows: RowSet | None) -> pd.DataFrame:
    df = ensure_columns(normalize_columns(to_frame(rows)), PRODUCT_COLUMNS)
    df["id"] = as_key(df["id"])
    df["name"] = as_text(df["name"])
    df["category"] = as_text(df["category"])
    if "sku" in df.columns:
        df["sku"] = as_text(df["sku"])
    df["price"] = as_number(df["price"])
    # rows without a status take the store's column default
    df["status"] = as_text(df["status"]).map(
        lambda s: ProductStatus.ACTIVE.value if s is None else s.lower()
    ).astype("object")
    return df


def prepare_locations(rows: RowSet | None) -> pd.DataFrame:
    df = ensure_columns(normalize_columns(to_frame(rows)), LOCATION_COLUMNS)
    df["id"] = as_key(df["id"])
    df["name"] = as_text(df["name"])
    df["type"] = as_text(df["type"]).map(lambda t: t if t is None else t.lower()).astype("object")
    return df


def prepare_inventory(rows: RowSet | None) -> pd.DataFrame:
    df = ensure_columns(normalize_columns(to_frame(rows)), INVENTORY_COLUMNS)
    df["product_id"] = as_key(df["product_id"])
    df["location_id"] = as_key(df["location_id"])
    df["quantity"] = as_count(df["quantity"])
    df["reorder_point"] = as_count(df["reorder_point"])
    return df


def ingest_products(rows: RowSet | None) -> pd.DataFrame:
    return validate_rows(prepare_products(rows), ProductSchema, "products")


def ingest_locations(rows: RowSet | None) -> pd.DataFrame:
    return validate_rows(prepare_locations(rows), LocationSchema, "locations")


def ingest_inventory(rows: RowSet | None) -> pd.DataFrame:
    """Validate stock records; duplicate (product, location) pairs are rejected."""
    return validate_rows(prepare_inventory(rows), InventorySchema, "inventory")

"""Stock status classification and the filtered inventory listing."""

from dataclasses import dataclass

import pandas as pd

from merchandising.domains.inventory.valuation import low_stock_mask
from merchandising.domains.sales.filters import resolve_location
from merchandising.utils.types import StockStatus

LISTING_COLUMNS = [
    "product_id",
    "location_id",
    "product_name",
    "product_sku",
    "product_category",
    "product_price",
    "location_name",
    "location_type",
    "quantity",
    "reorder_point",
    "line_value",
    "stock_status",
]


@dataclass(frozen=True)
class InventorySummary:
    total_items: int
    low_stock_items: int
    out_of_stock_items: int
    inventory_value: float


def classify_stock_status(quantity: int, reorder_point: int) -> StockStatus:
    match quantity:
        case 0:
            return StockStatus.OUT_OF_STOCK
        case q if q <= reorder_point:
            return StockStatus.LOW_STOCK
        case _:
            return StockStatus.IN_STOCK


def build_inventory_listing(
    inventory: pd.DataFrame,
    products: pd.DataFrame,
    locations: pd.DataFrame,
    search: str | None = None,
    location: object = None,
) -> pd.DataFrame:
    """Join stock rows to their product and location, with optional filters.

    Unlike the sales rollups this is an inner join: a stock row is only
    listed when both its product and its location exist. `search` matches
    product name or sku, case-insensitively.
    """
    product_attrs = products.rename(
        columns={
            "id": "product_id",
            "name": "product_name",
            "sku": "product_sku",
            "category": "product_category",
            "price": "product_price",
        }
    )
    if "product_sku" not in product_attrs.columns:
        product_attrs["product_sku"] = None
    product_attrs = product_attrs[["product_id", "product_name", "product_sku", "product_category", "product_price"]]

    location_attrs = locations[["id", "name", "type"]].rename(
        columns={"id": "location_id", "name": "location_name", "type": "location_type"}
    )

    listing = inventory[["product_id", "location_id", "quantity", "reorder_point"]].merge(
        product_attrs, on="product_id", how="inner"
    )
    listing = listing.merge(location_attrs, on="location_id", how="inner")

    location_id = resolve_location(location)
    if location_id is not None:
        listing = listing[listing["location_id"] == location_id]

    if search and search.strip():
        term = search.strip().lower()
        name_hit = listing["product_name"].fillna("").str.lower().str.contains(term, regex=False)
        sku_hit = listing["product_sku"].fillna("").str.lower().str.contains(term, regex=False)
        listing = listing[name_hit | sku_hit]

    listing = listing.copy()
    listing["line_value"] = listing["quantity"].astype(float) * listing["product_price"].astype(float)
    listing["stock_status"] = [
        classify_stock_status(int(q), int(r)).value
        for q, r in zip(listing["quantity"], listing["reorder_point"])
    ]
    return listing[LISTING_COLUMNS].reset_index(drop=True)


def summarize_inventory(listing: pd.DataFrame) -> InventorySummary:
    """Headline stock figures for a (possibly filtered) listing. Value is unrounded."""
    return InventorySummary(
        total_items=int(listing["quantity"].sum()) if not listing.empty else 0,
        low_stock_items=int(low_stock_mask(listing).sum()),
        out_of_stock_items=int((listing["quantity"] == 0).sum()),
        inventory_value=float(listing["line_value"].fillna(0.0).sum()) if not listing.empty else 0.0,
    )

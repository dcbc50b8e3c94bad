"""Build sales rollups by product, category, location, and calendar day.

Every rollup keeps keys in first-appearance order (``sort=False``), which is
what the rankings rely on to break revenue ties. Monetary sums are left
unrounded here; rounding happens once when the report is assembled.
"""

from dataclasses import dataclass
from datetime import date, timedelta

import pandas as pd

from merchandising.utils.types import UNKNOWN_LABEL, UNKNOWN_LOCATION_LABEL

type AggResult = dict[str, pd.DataFrame]

PRODUCT_ROLLUP_COLUMNS = ["product_id", "name", "category", "total_quantity", "total_revenue"]
CATEGORY_ROLLUP_COLUMNS = ["category", "total_revenue", "total_quantity"]
LOCATION_ROLLUP_COLUMNS = ["location_id", "location_name", "sales_amount"]
DAILY_COLUMNS = ["date", "sales_amount"]


@dataclass(frozen=True)
class SalesTotals:
    total_sales: float
    total_units: int
    avg_order_value: float


def enrich_sales(
    sales: pd.DataFrame,
    products: pd.DataFrame,
    locations: pd.DataFrame,
) -> pd.DataFrame:
    """Left-join product and location attributes onto each sale.

    Sales pointing at a deleted product or location keep their totals and
    get placeholder names instead of being dropped.
    """
    product_attrs = products[["id", "name", "category"]].rename(
        columns={"id": "product_id", "name": "product_name", "category": "product_category"}
    )
    location_attrs = locations[["id", "name", "type"]].rename(
        columns={"id": "location_id", "name": "location_name", "type": "location_type"}
    )

    # rows pre-joined by the fetch query carry these already; the master rows win
    joined_cols = [c for c in (*product_attrs.columns, *location_attrs.columns) if c not in ("product_id", "location_id")]
    enriched = sales.drop(columns=joined_cols, errors="ignore")

    enriched = enriched.merge(product_attrs, on="product_id", how="left")
    enriched = enriched.merge(location_attrs, on="location_id", how="left")

    enriched["product_name"] = enriched["product_name"].fillna(UNKNOWN_LABEL)
    enriched["product_category"] = enriched["product_category"].fillna(UNKNOWN_LABEL)
    enriched["location_name"] = enriched["location_name"].fillna(UNKNOWN_LOCATION_LABEL)
    return enriched


def count_dangling_keys(sales: pd.DataFrame, products: pd.DataFrame, locations: pd.DataFrame) -> dict[str, int]:
    """Count sales whose product or location no longer exists."""
    return {
        "products": int((~sales["product_id"].isin(products["id"])).sum()),
        "locations": int((~sales["location_id"].isin(locations["id"])).sum()),
    }


def compute_totals(sales: pd.DataFrame) -> SalesTotals:
    """Scalar totals over the accepted sales.

    avg_order_value is revenue per *unit* sold, not per transaction.
    """
    total_sales = float(sales["total_amount"].sum()) if not sales.empty else 0.0
    total_units = int(sales["quantity"].sum()) if not sales.empty else 0
    avg_order_value = total_sales / total_units if total_units > 0 else 0.0
    return SalesTotals(total_sales=total_sales, total_units=total_units, avg_order_value=avg_order_value)


def rollup_by_product(enriched: pd.DataFrame) -> pd.DataFrame:
    if enriched.empty:
        return pd.DataFrame(columns=PRODUCT_ROLLUP_COLUMNS)

    # first-seen sale supplies name/category for the product
    agg = enriched.groupby("product_id", sort=False).agg(
        name=("product_name", "first"),
        category=("product_category", "first"),
        total_quantity=("quantity", "sum"),
        total_revenue=("total_amount", "sum"),
    ).reset_index()
    return agg[PRODUCT_ROLLUP_COLUMNS]


def rollup_by_category(enriched: pd.DataFrame) -> pd.DataFrame:
    if enriched.empty:
        return pd.DataFrame(columns=CATEGORY_ROLLUP_COLUMNS)

    agg = enriched.groupby("product_category", sort=False).agg(
        total_revenue=("total_amount", "sum"),
        total_quantity=("quantity", "sum"),
    ).reset_index()
    agg = agg.rename(columns={"product_category": "category"})
    return agg[CATEGORY_ROLLUP_COLUMNS]


def rollup_by_location(enriched: pd.DataFrame) -> pd.DataFrame:
    if enriched.empty:
        return pd.DataFrame(columns=LOCATION_ROLLUP_COLUMNS)

    agg = enriched.groupby("location_id", sort=False).agg(
        location_name=("location_name", "first"),
        sales_amount=("total_amount", "sum"),
    ).reset_index()
    return agg[LOCATION_ROLLUP_COLUMNS]


def window_days(days: int, today: date) -> list[date]:
    """The `days` UTC calendar days ending today, oldest first."""
    return [today - timedelta(days=offset) for offset in reversed(range(days))]


def rollup_by_day(enriched: pd.DataFrame, days: int, now: pd.Timestamp) -> pd.DataFrame:
    """Dense daily revenue over the window, zero-filled.

    Sales dated outside the buckets (e.g. the partial day at the start of
    the window) are left out of the series but still count in the totals.
    """
    buckets = window_days(days, now.tz_convert("UTC").date())

    if enriched.empty:
        amounts = pd.Series(0.0, index=buckets)
    else:
        sale_days = enriched["sale_date"].dt.tz_convert("UTC").dt.date
        amounts = enriched.groupby(sale_days)["total_amount"].sum()
        amounts = amounts.reindex(buckets, fill_value=0.0)

    return pd.DataFrame({"date": buckets, "sales_amount": amounts.to_numpy(dtype=float)})[DAILY_COLUMNS]


def build_sales_rollups(enriched: pd.DataFrame, days: int, now: pd.Timestamp) -> AggResult:
    """Produce a dict of rollup DataFrames, one per dimension."""
    return {
        "by_product": rollup_by_product(enriched),
        "by_category": rollup_by_category(enriched),
        "by_location": rollup_by_location(enriched),
        "by_day": rollup_by_day(enriched, days, now),
    }

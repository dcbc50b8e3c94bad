"""Turn rollup tables into ordered rankings and the daily trend series."""

import pandas as pd

from merchandising.domains.sales.aggregate import AggResult

TOP_N_PRODUCTS = 5


def _rank(df: pd.DataFrame, value_col: str) -> pd.DataFrame:
    # stable sort: equal values keep first-appearance order
    return df.sort_values(value_col, ascending=False, kind="stable").reset_index(drop=True)


def rank_top_products(by_product: pd.DataFrame, top_n: int = TOP_N_PRODUCTS) -> pd.DataFrame:
    return _rank(by_product, "total_revenue").head(top_n)


def rank_categories(by_category: pd.DataFrame) -> pd.DataFrame:
    """All categories, highest revenue first. No truncation."""
    return _rank(by_category, "total_revenue")


def rank_locations(by_location: pd.DataFrame) -> pd.DataFrame:
    return _rank(by_location, "sales_amount")


def order_daily_series(by_day: pd.DataFrame) -> pd.DataFrame:
    return by_day.sort_values("date", kind="stable").reset_index(drop=True)


def build_rankings(rollups: AggResult, top_n: int = TOP_N_PRODUCTS) -> AggResult:
    return {
        "top_products": rank_top_products(rollups["by_product"], top_n),
        "top_categories": rank_categories(rollups["by_category"]),
        "location_series": rank_locations(rollups["by_location"]),
        "sales_series": order_daily_series(rollups["by_day"]),
    }

"""Typed output structures and the rounding pass that produces them.

Rollup and ranking tables are materialized here, after all accumulation
is done, so every monetary figure is rounded exactly once.
"""

from dataclasses import dataclass, field
from datetime import date

import pandas as pd

from merchandising.domains.inventory.stock_levels import InventorySummary
from merchandising.domains.inventory.valuation import InventoryValuation
from merchandising.domains.sales.aggregate import AggResult, SalesTotals
from merchandising.utils.rounding import round_money

type ReportDict = dict[str, object]


@dataclass(frozen=True)
class OverviewSummary:
    total_products: int
    inventory_value: float
    low_stock_items: int
    total_sales: float
    total_units: int
    avg_order_value: float

    def to_dict(self) -> ReportDict:
        return {
            "totalProducts": self.total_products,
            "inventoryValue": self.inventory_value,
            "lowStockItems": self.low_stock_items,
            "totalSales": self.total_sales,
            "totalUnits": self.total_units,
            "avgOrderValue": self.avg_order_value,
        }


@dataclass(frozen=True)
class ProductRollup:
    product_id: str
    name: str
    category: str
    total_quantity: int
    total_revenue: float

    def to_dict(self) -> ReportDict:
        return {
            "productId": self.product_id,
            "name": self.name,
            "category": self.category,
            "totalQuantity": self.total_quantity,
            "totalRevenue": self.total_revenue,
        }


@dataclass(frozen=True)
class CategoryRollup:
    category: str
    total_revenue: float
    total_quantity: int

    def to_dict(self) -> ReportDict:
        return {
            "category": self.category,
            "totalRevenue": self.total_revenue,
            "totalQuantity": self.total_quantity,
        }


@dataclass(frozen=True)
class DailyPoint:
    date: date
    sales_amount: float

    def to_dict(self) -> ReportDict:
        return {"date": self.date.isoformat(), "salesAmount": self.sales_amount}


@dataclass(frozen=True)
class LocationPoint:
    location_name: str
    sales_amount: float

    def to_dict(self) -> ReportDict:
        return {"locationName": self.location_name, "salesAmount": self.sales_amount}


@dataclass(frozen=True)
class AnalyticsReport:
    overview: OverviewSummary
    top_products: list[ProductRollup] = field(default_factory=list)
    top_categories: list[CategoryRollup] = field(default_factory=list)
    sales_series: list[DailyPoint] = field(default_factory=list)
    location_series: list[LocationPoint] = field(default_factory=list)

    def to_dict(self) -> ReportDict:
        return {
            "overview": self.overview.to_dict(),
            "topProducts": [p.to_dict() for p in self.top_products],
            "topCategories": [c.to_dict() for c in self.top_categories],
            "salesSeries": [d.to_dict() for d in self.sales_series],
            "locationSeries": [loc.to_dict() for loc in self.location_series],
        }


def build_overview(valuation: InventoryValuation, totals: SalesTotals) -> OverviewSummary:
    return OverviewSummary(
        total_products=valuation.total_active_products,
        inventory_value=round_money(valuation.inventory_value),
        low_stock_items=valuation.low_stock_count,
        total_sales=round_money(totals.total_sales),
        total_units=totals.total_units,
        avg_order_value=round_money(totals.avg_order_value),
    )


def _products(df: pd.DataFrame) -> list[ProductRollup]:
    return [
        ProductRollup(
            product_id=str(row.product_id),
            name=str(row.name),
            category=str(row.category),
            total_quantity=int(row.total_quantity),
            total_revenue=round_money(row.total_revenue),
        )
        for row in df.itertuples(index=False)
    ]


def _categories(df: pd.DataFrame) -> list[CategoryRollup]:
    return [
        CategoryRollup(
            category=str(row.category),
            total_revenue=round_money(row.total_revenue),
            total_quantity=int(row.total_quantity),
        )
        for row in df.itertuples(index=False)
    ]


def _daily(df: pd.DataFrame) -> list[DailyPoint]:
    return [DailyPoint(date=row.date, sales_amount=round_money(row.sales_amount)) for row in df.itertuples(index=False)]


def _locations(df: pd.DataFrame) -> list[LocationPoint]:
    return [
        LocationPoint(location_name=str(row.location_name), sales_amount=round_money(row.sales_amount))
        for row in df.itertuples(index=False)
    ]


def normalize_report(
    valuation: InventoryValuation,
    totals: SalesTotals,
    rankings: AggResult,
) -> AnalyticsReport:
    """Round every monetary figure and materialize the typed report."""
    return AnalyticsReport(
        overview=build_overview(valuation, totals),
        top_products=_products(rankings["top_products"]),
        top_categories=_categories(rankings["top_categories"]),
        sales_series=_daily(rankings["sales_series"]),
        location_series=_locations(rankings["location_series"]),
    )


def inventory_summary_to_dict(summary: InventorySummary) -> ReportDict:
    return {
        "totalItems": summary.total_items,
        "lowStockItems": summary.low_stock_items,
        "outOfStockItems": summary.out_of_stock_items,
        "inventoryValue": round_money(summary.inventory_value),
    }


def _text(value: object) -> object:
    return None if pd.isna(value) else value


def inventory_listing_to_records(listing: pd.DataFrame) -> list[ReportDict]:
    return [
        {
            "productId": row.product_id,
            "locationId": row.location_id,
            "productName": _text(row.product_name),
            "productSku": _text(row.product_sku),
            "productCategory": _text(row.product_category),
            "productPrice": round_money(row.product_price),
            "locationName": _text(row.location_name),
            "locationType": _text(row.location_type),
            "quantity": int(row.quantity),
            "reorderPoint": int(row.reorder_point),
            "lineValue": round_money(row.line_value),
            "stockStatus": row.stock_status,
        }
        for row in listing.itertuples(index=False)
    ]

"""Current-moment inventory valuation and stock KPIs.

These figures reflect stock on hand right now and ignore the sales date
window entirely.
"""

from dataclasses import dataclass

import numpy as np
import pandas as pd

from merchandising.utils.types import ProductStatus


@dataclass(frozen=True)
class InventoryValuation:
    inventory_value: float
    low_stock_count: int
    total_active_products: int


def low_stock_mask(inventory: pd.DataFrame) -> pd.Series:
    """At or below the reorder point but not empty; zero stock is out-of-stock instead."""
    return (inventory["quantity"] > 0) & (inventory["quantity"] <= inventory["reorder_point"])


def compute_inventory_value(inventory: pd.DataFrame, products: pd.DataFrame) -> float:
    """Sum of quantity x price. Stock rows without a matching product are skipped."""
    prices = products[["id", "price"]].rename(columns={"id": "product_id"})
    priced = inventory.merge(prices, on="product_id", how="inner")
    if priced.empty:
        return 0.0
    value = np.sum(priced["quantity"].to_numpy(dtype=float) * priced["price"].to_numpy(dtype=float))
    return float(value)


def count_low_stock(inventory: pd.DataFrame) -> int:
    return int(low_stock_mask(inventory).sum())


def count_active_products(products: pd.DataFrame) -> int:
    return int((products["status"] == ProductStatus.ACTIVE.value).sum())


def run_valuation(inventory: pd.DataFrame, products: pd.DataFrame) -> InventoryValuation:
    return InventoryValuation(
        inventory_value=compute_inventory_value(inventory, products),
        low_stock_count=count_low_stock(inventory),
        total_active_products=count_active_products(products),
    )

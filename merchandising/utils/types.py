"""Shared type definitions for the analytics engine."""

from collections.abc import Iterable, Mapping
from enum import StrEnum

import pandas as pd


type RowSet = pd.DataFrame | Iterable[Mapping[str, object]]
type RequestParams = Mapping[str, object]


class ProductStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    DISCONTINUED = "discontinued"


class LocationType(StrEnum):
    WAREHOUSE = "warehouse"
    STORE = "store"
    ONLINE = "online"


class StockStatus(StrEnum):
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"


# Placeholder names for rows whose product or location has been deleted
UNKNOWN_LABEL = "Unknown"
UNKNOWN_LOCATION_LABEL = "Unknown Location"

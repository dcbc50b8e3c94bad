"""Pandera schemas for product, location and inventory row sets."""

import pandera as pa
from pandera import Column, Check

from merchandising.utils.types import LocationType, ProductStatus

VALID_PRODUCT_STATUSES = [s.value for s in ProductStatus]
VALID_LOCATION_TYPES = [t.value for t in LocationType]


ProductSchema = pa.DataFrameSchema(
    columns={
        "id": Column(str, Check.str_length(min_value=1), unique=True),
        "name": Column(str, nullable=True),
        "category": Column(str, nullable=True),
        "sku": Column(str, nullable=True, required=False),
        "price": Column(float, Check.greater_than_or_equal_to(0), coerce=True),
        "status": Column(str, Check.isin(VALID_PRODUCT_STATUSES)),
    },
    strict=False,
)


LocationSchema = pa.DataFrameSchema(
    columns={
        "id": Column(str, Check.str_length(min_value=1), unique=True),
        "name": Column(str, nullable=True),
        "type": Column(str, Check.isin(VALID_LOCATION_TYPES), nullable=True),
    },
    strict=False,
)


# One stock record per (product, location) pair
InventorySchema = pa.DataFrameSchema(
    columns={
        "product_id": Column(str, Check.str_length(min_value=1)),
        "location_id": Column(str, Check.str_length(min_value=1)),
        "quantity": Column(int, Check.greater_than_or_equal_to(0), coerce=True),
        "reorder_point": Column(int, Check.greater_than_or_equal_to(0), coerce=True),
    },
    unique=["product_id", "location_id"],
    strict=False,
)

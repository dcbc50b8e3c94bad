"""Pandera schemas for validating sale event rows."""

import pandera as pa
from pandera import Column, Check

# sale_date is parsed to tz-aware UTC before validation, so only
# presence is checked here
SalesSchema = pa.DataFrameSchema(
    columns={
        "id": Column(str, nullable=True, required=False),
        "product_id": Column(str, Check.str_length(min_value=1)),
        "location_id": Column(str, Check.str_length(min_value=1)),
        "quantity": Column(int, Check.greater_than(0), coerce=True),
        "unit_price": Column(float, Check.greater_than_or_equal_to(0), coerce=True),
        "total_amount": Column(float, Check.greater_than_or_equal_to(0), coerce=True),
        "sale_date": Column(nullable=False),
    },
    strict=False,
)

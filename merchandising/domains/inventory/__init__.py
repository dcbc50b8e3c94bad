"""Inventory domain: master data, stock valuation, and stock status."""

from merchandising.domains.inventory.ingest import (
    ingest_inventory,
    ingest_locations,
    ingest_products,
    prepare_inventory,
    prepare_locations,
    prepare_products,
)
from merchandising.domains.inventory.models import InventorySchema, LocationSchema, ProductSchema
from merchandising.domains.inventory.stock_levels import (
    build_inventory_listing,
    classify_stock_status,
    summarize_inventory,
)
from merchandising.domains.inventory.valuation import run_valuation
from merchandising.utils.types import RowSet
from merchandising.utils.validators import validate_dataframe


def validate(rows: RowSet, schema_name: str = "inventory") -> dict:
    """Check that a product, location, or inventory row set passes its schema."""
    match schema_name:
        case "products":
            prepared, schema = prepare_products(rows), ProductSchema
        case "locations":
            prepared, schema = prepare_locations(rows), LocationSchema
        case "inventory":
            prepared, schema = prepare_inventory(rows), InventorySchema
        case other:
            raise ValueError(f"No schema registered for: {other}")

    match validate_dataframe(prepared, schema):
        case {"valid": True}:
            return {"status": "ok", "row_count": len(prepared)}
        case {"valid": False, "errors": errs}:
            return {"status": "error", "message": "; ".join(errs[:3])}
        case _:
            return {"status": "error", "message": "Unknown validation result"}

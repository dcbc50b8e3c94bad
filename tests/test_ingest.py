"""Tests for row ingestion: field aliases, coercion and schema rejection."""

import pandas as pd
import pytest

from merchandising.domains import inventory as inventory_domain
from merchandising.domains import sales as sales_domain
from merchandising.domains.inventory.ingest import ingest_inventory, ingest_locations, ingest_products
from merchandising.domains.sales.ingest import ingest_sales
from merchandising.errors import InvalidRowsError
from merchandising.utils.transforms import as_number
from tests.conftest import sale


class TestProducts:
    def test_numeric_strings_are_parsed(self):
        df = ingest_products([{"id": "p1", "name": "Shoe", "category": "Footwear", "price": "1,250.50", "status": "active"}])
        assert df.loc[0, "price"] == 1250.5
        assert df["price"].dtype == "float64"

    def test_missing_status_defaults_to_active(self):
        df = ingest_products([{"id": "p1", "name": "Shoe", "category": None, "price": 10}])
        assert df.loc[0, "status"] == "active"

    def test_status_is_case_insensitive(self):
        df = ingest_products([{"id": "p1", "name": "Shoe", "price": 10, "status": "Discontinued"}])
        assert df.loc[0, "status"] == "discontinued"

    def test_blank_category_becomes_null(self):
        df = ingest_products([{"id": "p1", "name": "Shoe", "category": "  ", "price": 10}])
        assert df.loc[0, "category"] is None

    def test_unknown_status_is_rejected(self):
        with pytest.raises(InvalidRowsError) as exc:
            ingest_products([{"id": "p1", "name": "Shoe", "price": 10, "status": "archived"}])
        assert exc.value.row_set == "products"

    def test_negative_price_is_rejected(self):
        with pytest.raises(InvalidRowsError):
            ingest_products([{"id": "p1", "name": "Shoe", "price": -1}])

    def test_duplicate_ids_are_rejected(self):
        rows = [{"id": "p1", "name": "A", "price": 1}, {"id": "p1", "name": "B", "price": 2}]
        with pytest.raises(InvalidRowsError):
            ingest_products(rows)


class TestNumberParsing:
    def test_string_dtype_is_cleaned(self):
        parsed = as_number(pd.Series(["1,250.50", " 3 ", None], dtype="string"))
        assert list(parsed[:2]) == [1250.5, 3.0]
        assert pd.isna(parsed[2])

    def test_object_dtype_is_cleaned(self):
        assert list(as_number(pd.Series(["2,000", "7.25"], dtype="object"))) == [2000.0, 7.25]

    def test_products_with_string_dtype_prices(self):
        rows = pd.DataFrame([{"id": "p1", "name": "Shoe", "price": "1,250.50"}]).astype({"price": "string"})
        assert ingest_products(rows).loc[0, "price"] == 1250.5


class TestLocations:
    def test_type_is_lowercased(self):
        df = ingest_locations([{"id": "l1", "name": "Main", "type": "Warehouse"}])
        assert df.loc[0, "type"] == "warehouse"

    def test_unknown_type_is_rejected(self):
        with pytest.raises(InvalidRowsError):
            ingest_locations([{"id": "l1", "name": "Main", "type": "kiosk"}])


class TestInventory:
    def test_camel_case_and_numeric_strings(self):
        df = ingest_inventory([{"productId": "p1", "locationId": "l1", "quantity": "12", "reorderPoint": "4"}])
        assert list(df.columns[:4]) == ["product_id", "location_id", "quantity", "reorder_point"]
        assert df.loc[0, "quantity"] == 12
        assert df.loc[0, "reorder_point"] == 4
        assert pd.api.types.is_integer_dtype(df["quantity"])

    def test_negative_quantity_is_rejected(self):
        with pytest.raises(InvalidRowsError) as exc:
            ingest_inventory([{"productId": "p1", "locationId": "l1", "quantity": -1, "reorderPoint": 0}])
        assert "quantity" in str(exc.value)

    def test_fractional_quantity_is_rejected(self):
        with pytest.raises(InvalidRowsError):
            ingest_inventory([{"productId": "p1", "locationId": "l1", "quantity": "2.5", "reorderPoint": 0}])

    def test_duplicate_product_location_pair_is_rejected(self):
        rows = [
            {"productId": "p1", "locationId": "l1", "quantity": 1, "reorderPoint": 0},
            {"productId": "p1", "locationId": "l1", "quantity": 2, "reorderPoint": 0},
        ]
        with pytest.raises(InvalidRowsError):
            ingest_inventory(rows)

    def test_empty_row_set_has_the_expected_columns(self):
        df = ingest_inventory([])
        assert df.empty
        assert {"product_id", "location_id", "quantity", "reorder_point"} <= set(df.columns)


class TestSales:
    def test_sale_dates_are_utc(self):
        df = ingest_sales([sale("p1", "l1", 10.0, "2025-06-14T09:00:00+02:00")])
        assert str(df["sale_date"].dt.tz) == "UTC"
        assert df.loc[0, "sale_date"] == pd.Timestamp("2025-06-14T07:00:00Z")

    def test_naive_dates_are_taken_as_utc(self):
        df = ingest_sales([sale("p1", "l1", 10.0, "2025-06-14 09:00:00")])
        assert df.loc[0, "sale_date"] == pd.Timestamp("2025-06-14T09:00:00Z")

    def test_accepts_a_dataframe(self, sales):
        df = ingest_sales(pd.DataFrame(sales))
        assert len(df) == len(sales)
        assert df["total_amount"].sum() == pytest.approx(542.0)

    def test_does_not_mutate_input_frame(self, sales):
        raw = pd.DataFrame(sales)
        ingest_sales(raw)
        assert "saleDate" in raw.columns

    def test_zero_quantity_is_rejected(self):
        with pytest.raises(InvalidRowsError):
            ingest_sales([sale("p1", "l1", 10.0, "2025-06-14T09:00:00Z") | {"quantity": 0}])

    def test_unparseable_date_is_rejected(self):
        with pytest.raises(InvalidRowsError) as exc:
            ingest_sales([sale("p1", "l1", 10.0, "not a date")])
        assert exc.value.row_set == "sales"

    def test_missing_product_id_is_rejected(self):
        with pytest.raises(InvalidRowsError):
            ingest_sales([sale(None, "l1", 10.0, "2025-06-14T09:00:00Z")])

    def test_empty_row_set(self):
        df = ingest_sales(None)
        assert df.empty
        assert "sale_date" in df.columns


class TestValidate:
    def test_inventory_ok(self, inventory):
        assert inventory_domain.validate(inventory) == {"status": "ok", "row_count": 4}

    def test_inventory_reports_errors(self):
        result = inventory_domain.validate([{"productId": "p1", "locationId": "l1", "quantity": -3, "reorderPoint": 0}])
        assert result["status"] == "error"
        assert "quantity" in result["message"]

    def test_products_by_schema_name(self, products):
        assert inventory_domain.validate(products, schema_name="products") == {"status": "ok", "row_count": 4}

    def test_unknown_schema_name(self):
        with pytest.raises(ValueError):
            inventory_domain.validate([], schema_name="orders")

    def test_sales(self, sales):
        assert sales_domain.validate(sales) == {"status": "ok", "row_count": 5}

"""File I/O: a CSV-backed row source and report writers."""

import json
from datetime import datetime
from pathlib import Path

import pandas as pd
from rich.console import Console

from merchandising.utils.transforms import as_utc, as_utc_timestamp, normalize_columns

type FilePath = str | Path

console = Console(stderr=True)

ROW_SET_FILES = {
    "products": "products.csv",
    "locations": "locations.csv",
    "inventory": "inventory.csv",
    "sales": "sales.csv",
}


def read_row_set(directory: FilePath, row_set: str) -> pd.DataFrame:
    """Read one row set's CSV. Identifiers are kept as text."""
    path = Path(directory) / ROW_SET_FILES[row_set]
    if not path.exists():
        raise FileNotFoundError(f"{row_set} file not found: {path}")

    console.print(f"  Reading {path.name} ({path.stat().st_size / 1024:.0f} KB)")
    return pd.read_csv(path, dtype=str, keep_default_na=True)


class CsvRowSource:
    """Serves the four row sets from a directory of CSV exports."""

    def __init__(self, directory: FilePath):
        self.directory = Path(directory)

    def fetch_products(self) -> pd.DataFrame:
        return read_row_set(self.directory, "products")

    def fetch_locations(self) -> pd.DataFrame:
        return read_row_set(self.directory, "locations")

    def fetch_inventory(self) -> pd.DataFrame:
        return read_row_set(self.directory, "inventory")

    def fetch_sales(self, since: datetime, location: str | None) -> pd.DataFrame:
        """Sales on or after `since`, optionally for one location."""
        sales = normalize_columns(read_row_set(self.directory, "sales"))
        sale_dates = as_utc_timestamp(sales["sale_date"])
        mask = sale_dates >= as_utc(since)
        if location is not None:
            mask &= sales["location_id"].str.strip() == location
        # unparseable dates stay in so ingestion can reject them
        mask |= sale_dates.isna()
        return sales.loc[mask].reset_index(drop=True)


def write_output(data: dict | list, path: FilePath, fmt: str = "json") -> Path:
    """Write a report structure to disk."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    match fmt:
        case "json":
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, default=str)
        case other:
            raise ValueError(f"Unsupported output format: {other}")

    console.print(f"  Wrote report to {path}")
    return path

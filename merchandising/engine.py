"""Request-scoped analytics computation over supplied row sets.

`compute_analytics` is a pure function of its inputs. `build_analytics` puts
the row-fetch step in front of the same aggregation and is the only layer
that logs. A fetch failure aborts the computation with `RowFetchError`
rather than producing an all-zero report that would read as "no activity".
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Protocol

import pandas as pd

from merchandising.config import EngineConfig
from merchandising.domains.inventory.ingest import ingest_inventory, ingest_locations, ingest_products
from merchandising.domains.inventory.stock_levels import build_inventory_listing, summarize_inventory
from merchandising.domains.inventory.valuation import run_valuation
from merchandising.domains.sales.aggregate import (
    build_sales_rollups,
    compute_totals,
    count_dangling_keys,
    enrich_sales,
)
from merchandising.domains.sales.filters import DEFAULT_DAYS, SalesFilter, resolve_filter, resolve_location
from merchandising.domains.sales.ingest import ingest_sales
from merchandising.domains.sales.ranking import TOP_N_PRODUCTS, build_rankings
from merchandising.errors import AnalyticsError, RowFetchError
from merchandising.report import (
    AnalyticsReport,
    ReportDict,
    inventory_listing_to_records,
    inventory_summary_to_dict,
    normalize_report,
)
from merchandising.utils.types import RequestParams, RowSet

logger = logging.getLogger(__name__)


class RowSource(Protocol):
    """The row-fetch collaborator. Any method may raise on failure."""

    def fetch_products(self) -> RowSet: ...

    def fetch_locations(self) -> RowSet: ...

    def fetch_inventory(self) -> RowSet: ...

    def fetch_sales(self, since: datetime, location: str | None) -> RowSet: ...


def _fetch(row_set: str, fetch: Callable[[], RowSet]) -> RowSet:
    try:
        rows = fetch()
    except AnalyticsError:
        raise
    except Exception as exc:
        logger.error(f"Row fetch failed for {row_set}: {exc}")
        raise RowFetchError(row_set, str(exc)) from exc
    if rows is None:
        logger.error(f"Row source returned nothing for {row_set}")
        raise RowFetchError(row_set, "row source returned no result")
    return rows


def _supplied(row_set: str, rows: RowSet | None) -> RowSet:
    if rows is None:
        raise RowFetchError(row_set, "no rows supplied")
    return rows


def _settings(config: EngineConfig | None) -> tuple[int, int]:
    if config is None:
        return DEFAULT_DAYS, TOP_N_PRODUCTS
    return config.default_days, config.top_n


def _aggregate(
    products: pd.DataFrame,
    locations: pd.DataFrame,
    inventory: pd.DataFrame,
    sales: pd.DataFrame,
    sales_filter: SalesFilter,
    top_n: int,
) -> AnalyticsReport:
    # the fetch may have pushed the predicate down already; re-applying it is idempotent
    accepted = sales_filter.apply(sales)

    valuation = run_valuation(inventory, products)
    totals = compute_totals(accepted)
    enriched = enrich_sales(accepted, products, locations)
    rollups = build_sales_rollups(enriched, sales_filter.days, sales_filter.now)
    rankings = build_rankings(rollups, top_n=top_n)

    return normalize_report(valuation, totals, rankings)


def compute_analytics(
    products: RowSet,
    locations: RowSet,
    inventory: RowSet,
    sales: RowSet,
    params: RequestParams | None = None,
    now: datetime | None = None,
    config: EngineConfig | None = None,
) -> AnalyticsReport:
    """Compute the dashboard aggregate from already-fetched rows.

    A row set of `None` means the fetch failed and raises `RowFetchError`;
    an empty row set means no activity.
    """
    default_days, top_n = _settings(config)
    sales_filter = resolve_filter(params, now=now, default_days=default_days)
    return _aggregate(
        ingest_products(_supplied("products", products)),
        ingest_locations(_supplied("locations", locations)),
        ingest_inventory(_supplied("inventory", inventory)),
        ingest_sales(_supplied("sales", sales)),
        sales_filter,
        top_n,
    )


def build_analytics(
    source: RowSource,
    params: RequestParams | None = None,
    now: datetime | None = None,
    config: EngineConfig | None = None,
) -> AnalyticsReport:
    """Fetch rows from `source` and compute the aggregate for one request."""
    default_days, top_n = _settings(config)
    sales_filter = resolve_filter(params, now=now, default_days=default_days)

    products = ingest_products(_fetch("products", source.fetch_products))
    locations = ingest_locations(_fetch("locations", source.fetch_locations))
    inventory = ingest_inventory(_fetch("inventory", source.fetch_inventory))
    sales = ingest_sales(
        _fetch(
            "sales",
            lambda: source.fetch_sales(sales_filter.threshold.to_pydatetime(), sales_filter.location),
        )
    )

    dangling = count_dangling_keys(sales, products, locations)
    if dangling["products"] or dangling["locations"]:
        logger.warning(
            f"{dangling['products']} sales reference unknown products, "
            f"{dangling['locations']} reference unknown locations"
        )

    report = _aggregate(products, locations, inventory, sales, sales_filter, top_n)
    logger.info(
        f"Computed analytics over {len(sales):,} fetched sales for {sales_filter.days} days "
        f"(location={sales_filter.location or 'all'}): total={report.overview.total_sales}"
    )
    return report


def build_inventory_report(
    source: RowSource,
    search: str | None = None,
    location: object = None,
) -> ReportDict:
    """Filtered inventory listing plus its headline figures."""
    products = ingest_products(_fetch("products", source.fetch_products))
    locations = ingest_locations(_fetch("locations", source.fetch_locations))
    inventory = ingest_inventory(_fetch("inventory", source.fetch_inventory))

    listing = build_inventory_listing(inventory, products, locations, search=search, location=location)
    logger.info(
        f"Inventory listing: {len(listing):,} of {len(inventory):,} stock rows "
        f"(search={search!r}, location={resolve_location(location) or 'all'})"
    )
    return {
        "summary": inventory_summary_to_dict(summarize_inventory(listing)),
        "items": inventory_listing_to_records(listing),
    }

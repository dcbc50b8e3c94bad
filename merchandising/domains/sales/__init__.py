"""Sales domain: filtering, rollups, and rankings over sale events."""

from merchandising.domains.sales.aggregate import build_sales_rollups, compute_totals, enrich_sales
from merchandising.domains.sales.filters import SalesFilter, parse_days, resolve_filter
from merchandising.domains.sales.ingest import ingest_sales, prepare_sales
from merchandising.domains.sales.models import SalesSchema
from merchandising.domains.sales.ranking import build_rankings
from merchandising.utils.types import RowSet
from merchandising.utils.validators import validate_dataframe


def validate(rows: RowSet) -> dict:
    """Check that a sales row set parses and passes the schema."""
    prepared = prepare_sales(rows)
    result = validate_dataframe(prepared, SalesSchema)

    match result:
        case {"valid": True}:
            return {"status": "ok", "row_count": len(prepared)}
        case {"valid": False, "errors": errs}:
            return {"status": "error", "message": "; ".join(errs[:3])}
        case _:
            return {"status": "error", "message": "Unknown validation result"}

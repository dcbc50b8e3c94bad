"""Resolve request-level filters into the predicate applied to sale events.

Bad input never raises here: a missing or non-numeric ``days`` falls back
to the default window, and ``location`` of ``None``, ``""`` or ``"all"``
disables the location filter.
"""

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import pandas as pd

from merchandising.utils.transforms import as_utc
from merchandising.utils.types import RequestParams

DEFAULT_DAYS = 30
# upper bound on the window; larger values count as invalid input
MAX_DAYS = 3660
ALL_LOCATIONS = "all"

_LEADING_INT = re.compile(r"^\s*\+?(\d+)")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_days(value: object, default: int = DEFAULT_DAYS) -> int:
    """Parse the window length with integer-prefix semantics ("7days" -> 7).

    Values outside 1..MAX_DAYS fall back to `default`.
    """
    match value:
        case bool():
            return default
        case int() if 0 < value <= MAX_DAYS:
            return value
        case float() if math.isfinite(value) and 1 <= value < MAX_DAYS + 1:
            return int(value)
        case str():
            m = _LEADING_INT.match(value)
            if m and 0 < int(m.group(1)) <= MAX_DAYS:
                return int(m.group(1))
            return default
        case _:
            return default


def resolve_location(value: object) -> str | None:
    if value is None:
        return None
    location = str(value).strip()
    if not location or location.lower() == ALL_LOCATIONS:
        return None
    return location


@dataclass(frozen=True)
class SalesFilter:
    days: int
    location: str | None
    now: pd.Timestamp

    @property
    def threshold(self) -> pd.Timestamp:
        return self.now - timedelta(days=self.days)

    def accepts(self, sale: Mapping[str, object]) -> bool:
        """Scalar form of the predicate, for a single sale mapping."""
        sale_date = sale.get("sale_date", sale.get("saleDate"))
        if sale_date is None:
            return False
        try:
            moment = as_utc(sale_date)
        except (ValueError, TypeError):
            return False
        if pd.isna(moment) or moment < self.threshold:
            return False
        if self.location is None:
            return True
        location_id = sale.get("location_id", sale.get("locationId"))
        return location_id is not None and str(location_id).strip() == self.location

    def apply(self, sales: pd.DataFrame) -> pd.DataFrame:
        """Vectorized form of `accepts` over an ingested sales frame."""
        mask = sales["sale_date"] >= self.threshold
        if self.location is not None:
            mask &= sales["location_id"] == self.location
        return sales.loc[mask].reset_index(drop=True)


def resolve_filter(
    params: RequestParams | None = None,
    now: datetime | None = None,
    default_days: int = DEFAULT_DAYS,
) -> SalesFilter:
    params = params or {}
    return SalesFilter(
        days=parse_days(params.get("days"), default=default_days),
        location=resolve_location(params.get("location")),
        now=as_utc(now or utc_now()),
    )

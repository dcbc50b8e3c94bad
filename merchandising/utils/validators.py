"""Data validation utilities using pandera."""

import pandera as pa
import pandas as pd
from pandera import DataFrameSchema

from merchandising.errors import InvalidRowsError

type ValidationResult = dict[str, str | bool | list[str]]


def _describe_failures(exc: pa.errors.SchemaErrors) -> list[str]:
    errors = []
    for _, row in exc.failure_cases.iterrows():
        match row.to_dict():
            case {"column": col, "check": check, "failure_case": val} if col is not None:
                errors.append(f"Column '{col}' failed check '{check}': {val}")
            case {"check": check, "failure_case": val}:
                errors.append(f"Failed check '{check}': {val}")
            case failure:
                errors.append(f"Validation failure: {failure}")
    return errors


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationResult:
    """Validate a DataFrame against a pandera schema without raising."""
    try:
        schema.validate(df, lazy=True)
        return {"valid": True, "status": "ok", "errors": []}
    except pa.errors.SchemaErrors as e:
        return {"valid": False, "status": "error", "errors": _describe_failures(e)}


def validate_rows(df: pd.DataFrame, schema: DataFrameSchema, row_set: str) -> pd.DataFrame:
    """Validate and coerce a row set, raising InvalidRowsError on failure."""
    try:
        return schema.validate(df, lazy=True)
    except pa.errors.SchemaErrors as e:
        raise InvalidRowsError(row_set, _describe_failures(e)) from e

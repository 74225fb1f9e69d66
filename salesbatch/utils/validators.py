"""Report frame validation using pandera."""

import pandera as pa
import pandas as pd
from pandera import DataFrameSchema

type ValidationResult = dict[str, str | bool | list[str]]


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationResult:
    """Validate a DataFrame against a pandera schema."""
    try:
        schema.validate(df, lazy=True)
        return {"valid": True, "status": "ok", "errors": []}
    except pa.errors.SchemaErrors as e:
        errors = []
        for _, row in e.failure_cases.iterrows():
            match row.to_dict():
                case {"column": col, "check": check, "failure_case": val}:
                    errors.append(f"Column '{col}' failed check '{check}': {val}")
                case failure:
                    errors.append(f"Validation failure: {failure}")
        return {"valid": False, "status": "error", "errors": errors}


def validate_non_increasing(df: pd.DataFrame, column: str) -> ValidationResult:
    """Check that a ranking column never increases from one row to the next."""
    match df[column].is_monotonic_decreasing:
        case True:
            return {"valid": True, "status": "ok", "errors": []}
        case _:
            return {
                "valid": False,
                "status": "error",
                "errors": [f"Column '{column}' is not in non-increasing order"],
            }

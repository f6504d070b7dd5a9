"""
Column Validators

Checks run on input DataFrames before a column-wise operation.
"""

import polars as pl
from typing import Iterable
import logging

logger = logging.getLogger(__name__)


def validate_numeric_columns(df: pl.DataFrame, columns: Iterable[str]) -> bool:
    """
    Validate that the given columns exist and hold numeric data

    Args:
        df: DataFrame to validate
        columns: Names of the columns that must be numeric

    Returns:
        bool: True if valid, raises exception if invalid
    """
    for column in columns:
        if column not in df.columns:
            raise ValueError(
                f"Missing column '{column}': available columns are {df.columns}"
            )

        dtype = df.schema[column]
        if not dtype.is_numeric():
            raise ValueError(f"Column '{column}' is not numeric: got {dtype}")

    logger.debug(f"Numeric validation passed for {list(columns)}")
    return True


def count_zeros(df: pl.DataFrame, column: str) -> int:
    """Count rows where column equals zero (nulls are not counted)"""
    return df.select((pl.col(column) == 0).sum()).item()


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
# Largest magnitude whose square still fits in Int64
SQUARE_LIMIT = 3_037_000_499


def widen_integer(df: pl.DataFrame, column: str) -> pl.Expr:
    """
    Expression for column with integer dtypes widened to Int64

    polars computes integer arithmetic in the column's own dtype and wraps
    on overflow, so narrow ints are cast up before any arithmetic.

    Args:
        df: DataFrame holding the column
        column: Column to widen

    Returns:
        pl.Expr: Int64 expression for integer columns, the plain column otherwise
    """
    dtype = df.schema[column]
    if not dtype.is_integer():
        return pl.col(column)

    if dtype == pl.UInt64:
        largest = df.select(pl.col(column).max()).item()
        if largest is not None and largest > INT64_MAX:
            raise ValueError(
                f"Column '{column}' has values above the Int64 range: max {largest}"
            )

    return pl.col(column).cast(pl.Int64)


def check_square_overflow(df: pl.DataFrame, column: str) -> bool:
    """
    Validate that squaring an integer column stays within Int64

    Returns:
        bool: True if valid, raises exception if invalid
    """
    if not df.schema[column].is_integer():
        return True

    smallest, largest = df.select(
        [pl.col(column).min(), pl.col(column).max()]
    ).row(0)
    if (largest is not None and largest > SQUARE_LIMIT) or (
        smallest is not None and smallest < -SQUARE_LIMIT
    ):
        raise ValueError(
            f"Squaring column '{column}' overflows Int64: "
            f"values range from {smallest} to {largest}"
        )
    return True


def check_sum_overflow(df: pl.DataFrame, left: str, right: str) -> bool:
    """
    Validate that adding two integer columns stays within Int64

    Float operands give a float sum and are not checked.

    Returns:
        bool: True if valid, raises exception if invalid
    """
    if not (df.schema[left].is_integer() and df.schema[right].is_integer()):
        return True

    a = widen_integer(df, left)
    b = widen_integer(df, right)
    overflow = ((b > 0) & (a > pl.lit(INT64_MAX, dtype=pl.Int64) - b)) | (
        (b < 0) & (a < pl.lit(INT64_MIN, dtype=pl.Int64) - b)
    )

    overflow_count = df.select(overflow.sum()).item()
    if overflow_count > 0:
        raise ValueError(
            f"Adding '{left}' + '{right}' overflows Int64 in {overflow_count} row(s)"
        )
    return True

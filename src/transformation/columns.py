"""
Column Operations - Transform Layer

Row-wise add, square and divide over polars DataFrame columns.
Every function returns a new DataFrame with one extra column.
"""

import polars as pl
from typing import Any, Dict, Optional
import logging

from src.arithmetic.errors import DivisionByZero
from .validators import (
    check_square_overflow,
    check_sum_overflow,
    count_zeros,
    validate_numeric_columns,
    widen_integer,
)

logger = logging.getLogger(__name__)


def add_columns(
    df: pl.DataFrame, left: str, right: str, output: str = "sum"
) -> pl.DataFrame:
    """
    Add two columns row by row

    Args:
        df: Input DataFrame
        left: Name of the first operand column
        right: Name of the second operand column
        output: Name of the result column

    Returns:
        pl.DataFrame: Copy of df with the result column appended

    Raises:
        ValueError: If the integer sum overflows Int64
    """
    validate_numeric_columns(df, [left, right])
    check_sum_overflow(df, left, right)

    result_df = df.with_columns(
        (widen_integer(df, left) + widen_integer(df, right)).alias(output)
    )

    logger.info(f"Added '{left}' + '{right}' into '{output}' for {df.height} rows")
    return result_df


def square_column(
    df: pl.DataFrame, column: str, output: Optional[str] = None
) -> pl.DataFrame:
    """
    Square a column row by row

    Args:
        df: Input DataFrame
        column: Name of the column to square
        output: Name of the result column, defaults to "<column>_squared"

    Returns:
        pl.DataFrame: Copy of df with the result column appended

    Raises:
        ValueError: If the integer square overflows Int64
    """
    validate_numeric_columns(df, [column])
    value = widen_integer(df, column)
    check_square_overflow(df, column)
    output = output or f"{column}_squared"

    result_df = df.with_columns((value * value).alias(output))

    logger.info(f"Squared '{column}' into '{output}' for {df.height} rows")
    return result_df


def divide_columns(
    df: pl.DataFrame, dividend: str, divisor: str, output: str = "quotient"
) -> pl.DataFrame:
    """
    Divide one column by another row by row

    Null divisors give null results. A zero divisor anywhere in the column
    fails the whole operation.

    Args:
        df: Input DataFrame
        dividend: Name of the dividend column
        divisor: Name of the divisor column
        output: Name of the Float64 result column

    Returns:
        pl.DataFrame: Copy of df with the result column appended

    Raises:
        DivisionByZero: If any divisor value is zero
    """
    validate_numeric_columns(df, [dividend, divisor])

    zero_count = count_zeros(df, divisor)
    if zero_count > 0:
        logger.error(f"❌ Column '{divisor}' has {zero_count} zero values")
        raise DivisionByZero(
            message=f"Cannot divide '{dividend}' by '{divisor}': "
            f"{zero_count} zero divisor(s)"
        )

    result_df = df.with_columns(
        (pl.col(dividend) / pl.col(divisor)).cast(pl.Float64).alias(output)
    )

    logger.info(f"Divided '{dividend}' by '{divisor}' into '{output}'")
    return result_df


def summarize_column(df: pl.DataFrame, column: str) -> Dict[str, Any]:
    """
    Summary statistics for a numeric column

    Args:
        df: DataFrame holding the column
        column: Column to summarize

    Returns:
        Dict: count, null_count, min, max and mean of the column
    """
    validate_numeric_columns(df, [column])

    stats = df.select(
        [
            pl.col(column).count().alias("count"),
            pl.col(column).null_count().alias("null_count"),
            pl.col(column).min().alias("min"),
            pl.col(column).max().alias("max"),
            pl.col(column).mean().alias("mean"),
        ]
    ).row(0, named=True)

    logger.info(f"Summary for '{column}': {stats}")
    return stats

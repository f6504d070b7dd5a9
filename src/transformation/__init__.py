"""
Transformation Layer - Column-wise Arithmetic

This layer applies the arithmetic operations to polars DataFrames.
- Pure functions (DataFrame in → new DataFrame out)
- No I/O operations
- Inputs are validated before computing
"""

"""Candidate-table loading utilities."""

from pathlib import Path

import pandas as pd


def read_table(path: Path) -> pd.DataFrame:
    """
    Read a candidate names table (Excel or CSV) based on file extension.

    Every cell is read as a string and empty cells stay empty strings, so names
    such as "3DES" or "40" are never coerced to numbers or NaN.

    Supported formats:
    - Excel: .xlsx, .xls
    - CSV: .csv

    Raises:
        ValueError: If file format is not supported
        FileNotFoundError: If file does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    suffix = path.suffix.lower()

    if suffix in [".xlsx", ".xls"]:
        return pd.read_excel(path, dtype=str, keep_default_na=False)
    elif suffix == ".csv":
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .xlsx, .xls, .csv")

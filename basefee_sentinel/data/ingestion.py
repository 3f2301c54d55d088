"""
Recorded base fee series ingestion.

Loads a historical base fee series from CSV or JSON so the host can replay it
through the trap step by step.

Design:
- Format detection from the file extension, or explicit format
- Accepts a "basefee" or "base_fee_per_gas" column (hex strings allowed)
- Optional "block" column orders the series
- Bad values are fatal; rows are never skipped
"""

import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from basefee_sentinel.core.exceptions import DataValidationError

logger = logging.getLogger(__name__)

VALUE_COLUMNS = ("basefee", "base_fee_per_gas", "baseFeePerGas")


def _to_int(value) -> int:
    if isinstance(value, str):
        text = value.strip()
        if text.lower().startswith("0x"):
            return int(text, 16)
        return int(text)
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"non-integer base fee {value}")
        return int(value)
    return int(value)


def read_series_frame(filepath: Union[str, Path], format: str = "auto") -> pd.DataFrame:
    """
    Read a series file into a DataFrame.

    Args:
        filepath: Path to CSV or JSON file
        format: "csv", "json", or "auto" for detection by suffix

    Raises:
        DataValidationError: If the file is missing or the format unsupported
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise DataValidationError(f"Series file not found: {filepath}")

    if format == "auto":
        format = "json" if filepath.suffix.lower() in {".json", ".ndjson"} else "csv"

    try:
        if format == "csv":
            return pd.read_csv(filepath, dtype=str)
        if format == "json":
            return pd.read_json(filepath, dtype=False, lines=filepath.suffix.lower() == ".ndjson")
    except ValueError as e:
        raise DataValidationError(f"Failed to read series {filepath}: {e}") from e

    raise DataValidationError(f"Unknown format: {format}")


def load_basefee_series(filepath: Union[str, Path], format: str = "auto") -> List[int]:
    """
    Load a base fee series in replay order.

    Returns:
        List of non-negative integer base fees, oldest first

    Raises:
        DataValidationError: On missing column, empty series, or invalid values
    """
    df = read_series_frame(filepath, format=format)

    column = next((c for c in VALUE_COLUMNS if c in df.columns), None)
    if column is None:
        raise DataValidationError(
            f"Series {filepath} has no base fee column (expected one of {', '.join(VALUE_COLUMNS)})"
        )

    if "block" in df.columns:
        try:
            blocks = df["block"].map(_to_int)
        except (TypeError, ValueError) as e:
            raise DataValidationError(f"Invalid block number in {filepath}: {e}") from e
        df = df.assign(_block=blocks).sort_values("_block", kind="stable")

    values: List[int] = []
    for row_num, raw in enumerate(df[column].tolist(), start=1):
        if raw is None or (isinstance(raw, float) and pd.isna(raw)):
            raise DataValidationError(f"Missing base fee at row {row_num}")
        try:
            value = _to_int(raw)
        except (TypeError, ValueError) as e:
            raise DataValidationError(f"Invalid base fee at row {row_num}: {raw!r}") from e
        if value < 0:
            raise DataValidationError(f"Negative base fee at row {row_num}: {value}")
        values.append(value)

    if not values:
        raise DataValidationError(f"Series {filepath} is empty")

    logger.info("Loaded %d base fee samples from %s", len(values), filepath)
    return values

"""Column contracts for exported grid snapshots."""

from __future__ import annotations

import pyarrow as pa

SNAPSHOT_COLUMNS: tuple[str, ...] = ("id", "state", "row", "col")
"""Export column order shared by the CSV and Parquet writers."""

SNAPSHOT_SCHEMA = pa.schema(
    [
        ("id", pa.int64()),
        ("state", pa.int8()),
        ("row", pa.int64()),
        ("col", pa.int64()),
    ]
)

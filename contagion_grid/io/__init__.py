"""Export collaborators: snapshot schemas, output paths, and file writers."""

from contagion_grid.io.export import (
    snapshot_columns,
    write_grid,
    write_grid_csv,
    write_grid_parquet,
)
from contagion_grid.io.paths import default_output_path, ensure_parent, infer_format
from contagion_grid.io.schemas import SNAPSHOT_COLUMNS, SNAPSHOT_SCHEMA

__all__ = [
    "SNAPSHOT_COLUMNS",
    "SNAPSHOT_SCHEMA",
    "default_output_path",
    "ensure_parent",
    "infer_format",
    "snapshot_columns",
    "write_grid",
    "write_grid_csv",
    "write_grid_parquet",
]

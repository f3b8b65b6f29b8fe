"""Writers for the flattened final-grid snapshot."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from contagion_grid.domain.grid import Grid
from contagion_grid.io.paths import ensure_parent, infer_format
from contagion_grid.io.schemas import SNAPSHOT_COLUMNS, SNAPSHOT_SCHEMA

logger = logging.getLogger(__name__)


def snapshot_columns(grid: Grid) -> dict[str, list[int]]:
    """Return the flat snapshot as column lists keyed by export column name."""
    columns: dict[str, list[int]] = {name: [] for name in SNAPSHOT_COLUMNS}
    for record in grid.to_flat_snapshot():
        columns["id"].append(record.cell_id)
        columns["state"].append(int(record.state))
        columns["row"].append(record.row)
        columns["col"].append(record.col)
    return columns


def write_grid_csv(grid: Grid, path: Path) -> Path:
    """Write one CSV row per cell in row-major order, with an ``id,state,row,col`` header."""
    path = ensure_parent(Path(path))
    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(SNAPSHOT_COLUMNS)
        for record in grid.to_flat_snapshot():
            writer.writerow((record.cell_id, int(record.state), record.row, record.col))
    logger.info("Wrote %d cells to %s", grid.height * grid.width, path)
    return path


def write_grid_parquet(grid: Grid, path: Path) -> Path:
    """Write the flat snapshot to Parquet using :data:`SNAPSHOT_SCHEMA`."""
    path = ensure_parent(Path(path))
    table = pa.Table.from_pydict(snapshot_columns(grid), schema=SNAPSHOT_SCHEMA)
    pq.write_table(table, path)
    logger.info("Wrote %d cells to %s", table.num_rows, path)
    return path


def write_grid(grid: Grid, path: Path, fmt: str | None = None) -> Path:
    """Dispatch to the CSV or Parquet writer; *fmt* defaults to the path suffix."""
    path = Path(path)
    fmt = fmt or infer_format(path)
    if fmt == "csv":
        return write_grid_csv(grid, path)
    if fmt == "parquet":
        return write_grid_parquet(grid, path)
    raise ValueError(f"unsupported export format: {fmt!r}")

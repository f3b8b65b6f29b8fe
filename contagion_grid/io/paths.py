"""Path construction helpers for model output files."""

from __future__ import annotations

from pathlib import Path

from contagion_grid.config.constants import DEFAULT_OUTPUT

EXPORT_SUFFIXES: dict[str, str] = {"csv": ".csv", "parquet": ".parquet"}
"""File suffix written for each supported export format."""


def default_output_path(fmt: str = "csv") -> Path:
    """Return the default export path for *fmt*."""
    try:
        suffix = EXPORT_SUFFIXES[fmt]
    except KeyError as exc:
        valid = ", ".join(EXPORT_SUFFIXES)
        raise ValueError(f"format must be one of {valid}") from exc
    return Path(DEFAULT_OUTPUT).with_suffix(suffix)


def infer_format(path: Path) -> str:
    """Infer the export format from *path*'s suffix, defaulting to CSV."""
    for fmt, suffix in EXPORT_SUFFIXES.items():
        if path.suffix.lower() == suffix:
            return fmt
    return "csv"


def ensure_parent(path: Path) -> Path:
    """Create *path*'s parent directory if needed and return *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    return path

"""CLI entrypoint: run the model and export the final grid.

Settings resolve as CLI flag > JSON config file (``--config``) > built-in
default. The final grid is written as CSV or Parquet and a JSON summary is
printed to stdout.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from contagion_grid.config.constants import (
    DEFAULT_RUNS,
    DEFAULT_SEED_CELLS,
    GRID_HEIGHT,
    GRID_WIDTH,
)
from contagion_grid.config.types import ModelConfig
from contagion_grid.io.export import write_grid
from contagion_grid.io.paths import EXPORT_SUFFIXES, default_output_path, infer_format
from contagion_grid.simulation.engine import run_simulation

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ---------------------------------------------------------------------------
# Value coercion helpers
# ---------------------------------------------------------------------------


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        return int(raw)
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _coerce_seed_cells(raw: object) -> tuple[tuple[int, int], ...]:
    """Coerce a JSON list of ``[row, col]`` pairs into seed coordinates."""
    if not isinstance(raw, (list, tuple)):
        raise ValueError("seed_cells must be a list of [row, col] pairs")
    cells: list[tuple[int, int]] = []
    for item in raw:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise ValueError(f"seed_cells entries must be [row, col] pairs, got {item!r}")
        cells.append((_coerce_int(item[0], "seed_cells"), _coerce_int(item[1], "seed_cells")))
    return tuple(cells)


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_int(
    cli_val: int | None, key: str, file_cfg: dict[str, object]
) -> int | None:
    raw = _get_val(cli_val, key, file_cfg, None)
    return None if raw is None else _coerce_int(raw, key)


def _get_optional_str(
    cli_val: str | Path | None, key: str, file_cfg: dict[str, object]
) -> str | None:
    raw = _get_val(cli_val, key, file_cfg, None)
    return None if raw is None else _coerce_str(raw, key)


def _load_config_file(parser: argparse.ArgumentParser, path: Path | None) -> dict[str, object]:
    if path is None:
        return {}
    try:
        loaded = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        parser.error(f"Config file not found: {path}")
    except json.JSONDecodeError as exc:
        parser.error(f"Config file is not valid JSON: {path}: {exc}")
    except UnicodeDecodeError as exc:
        parser.error(f"Config file is not valid UTF-8: {path}: {exc}")
    except OSError as exc:
        parser.error(f"Config file could not be read: {path}: {exc}")
    if not isinstance(loaded, dict):
        parser.error(f"Config file must contain a JSON object: {path}")
    return loaded


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run the epidemic grid model")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--runs", type=int, default=None, help="Number of ticks to apply")
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--sim-seed", type=int, default=None)
    parser.add_argument("--out", type=Path, default=None, help="Export path for the final grid")
    parser.add_argument("--format", type=str, choices=list(EXPORT_SUFFIXES), default=None)
    parser.add_argument("--plot", type=Path, default=None, help="Save a PNG of the final grid")
    parser.add_argument(
        "--curve", type=Path, default=None, help="Save a PNG of infected cells per tick"
    )
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Run one simulation, export the final grid, and print a JSON summary."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    file_cfg = _load_config_file(parser, args.config)

    try:
        config = ModelConfig(
            height=_get_int(args.height, "height", file_cfg, GRID_HEIGHT),
            width=_get_int(args.width, "width", file_cfg, GRID_WIDTH),
            runs=_get_int(args.runs, "runs", file_cfg, DEFAULT_RUNS),
            seed_cells=_coerce_seed_cells(file_cfg.get("seed_cells", DEFAULT_SEED_CELLS)),
            sim_seed=_get_optional_int(args.sim_seed, "sim_seed", file_cfg),
        )
        fmt = _get_optional_str(args.format, "format", file_cfg)
        if fmt is not None and fmt not in EXPORT_SUFFIXES:
            raise ValueError(f"format must be one of {', '.join(EXPORT_SUFFIXES)}")
        out_raw = _get_optional_str(args.out, "out", file_cfg)
        plot_raw = _get_optional_str(args.plot, "plot", file_cfg)
        curve_raw = _get_optional_str(args.curve, "curve", file_cfg)
    except ValueError as exc:
        parser.error(str(exc))

    out_path = Path(out_raw) if out_raw is not None else default_output_path(fmt or "csv")
    fmt = fmt or infer_format(out_path)

    result = run_simulation(config)
    write_grid(result.grid, out_path, fmt)

    if plot_raw is not None or curve_raw is not None:
        import matplotlib

        matplotlib.use("Agg")
        from contagion_grid.viz.render import render_grid, render_infection_curve

        if plot_raw is not None:
            render_grid(result.grid, Path(plot_raw), title=f"Tick {config.runs}")
        if curve_raw is not None:
            render_infection_curve(
                result.infected_counts,
                Path(curve_raw),
                total_cells=config.height * config.width,
            )

    summary = {
        "runs": config.runs,
        "height": config.height,
        "width": config.width,
        "sim_seed": config.sim_seed,
        "initial_infected": result.initial_infected,
        "final_infected": result.final_infected,
        "output": str(out_path),
        "format": fmt,
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()

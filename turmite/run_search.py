"""CLI entrypoint for seeded batch runs.

This thin module owns only CLI argument parsing; the run loop and
persistence live in ``turmite.simulation``.
"""

from __future__ import annotations

import argparse
import json
import logging
from collections import Counter
from pathlib import Path

from turmite.config.constants import CANVAS_HEIGHT, CANVAS_WIDTH, MAX_TICKS, PIXEL_SCALE
from turmite.config.types import RunConfig
from turmite.simulation.engine import run_batch

# ---------------------------------------------------------------------------
# Config-value coercion
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_str(cli_val: str | None, key: str, file_cfg: dict[str, object]) -> str | None:
    raw = _get_val(cli_val, key, file_cfg, None)
    return None if raw is None else _coerce_str(raw, key)


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for batch execution.

    Supports ``--config path/to/config.json`` for reproducibility.
    CLI arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = argparse.ArgumentParser(description="Run seeded turmite batches")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--n-runs", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--canvas-width", type=int, default=None)
    parser.add_argument("--canvas-height", type=int, default=None)
    parser.add_argument("--pixel-scale", type=int, default=None)
    parser.add_argument("--max-ticks", type=int, default=None)
    parser.add_argument("--table", type=str, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--record-trace", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Load config file defaults (CLI overrides file, file overrides built-in)
    file_cfg: dict[str, object] = {}
    if args.config is not None:
        file_cfg = json.loads(Path(args.config).read_text())

    n_runs = _get_int(args.n_runs, "n_runs", file_cfg, 16)
    seed = _get_int(args.seed, "seed", file_cfg, 0)
    out_dir = Path(_coerce_str(_get_val(args.out_dir, "out_dir", file_cfg, "data"), "out_dir"))

    run_config = RunConfig(
        canvas_width=_get_int(args.canvas_width, "canvas_width", file_cfg, CANVAS_WIDTH),
        canvas_height=_get_int(args.canvas_height, "canvas_height", file_cfg, CANVAS_HEIGHT),
        pixel_scale=_get_int(args.pixel_scale, "pixel_scale", file_cfg, PIXEL_SCALE),
        max_ticks=_get_int(args.max_ticks, "max_ticks", file_cfg, MAX_TICKS),
        table_name=_get_optional_str(args.table, "table", file_cfg),
        record_trace=_get_bool(args.record_trace, "record_trace", file_cfg, True),
    )

    results = run_batch(n_runs=n_runs, out_dir=out_dir, config=run_config, base_seed=seed)

    summary = {
        "total_runs": len(results),
        "exited": sum(1 for r in results if r.exited),
        "still_active": sum(1 for r in results if not r.exited),
        "tables": dict(Counter(r.table_name for r in results)),
        "out_dir": str(out_dir),
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()

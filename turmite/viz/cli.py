from __future__ import annotations

import argparse
import json
import logging
import random
from pathlib import Path

from turmite.config.constants import CANVAS_HEIGHT, CANVAS_WIDTH, MAX_TICKS, PIXEL_SCALE
from turmite.config.types import RunConfig
from turmite.domain.decisions import DECISION_TABLES
from turmite.io.paths import resolve_within_base
from turmite.simulation.engine import NullSurface, create_turmite, run_turmite
from turmite.viz.render import render_animation, render_filmstrip, render_final_frame
from turmite.viz.theme import get_theme


def _add_run_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--canvas-width", type=int, default=CANVAS_WIDTH)
    p.add_argument("--canvas-height", type=int, default=CANVAS_HEIGHT)
    p.add_argument("--pixel-scale", type=int, default=PIXEL_SCALE)
    p.add_argument("--max-ticks", type=int, default=MAX_TICKS)
    p.add_argument("--table", type=str, default=None, help="Pin a catalog table by name")


def _add_output_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--base-dir", type=Path, default=Path("."))
    p.add_argument("--theme", type=str, default="default")


def _build_frame_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("frame", help="Render the final canvas of one run")
    p.set_defaults(func=_handle_frame)
    _add_run_arguments(p)
    _add_output_arguments(p)


def _build_animate_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("animate", help="Render one run as an animation")
    p.set_defaults(func=_handle_animate)
    _add_run_arguments(p)
    _add_output_arguments(p)
    p.add_argument("--fps", type=int, default=30)
    p.add_argument("--frame-every", type=int, default=50)
    p.add_argument("--max-frames", type=int, default=600)


def _build_filmstrip_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("filmstrip", help="Render filmstrip of canvas snapshots")
    p.set_defaults(func=_handle_filmstrip)
    _add_run_arguments(p)
    _add_output_arguments(p)
    p.add_argument("--n-frames", type=int, default=6)


def _build_tables_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("tables", help="List the decision table catalog")
    p.set_defaults(func=_handle_tables)


def _build_dump_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("dump", help="Run headlessly and print the grid dump")
    p.set_defaults(func=_handle_dump)
    _add_run_arguments(p)


def _run_config(args: argparse.Namespace) -> RunConfig:
    return RunConfig(
        canvas_width=args.canvas_width,
        canvas_height=args.canvas_height,
        pixel_scale=args.pixel_scale,
        max_ticks=args.max_ticks,
        table_name=args.table,
    )


def _output_path(args: argparse.Namespace) -> Path:
    return resolve_within_base(Path(args.output), Path(args.base_dir).resolve())


def _handle_frame(args: argparse.Namespace) -> None:
    render_final_frame(
        config=_run_config(args),
        seed=args.seed,
        output_path=_output_path(args),
        theme=get_theme(args.theme),
    )


def _handle_animate(args: argparse.Namespace) -> None:
    render_animation(
        config=_run_config(args),
        seed=args.seed,
        output_path=_output_path(args),
        fps=args.fps,
        frame_every=args.frame_every,
        max_frames=args.max_frames,
        theme=get_theme(args.theme),
    )


def _handle_filmstrip(args: argparse.Namespace) -> None:
    render_filmstrip(
        config=_run_config(args),
        seed=args.seed,
        output_path=_output_path(args),
        n_frames=args.n_frames,
        theme=get_theme(args.theme),
    )


def _handle_tables(args: argparse.Namespace) -> None:
    print(json.dumps([t.to_payload() for t in DECISION_TABLES], indent=2))


def _handle_dump(args: argparse.Namespace) -> None:
    config = _run_config(args)
    turmite = create_turmite(config, random.Random(args.seed))
    run_turmite(turmite, NullSurface(), config.max_ticks)
    print(turmite.debug_dump())


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    parser = argparse.ArgumentParser(description="Turmite visualization tools")
    sub = parser.add_subparsers(dest="command")
    _build_frame_parser(sub)
    _build_animate_parser(sub)
    _build_filmstrip_parser(sub)
    _build_tables_parser(sub)
    _build_dump_parser(sub)
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        raise SystemExit(1)
    args.func(args)


if __name__ == "__main__":
    main()

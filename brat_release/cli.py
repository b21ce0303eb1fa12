"""Command line entry point for the release pipelines."""

from __future__ import annotations

import argparse
import logging
import os
import shlex
import sys
from collections.abc import Mapping
from pathlib import Path

from .pipelines import PIPELINES, PipelineRunner, get_pipeline
from .pipelines.contracts import Pipeline

EXIT_USAGE = 2


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="brat-release", description=__doc__)
    parser.add_argument("pipeline", choices=sorted(PIPELINES))
    parser.add_argument("--cwd", default=".", help="repository to operate on")
    parser.add_argument("--no-pause", action="store_true", help="do not wait for Enter on failure")
    parser.add_argument("--list", action="store_true", help="print the steps and exit")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def is_ci(environ: Mapping[str, str]) -> bool:
    return environ.get("CI", "").strip().lower() not in ("", "0", "false")


def describe(pipeline: Pipeline) -> str:
    lines = [f"{pipeline.name}: {pipeline.description}"]
    for i, step in enumerate(pipeline.steps, start=1):
        lines.append(f"  {i}. {step.label}")
        lines.append(f"     {shlex.join(step.command)}")
    return "\n".join(lines)


def main(argv: list[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    environ = os.environ if environ is None else environ

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    pipeline = get_pipeline(args.pipeline)
    if args.list:
        print(describe(pipeline))
        return 0

    project_path = Path(args.cwd).resolve()
    if not project_path.is_dir():
        print(f"ERROR: {project_path} is not a directory", file=sys.stderr)
        return EXIT_USAGE

    runner = PipelineRunner(
        project_path,
        pause=not (args.no_pause or is_ci(environ)),
    )
    return runner.run(pipeline).exit_code


if __name__ == "__main__":
    raise SystemExit(main())

"""Command line entrypoint for running Baseline Guard in or outside GitHub Actions.

Usage:
  baseline-guard --root . [--target widely|newly|YYYY] [--files GLOBS]
                 [--[no-]fail-on-newly] [--features path_or_url] [--warn-only]

Inputs not given on the command line are read from the Action environment
(INPUT_TARGET-BASELINE, INPUT_SCAN-FILES, ...). This calls the same core
``run`` used by the Action wrapper.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from .config import Settings, load_settings, parse_workers
from .core import run
from .result import ConfigError, Err
from .summary import render_summary

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_VIOLATIONS = 10


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check source files against a Baseline target")
    parser.add_argument("--root", type=Path, default=Path("."))
    parser.add_argument("--target", dest="target_baseline", default=None)
    parser.add_argument("--files", dest="scan_files", default=None)
    parser.add_argument(
        "--fail-on-newly", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument("--report-name", dest="report_artifact_name", default=None)
    parser.add_argument("--features", dest="feature_source", default=None)
    parser.add_argument("--tokens", dest="script_tokens", default=None)
    parser.add_argument("--workers", dest="max_workers", default=None)
    parser.add_argument("--warn-only", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def _print_banner(settings: Settings) -> None:
    print("--- Baseline Guard Configuration ---")
    print(f"Target Baseline: {settings.target_baseline}")
    print(f"Files to Scan: {settings.scan_files}")
    print(f"Fail on Newly Available: {str(settings.fail_on_newly).lower()}")
    print(f"Report Name: {settings.report_artifact_name}")
    print("------------------------------------")


def _set_output(name: str, value: str) -> None:
    output_path = os.getenv("GITHUB_OUTPUT")
    if not output_path:
        return
    with open(output_path, "a", encoding="utf-8") as fh:
        fh.write(f"{name}={value}\n")


def _write_summary(root: Path, settings: Settings, markdown: str) -> None:
    (root / settings.report_artifact_name).write_text(markdown, encoding="utf-8")
    step_summary = os.getenv("GITHUB_STEP_SUMMARY")
    if step_summary:
        with open(step_summary, "a", encoding="utf-8") as fh:
            fh.write(markdown)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        workers = parse_workers(args.max_workers) if args.max_workers is not None else None
        settings = load_settings().with_overrides(
            target_baseline=args.target_baseline,
            scan_files=args.scan_files,
            fail_on_newly=args.fail_on_newly,
            report_artifact_name=args.report_artifact_name,
            feature_source=args.feature_source,
            script_tokens=args.script_tokens,
            max_workers=workers,
        )
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR

    _print_banner(settings)

    result = run(args.root, settings)
    if isinstance(result, Err):
        print(f"ERROR: {result.detail}", file=sys.stderr)
        return EXIT_ERROR

    outcome = result.value
    print(json.dumps(outcome.report, indent=2))
    _set_output("violations-found", str(outcome.failed).lower())
    _write_summary(args.root, settings, render_summary(outcome.report))

    # Default behavior: fail on violations unless env override set or --warn-only
    if outcome.failed and not args.warn_only:
        warn_env = os.getenv("BASELINE_GUARD_WARN_ONLY", "").strip().lower()
        if warn_env in {"1", "true", "yes", "y"}:
            return EXIT_OK
        return EXIT_VIOLATIONS

    return EXIT_OK

"""Schema validation for feature database snapshots.

Also usable as a CLI to check a snapshot file before it is handed to a run.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from collections.abc import Iterable
from typing import Any

from jsonschema import Draft202012Validator

from ..result import DataLoadError

_DATE = {"type": ["string", "null"]}

_STATUS_FIELDS = {
    "baseline_low_date": _DATE,
    "baseline_high_date": _DATE,
}

FEATURE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "status": {"type": "object", "properties": _STATUS_FIELDS},
        "compat_features": {"type": "array", "items": {"type": "string"}},
        "spec": {"type": ["string", "array"]},
        "url": {"type": ["string", "null"]},
        **_STATUS_FIELDS,
    },
}

SNAPSHOT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": FEATURE_SCHEMA,
}


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_snapshot(features: Any) -> None:
    """Raise DataLoadError when ``features`` is not a feature id -> record mapping."""
    validator = Draft202012Validator(SNAPSHOT_SCHEMA)
    errors = sorted(validator.iter_errors(features), key=lambda e: list(e.path))
    if errors:
        raise DataLoadError("Feature snapshot failed validation:\n" + _format_errors(errors))


def features_of(snapshot: Any) -> Any:
    """Unwrap the ``features`` member of a web-features ``data.json`` envelope."""
    if isinstance(snapshot, dict) and isinstance(snapshot.get("features"), dict):
        return snapshot["features"]
    return snapshot


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Path to the web-features JSON snapshot to validate",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        document = json.loads(args.input.read_text(encoding="utf-8"))
        validate_snapshot(features_of(document))
    except FileNotFoundError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as exc:
        print(f"ERROR: Failed to read JSON: {exc}", file=sys.stderr)
        return 1
    except DataLoadError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(f"Snapshot {args.input} is valid")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

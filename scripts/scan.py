#!/usr/bin/env python3
"""Local CLI entrypoint to run Baseline Guard outside of GitHub Actions.

Usage:
  python scripts/scan.py --root . [--target widely] [--files "**/*.css"]

This calls the same core run used by the Action wrapper.
"""

from __future__ import annotations

from baseline_guard.cli import main


if __name__ == "__main__":
    raise SystemExit(main())

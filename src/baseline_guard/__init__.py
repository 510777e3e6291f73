"""baseline-guard core package.

This package provides the Baseline compliance engine that is callable from
both the GitHub Action wrapper and the local CLI in ``scripts/scan.py``.
"""

__all__ = [
    "core",
]

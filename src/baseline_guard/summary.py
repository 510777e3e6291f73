"""Human-readable report rendering for $GITHUB_STEP_SUMMARY and the artifact."""

from __future__ import annotations

from typing import Any


def _escape(value: object) -> str:
    return str(value).replace("|", "\\|")


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with the run status, totals and violations."""
    totals = report.get("totals", {})
    target = report.get("target", {})
    violations = report.get("violations", [])
    skipped = report.get("skipped", [])

    ok = not report.get("hasViolations")
    status_icon = "✅" if ok else "❌"
    status_label = "PASS" if ok else "FAIL"

    lines = []
    lines.append("# Baseline Guard Report")
    lines.append("")
    lines.append(f"{status_icon} **Overall Status:** **{status_label}**")
    lines.append("")
    target_line = f"Target Baseline: `{target.get('baseline', 'unknown')}`"
    if target.get("failOnNewly"):
        target_line += " (failing on newly available features)"
    lines.append(target_line)
    lines.append("")
    lines.append(
        f"Files scanned: {totals.get('filesScanned', 0)} | "
        f"Violations: {totals.get('violations', 0)} | "
        f"Features: {totals.get('features', 0)}"
    )
    lines.append("")

    if violations:
        lines.append("| File | Line | Column | Feature | Reason |")
        lines.append("| --- | --- | --- | --- | --- |")
        for v in violations:
            lines.append(
                f"| {_escape(v.get('file', ''))} | {v.get('line', 'unknown')} "
                f"| {v.get('column', 'unknown')} | `{_escape(v.get('featureId', ''))}` "
                f"| {_escape(v.get('reason', ''))} |"
            )
    else:
        lines.append("No Baseline violations found.")

    if skipped:
        lines.append("")
        lines.append("### Skipped files")
        lines.append("")
        for path in skipped:
            lines.append(f"- {path}")

    return "\n".join(lines) + "\n"

"""Human-readable report rendering.

Reports are rendered from Jinja2 templates bundled under
``tsxlint/data/templates`` so the layout can change without touching code.
"""

from __future__ import annotations

from typing import Any, Dict, Sequence

from jinja2 import Environment

from tsxlint.data import read_template

from .scanner import FileReport

DEFAULT_TEMPLATE = "report.txt.j2"


def render_template_text(text: str, context: Dict[str, Any]) -> str:
    # Templates put control blocks on their own lines; trim them away.
    env = Environment(trim_blocks=True, lstrip_blocks=True, keep_trailing_newline=True)
    return env.from_string(text).render(**context)


def report_context(reports: Sequence[FileReport]) -> Dict[str, Any]:
    total = sum(len(r.diagnostics) for r in reports)
    return {
        "reports": list(reports),
        "total": total,
        "files_checked": len(reports),
        "files_with_problems": sum(1 for r in reports if r.diagnostics),
        "files_skipped": sum(1 for r in reports if r.skipped),
    }


def render_report(reports: Sequence[FileReport], template: str = DEFAULT_TEMPLATE) -> str:
    return render_template_text(read_template(template), report_context(reports))


__all__ = ["render_report", "render_template_text", "report_context", "DEFAULT_TEMPLATE"]

"""Template path helpers."""

from __future__ import annotations

from pathlib import Path


class TemplateNotFoundError(RuntimeError):
    """Raised when a template PDF does not exist."""


def resolve_template(path: str | Path) -> Path:
    template_path = Path(path)
    if not template_path.is_file():
        raise TemplateNotFoundError(f"File not found: {template_path}")
    return template_path

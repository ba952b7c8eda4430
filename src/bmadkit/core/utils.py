"""Path helpers and small formatting utilities."""

from __future__ import annotations

from pathlib import Path

PROJECT_ROOT_TOKEN = "{project-root}"


def resolve_source_path(file_path: str, workspace_root: Path) -> Path:
    """Resolve a manifest path (possibly ``{project-root}/...``) against the workspace."""
    if file_path.startswith(PROJECT_ROOT_TOKEN):
        file_path = file_path[len(PROJECT_ROOT_TOKEN) :].lstrip("/\\")
    p = Path(file_path)
    return p if p.is_absolute() else workspace_root / p


def short_cwd(p: Path) -> str:
    """Return path relative to home directory, using ~ prefix."""
    try:
        rel = p.relative_to(Path.home())
        return f"~/{rel}" if str(rel) != "." else "~"
    except ValueError:
        return str(p)

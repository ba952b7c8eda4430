"""Manifests: CSV reader and manifest column schemas."""

from .models import (
    AGENT_COLUMNS,
    BMAD_DIR_NAME,
    CONFIG_DIR_NAME,
    HELP_COLUMNS,
    MANIFEST_COLUMNS,
    MANIFEST_FILES,
    TASK_TOOL_COLUMNS,
    WORKFLOW_COLUMNS,
    ManifestKind,
)
from .reader import count_rows, load_csv, parse_csv, parse_csv_line, read_manifest

__all__ = [
    "AGENT_COLUMNS",
    "BMAD_DIR_NAME",
    "CONFIG_DIR_NAME",
    "HELP_COLUMNS",
    "MANIFEST_COLUMNS",
    "MANIFEST_FILES",
    "TASK_TOOL_COLUMNS",
    "WORKFLOW_COLUMNS",
    "ManifestKind",
    "count_rows",
    "load_csv",
    "parse_csv",
    "parse_csv_line",
    "read_manifest",
]

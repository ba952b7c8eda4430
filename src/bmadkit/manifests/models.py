"""Manifest schemas: file names and column sets for each manifest kind."""

from __future__ import annotations

from typing import Literal

ManifestKind = Literal["help", "agent", "workflow", "task", "tool"]

# bmad-help.csv: the merged workflow catalog (authoritative for commands)
HELP_COLUMNS = (
    "module",
    "phase",
    "name",
    "code",
    "sequence",
    "workflow-file",
    "command",
    "required",
    "agent-name",
    "agent-command",
    "agent-display-name",
    "agent-title",
    "options",
    "description",
    "output-location",
    "outputs",
)

AGENT_COLUMNS = (
    "name",
    "displayName",
    "title",
    "icon",
    "capabilities",
    "role",
    "identity",
    "communicationStyle",
    "principles",
    "module",
    "path",
)

WORKFLOW_COLUMNS = ("name", "description", "module", "path")

TASK_TOOL_COLUMNS = ("name", "displayName", "description", "module", "path", "standalone")

MANIFEST_FILES: dict[ManifestKind, str] = {
    "help": "bmad-help.csv",
    "agent": "agent-manifest.csv",
    "workflow": "workflow-manifest.csv",
    "task": "task-manifest.csv",
    "tool": "tool-manifest.csv",
}

MANIFEST_COLUMNS: dict[ManifestKind, tuple[str, ...]] = {
    "help": HELP_COLUMNS,
    "agent": AGENT_COLUMNS,
    "workflow": WORKFLOW_COLUMNS,
    "task": TASK_TOOL_COLUMNS,
    "tool": TASK_TOOL_COLUMNS,
}

BMAD_DIR_NAME = "_bmad"
CONFIG_DIR_NAME = "_config"

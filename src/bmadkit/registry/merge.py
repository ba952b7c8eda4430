"""Build the command map from manifest rows with first-write-wins precedence."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from ..manifests import ManifestKind
from .models import Command, Row
from .naming import (
    agent_slash_name,
    classify_execution_pattern,
    has_root_prefix,
    task_slash_name,
    to_internal_syntax,
)

# Catalog rows are authoritative, then agent activators, then tasks, then tools.
MERGE_ORDER: tuple[ManifestKind, ...] = ("help", "agent", "task", "tool")


def command_from_help_row(row: Row) -> Command | None:
    """Workflow command from a ``bmad-help.csv`` row.

    Rows without a ``command`` are agent-only capabilities and produce nothing.
    """
    slash_name = row.get("command", "").strip()
    if not slash_name or not has_root_prefix(slash_name):
        return None
    workflow_file = row.get("workflow-file", "").strip()
    return Command(
        slash_name=slash_name,
        cli_syntax=to_internal_syntax(slash_name),
        description=row.get("description") or row.get("name") or slash_name,
        category="workflow",
        module=row.get("module") or "core",
        file_path=workflow_file,
        agent_name=row.get("agent-name", ""),
        agent_title=row.get("agent-title", ""),
        pattern=classify_execution_pattern(workflow_file),
    )


def command_from_agent_row(row: Row) -> Command | None:
    name = row.get("name", "").strip()
    if not name:
        return None
    module = row.get("module") or "core"
    slash_name = agent_slash_name(name, module)
    icon = row.get("icon", "")
    label = row.get("displayName") or name
    role = row.get("title") or row.get("role") or "Agent"
    return Command(
        slash_name=slash_name,
        cli_syntax=to_internal_syntax(slash_name),
        description=f"{icon} {label} — {role}".strip(),
        category="agent",
        module=module,
        file_path=row.get("path", ""),
        agent_name=name,
        agent_title=f"{icon} {row.get('title', '')}".strip(),
        pattern="agent-activator",
    )


def _task_tool_factory(category: str) -> Callable[[Row], Command | None]:
    def _build(row: Row) -> Command | None:
        name = row.get("name", "").strip()
        if not name:
            return None
        module = row.get("module") or "core"
        slash_name = task_slash_name(name, module)
        return Command(
            slash_name=slash_name,
            cli_syntax=to_internal_syntax(slash_name),
            description=row.get("description") or row.get("displayName") or name,
            category=category,  # type: ignore[arg-type]
            module=module,
            file_path=row.get("path", ""),
            pattern="task",
        )

    return _build


COMMAND_FACTORIES: dict[str, Callable[[Row], Command | None]] = {
    "help": command_from_help_row,
    "agent": command_from_agent_row,
    "task": _task_tool_factory("task"),
    "tool": _task_tool_factory("tool"),
}


def merge_commands(sources: Iterable[tuple[str, Sequence[Row]]]) -> dict[str, Command]:
    """Merge ``(kind, rows)`` pairs into a slash-name -> Command map.

    Sources are applied in :data:`MERGE_ORDER` regardless of the order given,
    so catalog rows always win. Within and across kinds the first command
    registered under a slash name is kept; later duplicates are dropped.
    Kinds without a factory (``workflow``) contribute no commands.
    """
    by_kind: dict[str, list[Sequence[Row]]] = {}
    for kind, rows in sources:
        by_kind.setdefault(kind, []).append(rows)

    commands: dict[str, Command] = {}
    for kind in MERGE_ORDER:
        factory = COMMAND_FACTORIES[kind]
        for rows in by_kind.get(kind, []):
            for row in rows:
                cmd = factory(row)
                if cmd is not None and cmd.slash_name not in commands:
                    commands[cmd.slash_name] = cmd
    return commands

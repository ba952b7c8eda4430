"""Render the command catalog, installed agents and workflows as text."""

from __future__ import annotations

from ..registry import CATEGORIES, RegistrySnapshot

_CATEGORY_TITLES = {
    "workflow": "Workflows",
    "agent": "Agents",
    "task": "Tasks",
    "tool": "Tools",
    "core": "Core",
}


def format_command_listing(snapshot: RegistrySnapshot) -> str:
    """All commands grouped by category, as markdown bullet lists."""
    sections: list[str] = []
    for category in CATEGORIES:
        cmds = snapshot.by_category(category)
        if not cmds:
            continue
        lines = [f"### {_CATEGORY_TITLES[category]}", ""]
        for cmd in cmds:
            lines.append(f"- `/{cmd.slash_name}` — {cmd.description}")
        sections.append("\n".join(lines))
    if not sections:
        return "No BMAD commands found."
    return "\n\n".join(sections)


def _group_by_module(rows) -> dict[str, list]:
    groups: dict[str, list] = {}
    for row in rows:
        groups.setdefault(row.get("module") or "core", []).append(row)
    return groups


def format_agent_listing(snapshot: RegistrySnapshot) -> str:
    if not snapshot.agents:
        return "No BMAD agents are currently installed."

    lines = ["# Installed BMAD Agents", ""]
    for module, group in _group_by_module(snapshot.agents).items():
        lines.append(f"## Module: {module.upper()}")
        lines.append("")
        lines.append("| Agent | Persona | Title | Capabilities |")
        lines.append("|---|---|---|---|")
        for a in group:
            title = f"{a.get('icon', '')} {a.get('title', '')}".strip()
            lines.append(
                f"| {a.get('name', '')} | {a.get('displayName', '')} | {title} "
                f"| {a.get('capabilities', '')} |"
            )
        lines.append("")
    lines.append(
        "> To activate an agent, use `/bmad-agent-<module>-<name>` (e.g. `/bmad-agent-bmm-pm`)."
    )
    return "\n".join(lines)


def format_workflow_listing(snapshot: RegistrySnapshot) -> str:
    if not snapshot.workflows:
        return "No BMAD workflows are currently installed."

    lines = ["# Installed BMAD Workflows", ""]
    for module, group in _group_by_module(snapshot.workflows).items():
        lines.append(f"## Module: {module.upper()}")
        lines.append("")
        for w in group:
            desc = w.get("description", "")
            lines.append(f"- **{w.get('name', '')}**" + (f" — {desc}" if desc else ""))
        lines.append("")
    return "\n".join(lines).rstrip()

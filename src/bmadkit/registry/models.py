"""Registry data models: Command and RegistrySnapshot."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

Category = Literal["workflow", "agent", "task", "tool", "core"]

# How a command's source file is turned into a prompt:
#   md-workflow      load the markdown workflow and follow it directly
#   yaml-workflow    load the workflow.xml engine first, then the yaml config
#   agent-only       load an agent and invoke one of its menu codes
#   agent-activator  load config, then the agent persona file
#   task             load an xml/md task and execute it directly
ExecutionPattern = Literal["md-workflow", "yaml-workflow", "agent-only", "agent-activator", "task"]

CATEGORIES: tuple[Category, ...] = ("workflow", "agent", "task", "tool", "core")

Row = Mapping[str, str]


def frozen_mapping(mapping: Mapping | None = None) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class Command:
    """A BMAD command resolved from the manifests."""

    slash_name: str
    cli_syntax: str
    description: str
    category: Category
    module: str = "core"
    file_path: str = ""
    agent_name: str = ""
    agent_title: str = ""
    pattern: ExecutionPattern = "md-workflow"
    # set by the link pass when a matching .prompt.md / .agent.md exists
    prompt_file_path: str | None = None


@dataclass(frozen=True)
class LinkResult:
    """Outcome of scanning ``.github/prompts`` and ``.github/agents``."""

    commands: Mapping[str, Command] = field(default_factory=frozen_mapping)
    prompt_files: Mapping[str, str] = field(default_factory=frozen_mapping)
    errors: tuple[str, ...] = ()


@dataclass(frozen=True)
class RegistrySnapshot:
    """Everything discovered by one scan. Replaced wholesale by the next scan."""

    bmad_dir: str
    commands: Mapping[str, Command] = field(default_factory=frozen_mapping)
    help_entries: tuple[Row, ...] = ()
    agents: tuple[Row, ...] = ()
    workflows: tuple[Row, ...] = ()
    tasks: tuple[Row, ...] = ()
    tools: tuple[Row, ...] = ()
    modules: tuple[str, ...] = ()
    prompt_files: Mapping[str, str] = field(default_factory=frozen_mapping)
    link_errors: tuple[str, ...] = ()
    last_scan: str = ""

    @property
    def has_copilot_files(self) -> bool:
        return bool(self.prompt_files)

    def resolve(self, name: str) -> Command | None:
        key = name[1:] if name.startswith("/") else name
        return self.commands.get(key)

    def search(self, query: str, limit: int = 20) -> list[Command]:
        """Substring match on slash name and description, in catalog order."""
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        q = query.lower()
        results: list[Command] = []
        for cmd in self.commands.values():
            if len(results) >= limit:
                break
            if q in cmd.slash_name.lower() or q in cmd.description.lower():
                results.append(cmd)
        return results

    def by_category(self, category: Category) -> list[Command]:
        return [c for c in self.commands.values() if c.category == category]

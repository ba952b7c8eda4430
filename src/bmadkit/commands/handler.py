"""CommandHandler: dispatch slash commands to built-ins and BMAD registry commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console

from ..core.utils import resolve_source_path
from ..registry import Command, CommandRegistry, RegistrySnapshot
from .listing import format_agent_listing, format_command_listing, format_workflow_listing
from .status import collect_status, render_status

if TYPE_CHECKING:
    from bmadkit.core.config import Config

console = Console()

COMMANDS = {
    "/help": "Show available commands",
    "/commands": "List all BMAD commands by category",
    "/agents": "List installed BMAD agents",
    "/workflows": "List installed BMAD workflows",
    "/search": "Search commands by name or description (e.g. /search prd)",
    "/status": "Show BMAD installation status",
    "/scan": "Rescan the BMAD installation",
    "/quit": "Exit",
}

NOT_INSTALLED = "[dim]no BMAD installation found (expected _bmad/_config/)[/dim]"


@dataclass
class CommandResult:
    """A resolved BMAD command plus the user's free-text arguments."""

    command: Command
    arguments: str = ""
    # linked prompt file if present, else the command's own source file
    source_path: Path | None = None


class CommandHandler:
    """Handle slash commands (built-in + BMAD commands from the registry)."""

    def __init__(self, config: Config, registry: CommandRegistry | None = None):
        self.config = config
        self.registry = registry or CommandRegistry()
        if config.auto_scan:
            self.rescan()

    @property
    def snapshot(self) -> RegistrySnapshot | None:
        return self.registry.snapshot

    def rescan(self) -> RegistrySnapshot | None:
        snapshot = self.registry.scan_sync(self.config.cwd, self.config.bmad_dir_override)
        if snapshot and self.config.verbose:
            for err in snapshot.link_errors:
                console.print(f"  [yellow]warning: could not list {err}[/yellow]")
        return snapshot

    def is_command(self, text: str) -> bool:
        return text.strip().startswith("/")

    def handle(self, text: str) -> str | CommandResult | None:
        text = text.strip()
        if not text.startswith("/"):
            return None

        parts = text.split(maxsplit=1)
        cmd = parts[0].lower()
        arg = parts[1] if len(parts) > 1 else ""

        if cmd == "/help":
            return self._help()

        elif cmd == "/quit":
            return "quit"

        elif cmd == "/scan":
            snapshot = self.rescan()
            if snapshot is None:
                return NOT_INSTALLED
            return (
                f"scanned [bold]{len(snapshot.commands)}[/bold] command(s) "
                f"from {len(snapshot.modules)} module(s)"
            )

        elif cmd == "/status":
            render_status(collect_status(self.config.cwd, self.config.bmad_dir_override), console)
            return ""

        elif cmd in ("/commands", "/agents", "/workflows"):
            snapshot = self.snapshot
            if snapshot is None:
                return NOT_INSTALLED
            if cmd == "/agents":
                return format_agent_listing(snapshot)
            if cmd == "/workflows":
                return format_workflow_listing(snapshot)
            return format_command_listing(snapshot)

        elif cmd == "/search":
            return self._search(arg)

        command = self.registry.resolve(parts[0]) or self.registry.resolve(cmd)
        if command is not None:
            return CommandResult(
                command=command, arguments=arg, source_path=self._source_path(command)
            )

        if self.snapshot is None:
            return f"unknown command: {cmd}\n{NOT_INSTALLED}"
        return f"unknown command: {cmd}\n[dim]type /help for available commands[/dim]"

    def _help(self) -> str:
        lines = [""]
        for c, desc in COMMANDS.items():
            lines.append(f"  [bold]{c:<12}[/bold] [dim]{desc}[/dim]")
        lines.append("")
        snapshot = self.snapshot
        if snapshot is None:
            lines.append(f"  {NOT_INSTALLED}")
        else:
            lines.append(
                f"  [dim]{len(snapshot.commands)} BMAD command(s) available, "
                f"type /commands to list them[/dim]"
            )
        lines.append("")
        return "\n".join(lines)

    def _search(self, query: str) -> str:
        if not query:
            return "[dim]usage: /search <text>[/dim]"
        results = self.registry.search(query, self.config.search_limit)
        if not results:
            return f"[dim]no commands matching '{query}'[/dim]"
        lines = [""]
        for c in results:
            lines.append(f"  [bold]/{c.slash_name}[/bold]  [dim]{c.description}[/dim]")
        lines.append("")
        return "\n".join(lines)

    def _source_path(self, command: Command) -> Path | None:
        if command.prompt_file_path:
            return Path(command.prompt_file_path)
        if command.file_path:
            return resolve_source_path(command.file_path, self.config.cwd)
        return None

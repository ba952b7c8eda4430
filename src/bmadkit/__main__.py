"""CLI entry point: one-shot dispatch, catalog subcommands, and the REPL."""

from __future__ import annotations

import sys
import time

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from . import __version__
from .commands import (
    CommandHandler,
    CommandResult,
    collect_status,
    format_agent_listing,
    format_workflow_listing,
    render_status,
)
from .core.config import Config, load_config
from .core.utils import short_cwd
from .tui import render_command_result, run_repl

console = Console()


# ── Banner ──────────────────────────────────────────────────────────


def _print_banner(config: Config, cmd_handler: CommandHandler) -> None:
    console.print()
    info = Text("  ")
    info.append("bmadkit", style="bold")
    info.append(f"  v{__version__}", style="dim")
    info.append("  ")
    info.append(short_cwd(config.cwd))
    console.print(info)

    snapshot = cmd_handler.snapshot
    if snapshot is None:
        console.print("  no BMAD installation found, /scan after installing", style="dim")
    else:
        console.print(
            f"  {len(snapshot.commands)} commands | modules: "
            f"{', '.join(snapshot.modules) or 'core'}",
            style="dim",
        )
    console.print("  /help | Tab: complete | Ctrl-C twice to exit", style="dim")
    console.print()


# ── Catalog subcommands ─────────────────────────────────────────────


def _scan_or_exit(config: Config) -> CommandHandler:
    t0 = time.time()
    handler = CommandHandler(config)
    if handler.snapshot is None:
        console.print("no BMAD installation found (expected _bmad/_config/)", style="bold")
        console.print("run from your project root or pass --bmad-dir", style="dim")
        sys.exit(1)
    if config.verbose:
        console.print(f"scanned in {time.time() - t0:.2f}s", style="dim")
    return handler


def _commands_table(commands) -> Table:
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("command", no_wrap=True)
    table.add_column("category", style="dim")
    table.add_column("module", style="dim")
    table.add_column("description")
    for c in commands:
        name = f"/{c.slash_name}" + (" *" if c.prompt_file_path else "")
        table.add_row(name, c.category, c.module, c.description)
    return table


def _handle_catalog_cli(sub: str, args: list[str]) -> None:
    bmad_dir = None
    verbose = False
    rest: list[str] = []
    i = 0
    while i < len(args):
        a = args[i]
        if a in ("--bmad-dir", "-d") and i + 1 < len(args):
            bmad_dir = args[i + 1]
            i += 2
            continue
        if a in ("--verbose", "-v"):
            verbose = True
        else:
            rest.append(a)
        i += 1

    config = load_config(bmad_dir=bmad_dir, verbose=verbose)

    if sub == "status":
        render_status(collect_status(config.cwd, config.bmad_dir_override), console)
        return

    handler = _scan_or_exit(config)
    snapshot = handler.snapshot

    if sub == "list":
        category = rest[0] if rest else None
        commands = (
            snapshot.by_category(category) if category else list(snapshot.commands.values())
        )
        if not commands:
            console.print("no commands", style="dim")
            return
        console.print(_commands_table(commands))
        if any(c.prompt_file_path for c in commands):
            console.print("\n* linked to a .github prompt file", style="dim")

    elif sub == "agents":
        console.print(format_agent_listing(snapshot), markup=False)

    elif sub == "workflows":
        console.print(format_workflow_listing(snapshot), markup=False)

    elif sub == "search":
        if not rest:
            console.print("usage: bmadkit search <text> [--limit N]", style="dim")
            return
        limit = config.search_limit
        if "--limit" in rest:
            idx = rest.index("--limit")
            if idx + 1 < len(rest) and rest[idx + 1].isdigit():
                limit = int(rest[idx + 1])
            rest = rest[:idx] + rest[idx + 2 :]
        results = handler.registry.search(" ".join(rest), limit)
        if not results:
            console.print(f"no commands matching '{' '.join(rest)}'", style="dim")
            return
        console.print(_commands_table(results))

    if config.verbose:
        for err in snapshot.link_errors:
            console.print(f"  [yellow]warning: could not list {err}[/yellow]")


def _catalog_usage() -> None:
    console.print("usage: bmadkit [PROMPT] | bmadkit <command>", style="dim")
    console.print()
    console.print("  [bold]status[/bold]      Show BMAD installation status")
    console.print("  [bold]list[/bold]        List commands (optionally by category)")
    console.print("  [bold]agents[/bold]      List installed agents")
    console.print("  [bold]workflows[/bold]   List installed workflows")
    console.print("  [bold]search[/bold]      Search commands by name or description")
    console.print()
    console.print("examples:", style="dim")
    console.print("  bmadkit list workflow", style="dim")
    console.print("  bmadkit search prd --limit 5", style="dim")
    console.print('  bmadkit "/bmad-bmm-create-prd for the billing service"', style="dim")


CATALOG_SUBCOMMANDS = ("status", "list", "agents", "workflows", "search")


# ── CLI entry point ─────────────────────────────────────────────────


@click.command()
@click.argument("prompt", required=False, default=None)
@click.option("--bmad-dir", "-d", default=None, help="Path to the _bmad directory")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def _click_main(prompt: str | None, bmad_dir: str | None, verbose: bool):
    """bmadkit — discover and dispatch BMAD slash commands."""
    if prompt and prompt.strip().lower() == "help":
        _catalog_usage()
        return

    config = load_config(bmad_dir=bmad_dir, verbose=verbose)
    cmd_handler = CommandHandler(config)

    if not prompt:
        run_repl(config, cmd_handler, print_banner=_print_banner)
        return

    text = prompt if prompt.lstrip().startswith("/") else f"/{prompt.lstrip()}"
    result = cmd_handler.handle(text)
    if isinstance(result, CommandResult):
        render_command_result(result)
    elif isinstance(result, str) and result and result != "quit":
        console.print(result)
        if result.startswith("unknown command"):
            sys.exit(1)


def main():
    """True entry point — intercepts catalog subcommands before click."""
    if len(sys.argv) > 1 and sys.argv[1] in CATALOG_SUBCOMMANDS:
        _handle_catalog_cli(sys.argv[1], sys.argv[2:])
        return
    _click_main()


if __name__ == "__main__":
    main()

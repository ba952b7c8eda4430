"""Interactive REPL loop built on prompt_toolkit."""

from __future__ import annotations

import time
from collections.abc import Callable

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.formatted_text import HTML, FormattedText
from prompt_toolkit.history import FileHistory
from rich.console import Console

from ..commands import CommandHandler, CommandResult
from .completers import _SlashCompleter

console = Console()


def _build_prompt() -> FormattedText:
    return FormattedText([("class:prompt", "bmad> ")])


def _build_toolbar(cmd_handler):
    def _toolbar():
        snapshot = cmd_handler.snapshot
        if snapshot is None:
            return HTML(" <b>no BMAD installation</b> | /scan | /help")
        modules = ", ".join(snapshot.modules) or "core"
        return HTML(f" <b>{len(snapshot.commands)}</b> commands | {modules} | /help")

    return _toolbar


def render_command_result(result: CommandResult) -> None:
    cmd = result.command
    console.print(f"[bold]/{cmd.slash_name}[/bold]  [dim]{cmd.cli_syntax}[/dim]")
    console.print(f"  {cmd.description}", style="dim")
    console.print(f"  category: {cmd.category}  module: {cmd.module}  pattern: {cmd.pattern}")
    if cmd.agent_title:
        console.print(f"  agent:    {cmd.agent_title}")
    if result.source_path is not None:
        label = "prompt" if cmd.prompt_file_path else "source"
        console.print(f"  {label}:   {result.source_path}")
    if result.arguments:
        console.print(f"  input:    {result.arguments}")


def run_repl(config, cmd_handler: CommandHandler, *, print_banner: Callable):
    history_path = config.global_dir / "history"
    config.global_dir.mkdir(parents=True, exist_ok=True)

    session: PromptSession = PromptSession(
        history=FileHistory(str(history_path)),
        multiline=False,
        completer=_SlashCompleter(cmd_handler),
        auto_suggest=AutoSuggestFromHistory(),
        bottom_toolbar=_build_toolbar(cmd_handler),
    )

    print_banner(config, cmd_handler)
    _run_repl_loop(config, cmd_handler, session)


def _run_repl_loop(config, cmd_handler, session):
    last_interrupt: float = 0

    while True:
        try:
            user_input = session.prompt(_build_prompt()).strip()
            last_interrupt = 0
        except KeyboardInterrupt:
            now = time.time()
            if now - last_interrupt < 1.0:
                console.print("\nbye", style="dim")
                break
            last_interrupt = now
            console.print("\npress Ctrl-C again to exit", style="dim")
            continue
        except EOFError:
            console.print()
            break

        if not user_input:
            continue

        if not cmd_handler.is_command(user_input):
            console.print("commands start with '/', type /help", style="dim")
            continue

        try:
            result = cmd_handler.handle(user_input)
        except Exception as e:
            console.print(f"error: {e}", style="bold")
            if config.verbose:
                console.print_exception()
            continue

        if result == "quit":
            break
        elif isinstance(result, CommandResult):
            render_command_result(result)
        elif isinstance(result, str) and result:
            console.print(result)

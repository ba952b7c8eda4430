"""Prompt-toolkit completer for built-in and BMAD slash commands."""

from __future__ import annotations

from prompt_toolkit.completion import Completer, Completion

from ..commands import COMMANDS

MAX_COMPLETIONS = 50


class _SlashCompleter(Completer):
    """Autocomplete slash commands (built-in + registry)."""

    def __init__(self, cmd_handler=None):
        self._handler = cmd_handler

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor.lstrip()
        if not text.startswith("/") or " " in text:
            return
        count = 0
        for cmd, desc in COMMANDS.items():
            if cmd.startswith(text):
                count += 1
                yield Completion(cmd, start_position=-len(text), display_meta=desc)

        snapshot = self._handler.snapshot if self._handler else None
        if snapshot is None:
            return
        # "/prd" also finds "/bmad-bmm-create-prd"
        partial = text[1:].lower()
        for name, command in snapshot.commands.items():
            if count >= MAX_COMPLETIONS:
                break
            if partial and partial not in name.lower():
                continue
            count += 1
            yield Completion(
                f"/{name}", start_position=-len(text), display_meta=command.description
            )

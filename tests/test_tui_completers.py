"""Tests for bmadkit.tui.completers."""

from __future__ import annotations

from unittest.mock import MagicMock

from prompt_toolkit.document import Document

from bmadkit.registry import merge_commands
from bmadkit.registry.models import RegistrySnapshot, frozen_mapping
from bmadkit.tui.completers import MAX_COMPLETIONS, _SlashCompleter


def _snapshot(n_tools: int = 0) -> RegistrySnapshot:
    commands = merge_commands(
        [
            (
                "help",
                [
                    {"command": "bmad-bmm-create-prd", "module": "bmm", "description": "Create PRD"},
                    {"command": "bmad-help", "description": "Get help"},
                ],
            ),
            ("tool", [{"name": f"tool{i}", "module": "core"} for i in range(n_tools)]),
        ]
    )
    return RegistrySnapshot(bmad_dir="/x", commands=frozen_mapping(commands))


class TestSlashCompleter:
    def _completions(self, text, cmd_handler=None):
        completer = _SlashCompleter(cmd_handler)
        doc = Document(text, len(text))
        return list(completer.get_completions(doc, None))

    def _handler(self, snapshot):
        h = MagicMock()
        h.snapshot = snapshot
        return h

    def test_slash_trigger_returns_builtin_commands(self):
        texts = [c.text for c in self._completions("/")]
        assert "/help" in texts
        assert "/search" in texts

    def test_no_slash_returns_nothing(self):
        assert self._completions("hello") == []

    def test_no_completion_after_arguments(self):
        assert self._completions("/search prd", self._handler(_snapshot())) == []

    def test_partial_slash_filters_builtins(self):
        for c in self._completions("/hel"):
            assert "hel" in c.text

    def test_registry_commands_included(self):
        texts = [c.text for c in self._completions("/bmad-bmm", self._handler(_snapshot()))]
        assert texts == ["/bmad-bmm-create-prd"]

    def test_substring_match(self):
        completions = self._completions("/prd", self._handler(_snapshot()))
        assert [c.text for c in completions] == ["/bmad-bmm-create-prd"]
        assert completions[0].start_position == -4

    def test_description_as_meta(self):
        completions = self._completions("/bmad-help", self._handler(_snapshot()))
        assert completions[0].display_meta_text == "Get help"

    def test_no_snapshot(self):
        texts = [c.text for c in self._completions("/bmad", self._handler(None))]
        assert texts == []

    def test_limit(self):
        completions = self._completions("/", self._handler(_snapshot(n_tools=100)))
        assert len(completions) <= MAX_COMPLETIONS

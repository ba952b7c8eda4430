"""Public API for the bmadkit TUI package."""

from .repl import render_command_result, run_repl

__all__ = ["render_command_result", "run_repl"]

"""Link pass: attach .github/prompts and .github/agents files to commands."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from pathlib import Path

from .models import Command, LinkResult, frozen_mapping
from .naming import agent_file_slash_name, prompt_file_slash_name

PROMPTS_SUBDIR = Path(".github") / "prompts"
AGENTS_SUBDIR = Path(".github") / "agents"


def _list_files(directory: Path, errors: list[str]) -> list[Path]:
    try:
        if not directory.is_dir():
            return []
        return sorted(f for f in directory.iterdir() if f.is_file())
    except (FileNotFoundError, NotADirectoryError):
        return []
    except OSError as e:
        errors.append(f"{directory}: {e.strerror or e}")
        return []


def link_prompt_files(workspace_root: Path, commands: Mapping[str, Command]) -> LinkResult:
    """Scan the prompt/agent directories under *workspace_root*.

    Returns a new command map in which matched commands carry
    ``prompt_file_path``; *commands* itself is left untouched. Files with no
    matching command are still recorded in ``prompt_files``.
    """
    linked = dict(commands)
    prompt_files: dict[str, str] = {}
    errors: list[str] = []

    for f in _list_files(workspace_root / PROMPTS_SUBDIR, errors):
        slash_name = prompt_file_slash_name(f.name)
        if slash_name is None:
            continue
        abs_path = str(f.resolve())
        prompt_files[slash_name] = abs_path
        if slash_name in linked:
            linked[slash_name] = replace(linked[slash_name], prompt_file_path=abs_path)

    for f in _list_files(workspace_root / AGENTS_SUBDIR, errors):
        names = agent_file_slash_name(f.name)
        if names is None:
            continue
        discovered, command_name = names
        abs_path = str(f.resolve())
        prompt_files[discovered] = abs_path
        if command_name and command_name in linked:
            linked[command_name] = replace(linked[command_name], prompt_file_path=abs_path)

    return LinkResult(
        commands=frozen_mapping(linked),
        prompt_files=frozen_mapping(prompt_files),
        errors=tuple(errors),
    )

"""Installation diagnostics: _bmad/, manifests, and .github prompt files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from ..manifests import BMAD_DIR_NAME, CONFIG_DIR_NAME, MANIFEST_FILES, count_rows
from ..registry.links import AGENTS_SUBDIR, PROMPTS_SUBDIR
from ..registry.naming import agent_file_slash_name, prompt_file_slash_name
from ..registry.scanner import detect_modules, find_bmad_dir, is_dir

CLAUDE_CODE_PROMPTS = Path("ide") / "claude-code" / "prompts"


@dataclass
class InstallStatus:
    cwd: Path
    bmad_dir: Path | None = None
    modules: list[str] = field(default_factory=list)
    has_config: bool = False
    # manifest file name -> row count, None when the file is missing
    manifests: dict[str, int | None] = field(default_factory=dict)
    prompt_files: list[str] = field(default_factory=list)
    agent_files: list[str] = field(default_factory=list)
    has_claude_code_source: bool = False

    @property
    def installed(self) -> bool:
        return self.bmad_dir is not None and self.has_config


def _matching_files(directory: Path, match) -> list[str]:
    try:
        if not directory.is_dir():
            return []
        return sorted(f.name for f in directory.iterdir() if f.is_file() and match(f.name))
    except OSError:
        return []


def collect_status(cwd: Path, override_bmad_dir: Path | None = None) -> InstallStatus:
    status = InstallStatus(cwd=cwd)
    bmad_dir = override_bmad_dir if override_bmad_dir else find_bmad_dir(cwd)
    if bmad_dir is not None and is_dir(bmad_dir):
        status.bmad_dir = bmad_dir
        status.modules = detect_modules(bmad_dir)
        config_dir = bmad_dir / CONFIG_DIR_NAME
        status.has_config = is_dir(config_dir)
        if status.has_config:
            for filename in MANIFEST_FILES.values():
                status.manifests[filename] = count_rows(config_dir / filename)
        status.has_claude_code_source = is_dir(bmad_dir / CLAUDE_CODE_PROMPTS)

    status.prompt_files = _matching_files(
        cwd / PROMPTS_SUBDIR, lambda n: prompt_file_slash_name(n) is not None
    )
    status.agent_files = _matching_files(
        cwd / AGENTS_SUBDIR, lambda n: agent_file_slash_name(n) is not None
    )
    return status


def _check(console: Console, label: str, value: str, ok: bool, warn_only: bool = False) -> None:
    if ok:
        mark = "[green]✓[/green]"
    elif warn_only:
        mark = "[yellow]![/yellow]"
    else:
        mark = "[red]✗[/red]"
    console.print(f"  {mark} {label}: {value}")


def render_status(status: InstallStatus, console: Console) -> None:
    console.print()
    console.print("  [bold]BMAD installation status[/bold]")
    console.print(f"  [dim]workspace:[/dim] {status.cwd}")
    console.print()

    found = status.bmad_dir is not None
    location = str(status.bmad_dir) if found else "missing"
    _check(console, f"{BMAD_DIR_NAME}/ directory", location, found)
    if found:
        modules = ", ".join(status.modules) if status.modules else "none"
        console.print(f"  [dim]  modules:[/dim] {modules}")
        _check(
            console,
            f"  {CONFIG_DIR_NAME}/ manifests",
            "found" if status.has_config else "missing",
            status.has_config,
        )
        for name, count in status.manifests.items():
            shown = f"{count} entries" if count is not None else "[yellow]not found[/yellow]"
            console.print(f"  [dim]    {name}:[/dim] {shown}")
    console.print()

    n_prompts = len(status.prompt_files)
    n_agents = len(status.agent_files)
    _check(
        console,
        ".github/prompts/",
        f"{n_prompts} file(s)" if n_prompts else "empty or missing",
        n_prompts > 0,
        warn_only=True,
    )
    _check(
        console,
        ".github/agents/",
        f"{n_agents} file(s)" if n_agents else "empty or missing",
        n_agents > 0,
        warn_only=True,
    )
    if found:
        _check(
            console,
            "claude-code source",
            "present" if status.has_claude_code_source else "not found",
            status.has_claude_code_source,
            warn_only=True,
        )
    console.print()

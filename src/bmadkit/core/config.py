"""Configuration: env, settings files, BMAD directory override."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console

console = Console(stderr=True)

PROJECT_DIR_NAME = ".bmadkit"

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class Config:
    cwd: Path = field(default_factory=Path.cwd)
    global_dir: Path = field(default_factory=lambda: Path.home() / ".bmadkit")
    project_dir: Path | None = None  # explicit override; None = <cwd>/.bmadkit
    bmad_dir: str = ""  # override path to _bmad; empty = auto-detect
    auto_scan: bool = True
    verbose: bool = False
    search_limit: int = 20

    @property
    def primary_project_dir(self) -> Path:
        if self.project_dir is not None:
            return self.project_dir
        return self.cwd / PROJECT_DIR_NAME

    @property
    def bmad_dir_override(self) -> Path | None:
        """The configured ``_bmad`` path, resolved against cwd, or None."""
        if not self.bmad_dir:
            return None
        p = Path(self.bmad_dir).expanduser()
        return p if p.is_absolute() else (self.cwd / p)


def _apply_settings(config: Config, path: Path) -> None:
    """Apply a single settings.json file to config."""
    if not path.exists():
        return
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        console.print(f"  [yellow]warning: ignoring {path}: {e}[/yellow]")
        return
    if not isinstance(data, dict):
        return

    if isinstance(data.get("bmadDir"), str):
        config.bmad_dir = data["bmadDir"]
    if isinstance(data.get("autoScan"), bool):
        config.auto_scan = data["autoScan"]
    if isinstance(data.get("verbose"), bool):
        config.verbose = data["verbose"]
    limit = data.get("searchLimit")
    if isinstance(limit, int) and not isinstance(limit, bool) and limit > 0:
        config.search_limit = limit


def load_config(
    bmad_dir: str | None = None,
    verbose: bool = False,
    cwd: Path | None = None,
) -> Config:
    """Load config with priority: CLI args > env > .env > settings.json > defaults."""
    load_dotenv()

    config = Config(cwd=cwd) if cwd else Config()

    _apply_settings(config, config.global_dir / "settings.json")
    _apply_settings(config, config.primary_project_dir / "settings.json")
    _apply_settings(config, config.primary_project_dir / "settings.local.json")

    if env_dir := os.getenv("BMADKIT_BMAD_DIR"):
        config.bmad_dir = env_dir
    if env_verbose := os.getenv("BMADKIT_VERBOSE"):
        config.verbose = env_verbose.strip().lower() in _TRUTHY

    if bmad_dir:
        config.bmad_dir = bmad_dir
    if verbose:
        config.verbose = True

    return config

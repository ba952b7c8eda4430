"""CommandRegistry: scan a BMAD installation into an immutable RegistrySnapshot."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from pathlib import Path

from ..manifests import (
    BMAD_DIR_NAME,
    CONFIG_DIR_NAME,
    MANIFEST_COLUMNS,
    MANIFEST_FILES,
    ManifestKind,
    read_manifest,
)
from .links import link_prompt_files
from .merge import merge_commands
from .models import Command, RegistrySnapshot, Row

# Subdirectories of _bmad/ that are not modules
RESERVED_DIRS = frozenset({"_config", "_memory", "docs"})

DEFAULT_SEARCH_LIMIT = 20


def is_dir(path: Path) -> bool:
    """Like ``Path.is_dir`` but an unreadable path counts as absent."""
    try:
        return path.is_dir()
    except OSError:
        return False


def find_bmad_dir(start_dir: Path) -> Path | None:
    """Look for ``_bmad/`` in *start_dir*, then one level up (mono-repo layout)."""
    candidate = start_dir / BMAD_DIR_NAME
    if is_dir(candidate):
        return candidate
    parent = start_dir.parent
    if parent != start_dir:
        parent_candidate = parent / BMAD_DIR_NAME
        if is_dir(parent_candidate):
            return parent_candidate
    return None


def detect_modules(bmad_dir: Path) -> list[str]:
    try:
        return sorted(
            d.name
            for d in bmad_dir.iterdir()
            if d.is_dir() and d.name not in RESERVED_DIRS and not d.name.startswith(".")
        )
    except OSError:
        return []


def _with_columns(kind: ManifestKind, rows: list[dict[str, str]]) -> tuple[Row, ...]:
    """Fill documented columns a manifest omits so consumers can index freely."""
    columns = MANIFEST_COLUMNS[kind]
    return tuple({**{c: "" for c in columns}, **row} for row in rows)


async def load_manifests(config_dir: Path) -> dict[ManifestKind, tuple[Row, ...]]:
    """Read every manifest kind concurrently. Missing files yield no rows."""
    kinds = list(MANIFEST_FILES)
    results = await asyncio.gather(
        *(read_manifest(config_dir / MANIFEST_FILES[kind]) for kind in kinds)
    )
    return {kind: _with_columns(kind, rows) for kind, rows in zip(kinds, results)}


class CommandRegistry:
    """Discovers BMAD commands and answers lookups against the last scan.

    Usage::

        registry = CommandRegistry()
        snapshot = registry.scan_sync(Path.cwd())
        if snapshot:
            cmd = registry.resolve("/bmad-bmm-create-prd")

    Concurrent scans are not serialized; whichever finishes last is kept.
    Callers reacting to file-change events should debounce.
    """

    def __init__(self) -> None:
        self._snapshot: RegistrySnapshot | None = None

    @property
    def snapshot(self) -> RegistrySnapshot | None:
        return self._snapshot

    async def scan(
        self, workspace_root: Path, override_bmad_dir: Path | None = None
    ) -> RegistrySnapshot | None:
        """Scan the workspace and publish a new snapshot.

        Returns None when no BMAD installation (``_bmad/_config``) is found;
        the previous snapshot is kept in that case.
        """
        workspace_root = Path(workspace_root)
        bmad_dir = Path(override_bmad_dir) if override_bmad_dir else find_bmad_dir(workspace_root)
        if bmad_dir is None or not is_dir(bmad_dir / CONFIG_DIR_NAME):
            return None

        manifests = await load_manifests(bmad_dir / CONFIG_DIR_NAME)
        modules = detect_modules(bmad_dir)

        commands = merge_commands(manifests.items())
        # Prompt files live under the workspace root, not next to an overridden _bmad
        links = link_prompt_files(workspace_root, commands)

        snapshot = RegistrySnapshot(
            bmad_dir=str(bmad_dir),
            commands=links.commands,
            help_entries=manifests["help"],
            agents=manifests["agent"],
            workflows=manifests["workflow"],
            tasks=manifests["task"],
            tools=manifests["tool"],
            modules=tuple(modules),
            prompt_files=links.prompt_files,
            link_errors=links.errors,
            last_scan=datetime.now(timezone.utc).isoformat(),
        )
        self._snapshot = snapshot
        return snapshot

    def scan_sync(
        self, workspace_root: Path, override_bmad_dir: Path | None = None
    ) -> RegistrySnapshot | None:
        return _run_async(self.scan(workspace_root, override_bmad_dir))

    def resolve(self, name: str) -> Command | None:
        """Look up a command by slash name, with or without the leading ``/``."""
        if self._snapshot is None:
            return None
        return self._snapshot.resolve(name)

    def search(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[Command]:
        """Case-insensitive substring search. Catalog order, not relevance."""
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        if self._snapshot is None:
            return []
        return self._snapshot.search(query, limit)


def _run_async(coro):
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)
    import concurrent.futures

    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(asyncio.run, coro).result()

"""Slash-name <-> CLI syntax conversion and execution-pattern detection.

Slash names are what users type (``bmad-bmm-create-prd``); CLI syntax is the
colon-delimited form BMAD uses internally (``bmad:bmm:create-prd``).

Going from slash name back to CLI syntax is a heuristic. A module name and a
command name that both contain dashes cannot be told apart once joined, so
``bmad-agent-tech-writer`` parses as module ``tech``, agent ``writer``.
Only the display ``cli_syntax`` is affected; lookups always use the slash name.
"""

from __future__ import annotations

import re

from .models import ExecutionPattern

ROOT_PREFIX = "bmad"
AGENT_MARKER = "agent"

PROMPT_FILE_SUFFIX = ".prompt.md"
AGENT_FILE_SUFFIX = ".agent.md"

# bmad-<module>-agents-<name> (agent files) -> bmad-agent-<module>-<name> (commands)
_AGENT_FILE_RE = re.compile(rf"^{ROOT_PREFIX}-([^-]+)-agents-(.+)$")


def to_external_name(cli: str) -> str:
    """``bmad:bmm:create-prd`` -> ``bmad-bmm-create-prd``."""
    return cli.replace(":", "-")


def to_internal_syntax(slash: str) -> str:
    """Best-effort inverse of :func:`to_external_name`.

    >>> to_internal_syntax("bmad-bmm-create-prd")
    'bmad:bmm:create-prd'
    >>> to_internal_syntax("/bmad-agent-bmm-pm")
    'bmad:agent:bmm:pm'
    >>> to_internal_syntax("bmad-help")
    'bmad:help'
    """
    clean = slash[1:] if slash.startswith("/") else slash

    parts = clean.split("-")
    if parts[0] != ROOT_PREFIX:
        return clean

    if len(parts) > 1 and parts[1] == AGENT_MARKER:
        if len(parts) >= 4:
            return f"{ROOT_PREFIX}:{AGENT_MARKER}:{parts[2]}:{'-'.join(parts[3:])}"
        return ":".join([ROOT_PREFIX, AGENT_MARKER, *parts[2:]])

    if len(parts) <= 2:
        return ":".join(parts)

    return f"{ROOT_PREFIX}:{parts[1]}:{'-'.join(parts[2:])}"


def classify_execution_pattern(file_path: str) -> ExecutionPattern:
    lower = file_path.lower()
    if lower.endswith((".yaml", ".yml")):
        return "yaml-workflow"
    if lower.endswith(".xml"):
        return "task"
    return "md-workflow"


def is_core_module(module: str) -> bool:
    return not module or module == "core"


def agent_slash_name(name: str, module: str = "") -> str:
    if is_core_module(module):
        return f"{ROOT_PREFIX}-{AGENT_MARKER}-{name}"
    return f"{ROOT_PREFIX}-{AGENT_MARKER}-{module}-{name}"


def task_slash_name(name: str, module: str = "") -> str:
    if is_core_module(module):
        return f"{ROOT_PREFIX}-{name}"
    return f"{ROOT_PREFIX}-{module}-{name}"


def has_root_prefix(slash: str) -> bool:
    return slash == ROOT_PREFIX or slash.startswith(f"{ROOT_PREFIX}-")


def prompt_file_slash_name(filename: str) -> str | None:
    """``bmad-bmm-create-prd.prompt.md`` -> ``bmad-bmm-create-prd``."""
    if not filename.startswith(ROOT_PREFIX) or not filename.endswith(PROMPT_FILE_SUFFIX):
        return None
    return filename[: -len(PROMPT_FILE_SUFFIX)]


def agent_file_slash_name(filename: str) -> tuple[str, str | None] | None:
    """Map an agent file name to ``(discovered_name, command_name)``.

    ``command_name`` is the activator command the file belongs to, or None when
    the file name does not follow the ``bmad-<module>-agents-<name>`` layout.
    Returns None for files that are not BMAD agent files at all.
    """
    if not filename.startswith(ROOT_PREFIX) or not filename.endswith(AGENT_FILE_SUFFIX):
        return None
    discovered = filename[: -len(AGENT_FILE_SUFFIX)]
    m = _AGENT_FILE_RE.match(discovered)
    if not m:
        return discovered, None
    return discovered, f"{ROOT_PREFIX}-{AGENT_MARKER}-{m.group(1)}-{m.group(2)}"

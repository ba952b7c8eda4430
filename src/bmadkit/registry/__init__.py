"""Registry: manifest-driven command discovery, naming codec, and lookups."""

from .links import link_prompt_files
from .merge import MERGE_ORDER, merge_commands
from .models import CATEGORIES, Category, Command, ExecutionPattern, LinkResult, RegistrySnapshot
from .naming import (
    ROOT_PREFIX,
    classify_execution_pattern,
    to_external_name,
    to_internal_syntax,
)
from .scanner import CommandRegistry, detect_modules, find_bmad_dir

__all__ = [
    "CATEGORIES",
    "MERGE_ORDER",
    "ROOT_PREFIX",
    "Category",
    "Command",
    "CommandRegistry",
    "ExecutionPattern",
    "LinkResult",
    "RegistrySnapshot",
    "classify_execution_pattern",
    "detect_modules",
    "find_bmad_dir",
    "link_prompt_files",
    "merge_commands",
    "to_external_name",
    "to_internal_syntax",
]

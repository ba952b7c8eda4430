"""Commands: slash command dispatch, catalog listings, and installation status."""

from .handler import COMMANDS, CommandHandler, CommandResult
from .listing import format_agent_listing, format_command_listing, format_workflow_listing
from .status import InstallStatus, collect_status, render_status

__all__ = [
    "COMMANDS",
    "CommandHandler",
    "CommandResult",
    "InstallStatus",
    "collect_status",
    "format_agent_listing",
    "format_command_listing",
    "format_workflow_listing",
    "render_status",
]

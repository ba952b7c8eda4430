"""bmadkit: discover BMAD commands from manifests and dispatch them as slash commands."""

__version__ = "0.1.0"

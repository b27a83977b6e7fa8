"""API module for cluwaste.

Functions defined here are the single source of truth for CLI commands.
Each ``cmd_*`` function returns a StageResult; the CLI layer handles display.
"""

__all__ = []

"""Utilities for SSH Dashboard."""

from ssh_dashboard.utils.console import ColorfulFormatter, configure_logging
from ssh_dashboard.utils.paths import expand_path

__all__ = [
    "ColorfulFormatter",
    "configure_logging",
    "expand_path",
]

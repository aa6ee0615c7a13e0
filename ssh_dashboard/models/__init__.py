"""Data models for SSH Dashboard."""

from ssh_dashboard.models.command import CommandResult
from ssh_dashboard.models.ssh import AuthMethod, SSHHost
from ssh_dashboard.models.status import HostStatus

__all__ = [
    "AuthMethod",
    "CommandResult",
    "HostStatus",
    "SSHHost",
]

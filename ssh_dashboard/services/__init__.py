"""Services for SSH Dashboard."""

from ssh_dashboard.services.auth import Authenticator
from ssh_dashboard.services.connection import ConnectionManager, SSHSession
from ssh_dashboard.services.handoff import exec_ssh
from ssh_dashboard.services.monitor import poll_host, poll_hosts

__all__ = [
    "Authenticator",
    "ConnectionManager",
    "SSHSession",
    "exec_ssh",
    "poll_host",
    "poll_hosts",
]

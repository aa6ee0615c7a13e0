"""SSH Dashboard: poll the hosts in ~/.ssh/config and jump into one."""

from ssh_dashboard.version import __version__

__all__ = ["__version__"]

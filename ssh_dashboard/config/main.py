"""Application configuration.

Delegates to specialized components:
- SSHConfigParser: Reads ~/.ssh/config
- HostKeyVerifier: Manages known_hosts
- Settings: Environment variables
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ssh_dashboard.config.host_keys import HostKeyVerifier
from ssh_dashboard.config.parser import SSHConfigParser
from ssh_dashboard.config.settings import Settings
from ssh_dashboard.models import SSHHost

if TYPE_CHECKING:
    from ssh_dashboard.services.connection import ConnectionManager

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Application configuration.

    Aggregates settings from SSH config, known_hosts, and environment.
    """

    settings: Settings
    parser: SSHConfigParser
    host_keys: HostKeyVerifier
    _hosts_cache: list[SSHHost] | None = field(default=None, init=False, repr=False)

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment.

        Returns:
            Configured instance with all components initialized
        """
        return cls.from_settings(Settings.from_env())

    @classmethod
    def from_settings(cls, settings: Settings) -> "Config":
        """Create config from explicit settings.

        Args:
            settings: Resolved settings

        Returns:
            Configured instance
        """
        return cls(
            settings=settings,
            parser=SSHConfigParser(home=settings.home),
            host_keys=HostKeyVerifier(
                known_hosts_path=settings.known_hosts_path,
                home=settings.home,
            ),
        )

    def get_hosts(self) -> list[SSHHost]:
        """Get SSH hosts from config.

        Lazy loads and caches hosts on first call.

        Raises:
            OSError: If the SSH config cannot be read
        """
        if self._hosts_cache is None:
            self._hosts_cache = self.parser.parse()
        return self._hosts_cache

    def get_host(self, name: str) -> SSHHost | None:
        """Get host by name.

        Args:
            name: Host name to look up

        Returns:
            SSHHost if found, None otherwise
        """
        return next((h for h in self.get_hosts() if h.name == name), None)

    def create_manager(self) -> "ConnectionManager":
        """Build a ConnectionManager wired to these settings."""
        from ssh_dashboard.services.auth import Authenticator
        from ssh_dashboard.services.connection import ConnectionManager

        authenticator = Authenticator(
            home=self.settings.home,
            agent_path=self.settings.agent_path,
        )
        return ConnectionManager(
            authenticator=authenticator,
            host_keys=self.host_keys,
            current_user=self.settings.current_user,
            connect_timeout=self.settings.connect_timeout,
        )

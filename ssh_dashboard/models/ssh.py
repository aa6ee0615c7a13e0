"""SSH-related data models."""

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import asyncssh

DEFAULT_PORT = "22"


@dataclass(frozen=True)
class SSHHost:
    """SSH host configuration.

    Empty ``hostname`` and ``user`` mean "not set in the config file";
    use :meth:`resolved` to apply connection defaults.
    """

    name: str
    hostname: str = ""
    user: str = ""
    port: str = DEFAULT_PORT
    identity_file: str | None = None

    @property
    def is_pattern(self) -> bool:
        """Whether this is a wildcard block rather than a connectable host."""
        return "*" in self.name or "?" in self.name

    @property
    def address(self) -> str:
        """Dial address as ``hostname:port``."""
        return f"{self.hostname or self.name}:{self.port or DEFAULT_PORT}"

    def resolved(self, current_user: str) -> "SSHHost":
        """Return a copy with hostname, user and port defaults filled in.

        Args:
            current_user: Remote user to use when none is configured

        Returns:
            New SSHHost; this instance is left unchanged
        """
        return replace(
            self,
            hostname=self.hostname or self.name,
            user=self.user or current_user,
            port=self.port or DEFAULT_PORT,
        )


@dataclass
class AuthMethod:
    """One way of authenticating a session.

    ``kind`` is ``"agent"`` (with ``agent`` set) or ``"publickey"``
    (with ``key`` set). ``source`` is the agent socket or key file path.
    """

    kind: str
    source: str
    key: "asyncssh.SSHKey | None" = None
    agent: "asyncssh.SSHAgentClient | None" = None

    @property
    def is_agent(self) -> bool:
        return self.kind == "agent"

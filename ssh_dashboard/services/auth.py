"""Authentication method selection.

Precedence follows the OpenSSH client: a reachable SSH agent is used on its
own; otherwise the host's IdentityFile and the default key files are tried.
Encrypted keys are only usable through the agent since nothing here prompts
for a passphrase.
"""

import logging
from pathlib import Path

import asyncssh

from ssh_dashboard.errors import NoAuthMethodError
from ssh_dashboard.models import AuthMethod, SSHHost

logger = logging.getLogger(__name__)

DEFAULT_KEY_NAMES = ("id_rsa", "id_ed25519", "id_ecdsa")


async def agent_method(agent_path: str | None) -> AuthMethod | None:
    """Connect to the SSH agent.

    Args:
        agent_path: Agent socket path (usually $SSH_AUTH_SOCK)

    Returns:
        Agent AuthMethod, or None if no agent is reachable
    """
    if not agent_path:
        logger.debug("SSH_AUTH_SOCK not set, skipping agent")
        return None

    try:
        agent = await asyncssh.connect_agent(agent_path)
    except (OSError, asyncssh.Error) as e:
        logger.debug("Failed to connect to SSH agent at %s: %s", agent_path, e)
        return None

    if agent is None:
        logger.debug("SSH agent at %s not available", agent_path)
        return None

    return AuthMethod(kind="agent", source=agent_path, agent=agent)


def key_file_method(key_path: str | Path) -> AuthMethod | None:
    """Load an unencrypted private key.

    Args:
        key_path: Private key file

    Returns:
        Public key AuthMethod, or None if the file is missing, malformed
        or passphrase protected
    """
    try:
        key = asyncssh.read_private_key(str(key_path))
    except (OSError, asyncssh.KeyImportError, asyncssh.KeyEncryptionError) as e:
        logger.debug("Skipping key %s: %s", key_path, e)
        return None

    return AuthMethod(kind="publickey", source=str(key_path), key=key)


class Authenticator:
    """Builds the ordered list of auth methods for a host."""

    def __init__(
        self,
        home: Path | None = None,
        agent_path: str | None = None,
        default_key_names: tuple[str, ...] = DEFAULT_KEY_NAMES,
    ) -> None:
        """Initialize authenticator.

        Args:
            home: Home directory holding ``.ssh`` default keys (None skips them)
            agent_path: SSH agent socket path (None skips the agent)
            default_key_names: Key file names tried under ``<home>/.ssh``
        """
        self.home = home
        self.agent_path = agent_path
        self.default_key_names = default_key_names

    def key_paths(self, host: SSHHost) -> list[str]:
        """Key files to try for a host, in order."""
        paths = []
        if host.identity_file:
            paths.append(host.identity_file)
        if self.home is not None:
            ssh_dir = self.home / ".ssh"
            paths.extend(str(ssh_dir / name) for name in self.default_key_names)
        return paths

    async def build_methods(self, host: SSHHost) -> list[AuthMethod]:
        """Build auth methods for a host.

        Args:
            host: Host being connected to

        Returns:
            Either the agent alone, or every loadable key file

        Raises:
            NoAuthMethodError: If neither the agent nor any key is usable
        """
        agent = await agent_method(self.agent_path)
        if agent is not None:
            logger.debug("Using SSH agent for %s", host.name)
            return [agent]

        methods = [m for path in self.key_paths(host) if (m := key_file_method(path))]
        if not methods:
            logger.warning("No authentication methods available for %s", host.name)
            raise NoAuthMethodError(host.name)

        logger.debug(
            "Using %d key file(s) for %s: %s",
            len(methods),
            host.name,
            ", ".join(m.source for m in methods),
        )
        return methods

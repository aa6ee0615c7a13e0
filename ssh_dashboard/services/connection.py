"""Verified SSH sessions.

Locking Strategy:
- None. Each SSHSession is owned by the task that opened it; the only
  shared resource is the known_hosts file, which is read per verification.
"""

import asyncio
import logging
from typing import Any

import asyncssh

from ssh_dashboard.config.host_keys import HostKeyCallback, HostKeyVerifier
from ssh_dashboard.errors import (
    ChannelError,
    DialError,
    ExecError,
    HostKeyVerificationError,
    SessionClosedError,
)
from ssh_dashboard.models import AuthMethod, CommandResult, SSHHost
from ssh_dashboard.services.auth import Authenticator

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT = 10.0


class VerifyingClient(asyncssh.SSHClient):
    """SSH client that checks host keys through a callback.

    asyncssh only reports a generic "not trusted" failure, so the
    callback's error is kept on ``trust_error`` for the caller to raise.
    """

    def __init__(self, verify: HostKeyCallback) -> None:
        super().__init__()
        self._verify = verify
        self.trust_error: HostKeyVerificationError | None = None

    def validate_host_public_key(
        self,
        host: str,
        addr: str,
        port: int,
        key: asyncssh.SSHKey,
    ) -> bool:
        try:
            self._verify(host, addr, key, port)
        except HostKeyVerificationError as e:
            self.trust_error = e
            return False
        return True


def _decode(data: Any) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return str(data)


async def _close_agents(methods: list[AuthMethod]) -> None:
    for method in methods:
        if method.agent is not None:
            method.agent.close()
            await method.agent.wait_closed()


class SSHSession:
    """An authenticated, verified connection to one host."""

    def __init__(
        self,
        host: SSHHost,
        connection: "asyncssh.SSHClientConnection | None" = None,
        methods: list[AuthMethod] | None = None,
    ) -> None:
        """Initialize session.

        Args:
            host: Host the session is bound to
            connection: Open connection (None for a session that never opened)
            methods: Auth methods whose resources the session now owns
        """
        self.host = host
        self._conn = connection
        self._methods = methods or []

    @property
    def is_open(self) -> bool:
        return self._conn is not None and not self._conn.is_closed()

    async def execute_command(self, command: str) -> CommandResult:
        """Run a command on a fresh channel and capture merged output.

        Args:
            command: Shell command to run remotely

        Returns:
            CommandResult with merged stdout/stderr

        Raises:
            ExecError: Command exited non-zero or by signal; ``output`` is kept
            ChannelError: The channel could not be opened or broke
            SessionClosedError: The session is not open
        """
        if self._conn is None:
            raise SessionClosedError(self.host.name)

        try:
            # Bytes so invalid UTF-8 is replaced by _decode instead of dropped
            result = await self._conn.run(
                command, stderr=asyncssh.STDOUT, check=False, encoding=None
            )
        except (asyncssh.Error, OSError) as e:
            logger.warning("Command on %s failed to run: %s", self.host.name, e)
            raise ChannelError(command, e) from e

        output = _decode(result.stdout)
        exit_status = result.exit_status

        if exit_status is None or exit_status != 0:
            logger.debug(
                "Command on %s exited with %s (%d bytes output)",
                self.host.name,
                exit_status,
                len(output),
            )
            raise ExecError(command, exit_status, output)

        return CommandResult(output=output, exit_status=exit_status)

    async def close(self) -> None:
        """Close the session. Safe to call repeatedly."""
        conn, self._conn = self._conn, None
        methods, self._methods = self._methods, []

        if conn is not None:
            logger.info("Closing SSH connection to %s", self.host.name)
            conn.close()
            await conn.wait_closed()
        await _close_agents(methods)

    async def __aenter__(self) -> "SSHSession":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


class ConnectionManager:
    """Opens verified SSH sessions."""

    def __init__(
        self,
        authenticator: Authenticator,
        host_keys: HostKeyVerifier,
        current_user: str = "",
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    ) -> None:
        """Initialize connection manager.

        Args:
            authenticator: Builds auth methods per host
            host_keys: Verifies server host keys
            current_user: Remote user for hosts without ``User``
            connect_timeout: Seconds allowed for TCP connect and handshake
        """
        self.authenticator = authenticator
        self.host_keys = host_keys
        self.current_user = current_user
        self.connect_timeout = connect_timeout

    async def open(self, host: SSHHost) -> SSHSession:
        """Open a verified session to a host.

        Args:
            host: Host from the SSH config

        Returns:
            Open SSHSession

        Raises:
            NoAuthMethodError: No agent or usable key
            HostKeyVerificationError: Unknown or changed host key
            DialError: Network, handshake or authentication failure
            OSError: known_hosts could not be created
        """
        host = host.resolved(self.current_user)
        methods = await self.authenticator.build_methods(host)

        try:
            self.host_keys.ensure_store()
            conn = await self._connect(host, methods)
        except BaseException:
            await _close_agents(methods)
            raise

        logger.info("SSH connection established to %s (%s)", host.name, host.address)
        return SSHSession(host, conn, methods)

    async def _connect(
        self,
        host: SSHHost,
        methods: list[AuthMethod],
    ) -> asyncssh.SSHClientConnection:
        client = VerifyingClient(self.host_keys.callback())

        logger.info(
            "Opening SSH connection to %s (%s@%s)",
            host.name,
            host.user,
            host.address,
        )
        try:
            client_keys = await self._client_keys(methods)
            # No preloaded keys: every host key goes through validate_host_public_key
            return await asyncssh.connect(
                host.hostname,
                port=int(host.port),
                username=host.user,
                client_keys=client_keys,
                agent_path=None,
                config=None,
                known_hosts=([], [], []),
                client_factory=lambda: client,
                connect_timeout=self.connect_timeout,
                preferred_auth="publickey",
            )
        except (asyncssh.Error, OSError, asyncio.TimeoutError, ValueError) as e:
            if client.trust_error is not None:
                raise client.trust_error from e
            logger.warning("Failed to connect to %s: %s", host.address, e)
            raise DialError(host.address, e) from e

    @staticmethod
    async def _client_keys(methods: list[AuthMethod]) -> list[Any] | None:
        """Turn auth methods into asyncssh ``client_keys``.

        An empty list would make asyncssh load default keys on its own, so
        "no keys" is passed as None.
        """
        keys: list[Any] = []
        for method in methods:
            if method.agent is not None:
                keys.extend(await method.agent.get_keys())
            elif method.key is not None:
                keys.append(method.key)
        return keys or None

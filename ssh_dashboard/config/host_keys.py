"""SSH host key verification.

Checks presented host keys against a known_hosts file for MITM prevention.
The file is only ever created empty; trust decisions are made by the user
outside this program (for example by running ``ssh <host>`` once).
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path

import asyncssh

from ssh_dashboard.errors import (
    HostKeyChangedError,
    HostKeyVerificationError,
    UnknownHostKeyError,
)

logger = logging.getLogger(__name__)

HostKeyCallback = Callable[[str, str, asyncssh.SSHKey, int], None]


class HostKeyVerifier:
    """SSH host key verification against a known_hosts file.

    Verification never disables itself: a missing file is created empty,
    which makes every host unknown until the user adds its key.
    """

    def __init__(
        self,
        known_hosts_path: Path | str | None = None,
        home: Path | None = None,
    ):
        """Initialize host key verifier.

        Args:
            known_hosts_path: Path to known_hosts file (default: ~/.ssh/known_hosts)
            home: Home directory used for the default path
        """
        if known_hosts_path is None:
            known_hosts_path = (home or Path.home()) / ".ssh" / "known_hosts"
        self.known_hosts_path = Path(known_hosts_path)

    def ensure_store(self) -> Path:
        """Create the known_hosts file and its directory if missing.

        Existing files are left untouched.

        Returns:
            Path to the known_hosts file

        Raises:
            OSError: If the directory or file cannot be created
        """
        path = self.known_hosts_path
        if path.exists():
            return path

        try:
            path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
            # O_EXCL so a file created concurrently is never truncated
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
        except FileExistsError:
            if path.exists():
                return path
            logger.error("Unable to create known_hosts %s: parent is not a directory", path)
            raise
        except OSError as e:
            logger.error("Unable to create known_hosts %s: %s", path, e)
            raise
        os.close(fd)
        logger.info("Created empty known_hosts at %s", path)
        return path

    def verify(
        self,
        hostname: str,
        address: str,
        key: asyncssh.SSHKey,
        port: int = 22,
    ) -> None:
        """Verify a presented host key.

        Args:
            hostname: Host name the user connected to
            address: Remote IP address (may be empty)
            key: Public key presented by the server
            port: Remote port

        Raises:
            UnknownHostKeyError: No known_hosts entry for the host
            HostKeyChangedError: Entries exist but none match, or the key is revoked
            HostKeyVerificationError: known_hosts could not be loaded
        """
        store = str(self.known_hosts_path)
        if not self.known_hosts_path.is_file():
            raise HostKeyVerificationError(hostname, store, f"unable to load known_hosts: {store} does not exist")

        try:
            known_hosts = asyncssh.read_known_hosts(store)
            match = known_hosts.match(hostname, address, port)
        except (OSError, ValueError, asyncssh.KeyImportError) as e:
            logger.error("Unable to load known_hosts %s: %s", store, e)
            raise HostKeyVerificationError(hostname, store, f"unable to load known_hosts: {e}") from e

        trusted, revoked = match[0], match[2]
        presented = key.public_data

        if any(k.public_data == presented for k in revoked):
            logger.error("Host key for %s is revoked in %s", hostname, store)
            raise HostKeyChangedError(hostname, store)

        if any(k.public_data == presented for k in trusted):
            logger.debug("Host key for %s verified", hostname)
            return

        if trusted:
            logger.error("Host key for %s does not match known_hosts", hostname)
            raise HostKeyChangedError(hostname, store)

        logger.warning("Host %s is not in %s", hostname, store)
        raise UnknownHostKeyError(hostname, store)

    def callback(self) -> HostKeyCallback:
        """Return the verification function used during the handshake."""
        return self.verify

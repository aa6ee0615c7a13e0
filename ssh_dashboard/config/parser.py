"""SSH config file parser.

Reads ~/.ssh/config and extracts connectable host definitions.
"""

import logging
from pathlib import Path

from ssh_dashboard.models import SSHHost
from ssh_dashboard.utils.paths import expand_path

logger = logging.getLogger(__name__)

# Keys copied into a host block; everything else is ignored
_HOST_KEYS = {
    "hostname": "hostname",
    "user": "user",
    "port": "port",
    "identityfile": "identity_file",
}


class SSHConfigParser:
    """Parser for SSH config files.

    Reads SSH config format and extracts host definitions. Wildcard
    blocks (``Host *``, ``Host web-?``) are never returned.
    """

    def __init__(
        self,
        config_path: Path | str | None = None,
        home: Path | None = None,
    ):
        """Initialize SSH config parser.

        Args:
            config_path: Path to SSH config file (default: ~/.ssh/config)
            home: Home directory for ``~/`` expansion (default: current user's)
        """
        if config_path is None:
            config_path = (home or Path.home()) / ".ssh" / "config"

        self.config_path = Path(config_path)
        self.home = home

    def parse(self) -> list[SSHHost]:
        """Parse SSH config and return host definitions.

        A host declared twice keeps the position of its first block and
        the values of its last block.

        Returns:
            Hosts in file order

        Raises:
            OSError: If the config file cannot be read
        """
        try:
            content = self.config_path.read_text()
            logger.debug("Reading SSH config from %s", self.config_path)
        except OSError as e:
            logger.error("Cannot read SSH config %s: %s", self.config_path, e)
            raise

        hosts: dict[str, SSHHost] = {}
        current_name: str | None = None
        current_data: dict[str, str] = {}

        for lineno, raw in enumerate(content.splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            parts = line.split()
            if len(parts) < 2:
                logger.debug("Skipping malformed line %d in %s: %r", lineno, self.config_path, line)
                continue

            key = parts[0].lower()
            value = " ".join(parts[1:])

            if key == "host":
                self._flush(hosts, current_name, current_data)
                current_name = value
                current_data = {}
                continue

            if current_name is None or key not in _HOST_KEYS:
                continue

            if key == "identityfile":
                value = expand_path(value, self.home)
            current_data[_HOST_KEYS[key]] = value

        # Save last host
        self._flush(hosts, current_name, current_data)

        logger.info("Parsed %d hosts from %s", len(hosts), self.config_path)
        return list(hosts.values())

    @staticmethod
    def _flush(
        hosts: dict[str, SSHHost],
        name: str | None,
        data: dict[str, str],
    ) -> None:
        """Add a finished block to ``hosts`` unless it is a pattern."""
        if name is None:
            return
        host = SSHHost(name=name, **data)
        if host.is_pattern:
            logger.debug("Skipping pattern block: %s", name)
            return
        if name in hosts:
            logger.debug("Host %s declared again, later block wins", name)
        hosts[name] = host

"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 5.0
MIN_INTERVAL = 0.01
MAX_INTERVAL = 3600.0


def validate_interval(seconds: float) -> float | None:
    """Check an update interval against the allowed range.

    Args:
        seconds: Requested interval

    Returns:
        The interval if within range, otherwise None
    """
    if seconds < MIN_INTERVAL or seconds > MAX_INTERVAL:
        return None
    return seconds


@dataclass
class Settings:
    """Application settings from environment.

    Holds the process-wide inputs (home directory, agent socket, current
    user) so components receive them explicitly instead of reading the
    environment themselves.
    """

    # Environment inputs
    home: Path | None = field(default=None)
    agent_path: str | None = field(default=None)
    current_user: str = field(default="")

    # Dashboard
    interval: float = field(default=DEFAULT_INTERVAL)
    status_command: str = field(default="uptime")

    # Connection
    known_hosts_path: Path | None = field(default=None)
    connect_timeout: float = field(default=10.0)

    # Logging
    log_level: str = field(default="WARNING")
    log_colors: bool = field(default=True)

    def __post_init__(self) -> None:
        if self.known_hosts_path is None and self.home is not None:
            self.known_hosts_path = self.home / ".ssh" / "known_hosts"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables.

        Returns:
            Settings instance with values from environment
        """
        home = cls._get_home()
        known_hosts = os.getenv("SSH_DASHBOARD_KNOWN_HOSTS", "").strip()

        return cls(
            home=home,
            agent_path=os.getenv("SSH_AUTH_SOCK") or None,
            current_user=os.getenv("USER", ""),
            interval=cls._get_interval(),
            status_command=os.getenv("SSH_DASHBOARD_COMMAND", "uptime"),
            known_hosts_path=Path(os.path.expanduser(known_hosts)) if known_hosts else None,
            connect_timeout=cls._get_float("SSH_DASHBOARD_CONNECT_TIMEOUT", 10.0),
            log_level=os.getenv("SSH_DASHBOARD_LOG_LEVEL", "WARNING").upper(),
            log_colors=cls._get_bool("SSH_DASHBOARD_LOG_COLORS", True),
        )

    @staticmethod
    def _get_home() -> Path | None:
        try:
            return Path.home()
        except (RuntimeError, KeyError):
            logger.warning("Cannot resolve home directory")
            return None

    @staticmethod
    def _get_float(key: str, default: float) -> float:
        """Get float from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or invalid

        Returns:
            Float value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return float(value)
        except ValueError:
            logger.warning("Invalid float for %s: %s, using default %s", key, value, default)
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @classmethod
    def _get_interval(cls) -> float:
        """Get update interval from SSH_DASHBOARD_INTERVAL with range check."""
        seconds = cls._get_float("SSH_DASHBOARD_INTERVAL", DEFAULT_INTERVAL)
        if validate_interval(seconds) is None:
            logger.warning(
                "SSH_DASHBOARD_INTERVAL must be between %s and %s, got %s. Using default: %s",
                MIN_INTERVAL,
                MAX_INTERVAL,
                seconds,
                DEFAULT_INTERVAL,
            )
            return DEFAULT_INTERVAL
        return seconds

"""Configuration module for SSH Dashboard.

Provides focused classes for different configuration concerns:
- Config: Main configuration class (aggregates all components)
- SSHConfigParser: Parses ~/.ssh/config files
- HostKeyVerifier: Verifies host keys against known_hosts
- Settings: Environment variable configuration
"""

from ssh_dashboard.config.host_keys import HostKeyVerifier
from ssh_dashboard.config.main import Config
from ssh_dashboard.config.parser import SSHConfigParser
from ssh_dashboard.config.settings import Settings

__all__ = ["Config", "SSHConfigParser", "HostKeyVerifier", "Settings"]

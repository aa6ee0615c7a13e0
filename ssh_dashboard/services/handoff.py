"""Replace the dashboard process with an interactive ssh client."""

import logging
import os
import shutil
import sys
from typing import NoReturn

from ssh_dashboard.errors import HandoffError, SSHNotFoundError

logger = logging.getLogger(__name__)


def exec_ssh(host_name: str, ssh_binary: str = "ssh") -> NoReturn:
    """Exec ``ssh <host_name>`` in place of the current process.

    The environment is passed through unchanged. Only call this after
    every session has been closed; nothing after it runs on success.

    Args:
        host_name: Host alias from the SSH config
        ssh_binary: Client executable to look up on PATH

    Raises:
        SSHNotFoundError: If the client is not on PATH
        HandoffError: If exec fails
    """
    ssh_path = shutil.which(ssh_binary)
    if ssh_path is None:
        raise SSHNotFoundError(host_name, ssh_binary)

    logger.info("Handing off to %s %s", ssh_path, host_name)
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        os.execve(ssh_path, [ssh_binary, host_name], os.environ)
    except OSError as e:
        raise HandoffError(host_name, str(e)) from e
    # os.execve does not return on success
    raise HandoffError(host_name, "exec returned unexpectedly")

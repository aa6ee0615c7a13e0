"""Concurrent status polling across hosts."""

import asyncio
import logging

from ssh_dashboard.errors import DashboardError, ExecError
from ssh_dashboard.models import HostStatus, SSHHost
from ssh_dashboard.services.connection import ConnectionManager

logger = logging.getLogger(__name__)


async def poll_host(
    manager: ConnectionManager,
    host: SSHHost,
    command: str,
) -> HostStatus:
    """Open a session, run the status command and close the session.

    Per-host failures are recorded on the returned status, never raised.

    Args:
        manager: Connection manager used to open the session
        host: Host to poll
        command: Status command to run

    Returns:
        HostStatus for this tick
    """
    try:
        async with await manager.open(host) as session:
            result = await session.execute_command(command)
    except ExecError as e:
        return HostStatus(name=host.name, output=e.output, error=str(e))
    except (DashboardError, OSError) as e:
        logger.warning("Polling %s failed: %s", host.name, e)
        return HostStatus(name=host.name, error=str(e))

    return HostStatus(name=host.name, output=result.output)


async def poll_hosts(
    manager: ConnectionManager,
    hosts: list[SSHHost],
    command: str,
) -> dict[str, HostStatus]:
    """Poll multiple hosts concurrently.

    Args:
        manager: Connection manager used to open sessions
        hosts: Hosts to poll
        command: Status command to run on each

    Returns:
        Dict of {host name: HostStatus}, in host order
    """
    if not hosts:
        return {}

    results = await asyncio.gather(*(poll_host(manager, host, command) for host in hosts))
    return {status.name: status for status in results}

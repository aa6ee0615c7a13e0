"""Live status table and host picker."""

import asyncio
import logging
import sys
from collections.abc import Callable
from typing import TextIO

from rich import box
from rich.console import Console
from rich.live import Live
from rich.table import Table
from rich.text import Text

from ssh_dashboard.models import HostStatus, SSHHost
from ssh_dashboard.services.connection import ConnectionManager
from ssh_dashboard.services.monitor import poll_hosts

logger = logging.getLogger(__name__)


class Dashboard:
    """Polls hosts every interval and renders their latest status."""

    def __init__(
        self,
        manager: ConnectionManager,
        hosts: list[SSHHost],
        interval: float,
        command: str,
        console: Console | None = None,
    ) -> None:
        self.manager = manager
        self.hosts = hosts
        self.interval = interval
        self.command = command
        self.console = console or Console()
        self.statuses: dict[str, HostStatus] = {}

    async def tick(self, live: Live | None = None) -> None:
        """Poll every host once and redraw."""
        self.statuses.update(await poll_hosts(self.manager, self.hosts, self.command))
        if live is not None:
            live.update(self.render(), refresh=True)

    async def run(self, max_ticks: int | None = None) -> dict[str, HostStatus]:
        """Poll until cancelled (Ctrl-C) or ``max_ticks`` polls have run."""
        logger.info(
            "Starting dashboard (hosts=%d, interval=%ss, command=%r)",
            len(self.hosts),
            self.interval,
            self.command,
        )
        ticks = 0
        with Live(self.render(), console=self.console, auto_refresh=False) as live:
            while max_ticks is None or ticks < max_ticks:
                await self.tick(live)
                ticks += 1
                if max_ticks is None or ticks < max_ticks:
                    await asyncio.sleep(self.interval)
        return self.statuses

    def render(self) -> Table:
        table = Table(
            box=box.SIMPLE_HEAVY,
            expand=True,
            title=f"SSH Dashboard  (every {self.interval:g}s, Ctrl-C to choose a host)",
        )
        table.add_column("", no_wrap=True, width=2)
        table.add_column("Host", no_wrap=True, overflow="ellipsis")
        table.add_column("Updated", no_wrap=True)
        table.add_column("Status", ratio=1)

        for host in self.hosts:
            status = self.statuses.get(host.name)
            if status is None:
                table.add_row(".", Text(host.name), "", Text("waiting", style="dim"))
                continue
            mark = Text("ok", style="green") if status.ok else Text("!!", style="bold red")
            output = status.output.strip()
            body = Text(output)
            if status.error:
                error = Text(status.error, style="red")
                body = Text("\n").join([error, body]) if output else error
            table.add_row(mark, Text(host.name), status.updated_at.strftime("%H:%M:%S"), body)
        return table


def choose_host(
    hosts: list[SSHHost],
    input_fn: Callable[[str], str] = input,
    out: TextIO | None = None,
) -> str | None:
    """Ask the user which host to connect to.

    Accepts a list number or a host name; an empty answer or EOF quits.

    Returns:
        Selected host name, or None to exit without connecting
    """
    out = out or sys.stdout
    names = [h.name for h in hosts]
    for i, name in enumerate(names, start=1):
        out.write(f"  {i:>2}) {name}\n")
    out.flush()

    while True:
        try:
            answer = input_fn("Connect to host (number or name, empty to quit): ").strip()
        except EOFError:
            return None
        if not answer:
            return None
        if answer in names:
            return answer
        if answer.isdigit() and 1 <= int(answer) <= len(names):
            return names[int(answer) - 1]
        out.write(f"Unknown host: {answer}\n")

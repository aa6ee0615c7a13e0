"""Entry point for ssh-dashboard."""

import argparse
import asyncio
import logging
import sys

from ssh_dashboard.config import Config, Settings
from ssh_dashboard.config.settings import DEFAULT_INTERVAL, validate_interval
from ssh_dashboard.dashboard import Dashboard, choose_host
from ssh_dashboard.errors import HandoffError, SSHNotFoundError
from ssh_dashboard.services.handoff import exec_ssh
from ssh_dashboard.utils.console import configure_logging
from ssh_dashboard.version import BUILD_DATE, GIT_COMMIT, GIT_TAG, full_version

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ssh-dashboard",
        description="Monitor the hosts in ~/.ssh/config and connect to one.",
    )
    parser.add_argument(
        "-n",
        "--interval",
        type=float,
        default=0.0,
        help="Update interval in seconds (default: 5, or SSH_DASHBOARD_INTERVAL env var)",
    )
    parser.add_argument("--host", default="", help="Connect directly to specified host from SSH config")
    parser.add_argument("-v", "--version", action="store_true", help="Show version information")
    return parser


def print_version() -> None:
    print(f"ssh-dashboard version {full_version()}")
    print(f"  git commit: {GIT_COMMIT}")
    print(f"  build date: {BUILD_DATE}")
    print(f"  git tag:    {GIT_TAG}")


def resolve_interval(cli_value: float, settings: Settings) -> float:
    """Pick the update interval.

    A positive CLI value always replaces the environment; when it is out of
    range the default is used.
    """
    if cli_value > 0:
        validated = validate_interval(cli_value)
        if validated is not None:
            return validated
        logger.warning("Ignoring out-of-range --interval %s", cli_value)
        return DEFAULT_INTERVAL
    return settings.interval


def main(argv: list[str] | None = None) -> int:
    """Run the dashboard, then hand off to ssh for the chosen host.

    Returns:
        Process exit status (on successful handoff this never returns)
    """
    args = build_parser().parse_args(argv)

    if args.version:
        print_version()
        return 0

    config = Config.from_env()
    settings = config.settings
    configure_logging(settings.log_level, settings.log_colors)
    interval = resolve_interval(args.interval, settings)

    try:
        hosts = config.get_hosts()
    except OSError as e:
        print(f"Error parsing SSH config: {e}", file=sys.stderr)
        return 1

    if not hosts:
        print("No hosts found in SSH config", file=sys.stderr)
        return 1

    if args.host:
        selected = config.get_host(args.host)
        if selected is None:
            print(f"Host '{args.host}' not found in SSH config", file=sys.stderr)
            return 1
        hosts = [selected]

    try:
        config.host_keys.ensure_store()
    except OSError as e:
        print(f"Error creating known_hosts file {config.host_keys.known_hosts_path}: {e}", file=sys.stderr)
        return 1

    dashboard = Dashboard(
        manager=config.create_manager(),
        hosts=hosts,
        interval=interval,
        command=settings.status_command,
    )
    try:
        asyncio.run(dashboard.run())
    except KeyboardInterrupt:
        # Sessions are closed by the cancelled poll tasks before this point
        print()

    host_name = choose_host(hosts)
    if host_name is None:
        return 0

    try:
        exec_ssh(host_name)
    except SSHNotFoundError as e:
        print(f"Error finding ssh: {e}", file=sys.stderr)
        return 1
    except HandoffError as e:
        print(f"Error executing ssh: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

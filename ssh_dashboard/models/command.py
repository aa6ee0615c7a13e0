"""Command execution data models."""

from dataclasses import dataclass


@dataclass
class CommandResult:
    """Result of a remote command execution.

    ``output`` holds stdout and stderr merged in arrival order.
    """

    output: str
    exit_status: int

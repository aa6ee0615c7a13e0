"""Per-host polling status."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class HostStatus:
    """Outcome of one poll of one host."""

    name: str
    output: str = ""
    error: str | None = None
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def ok(self) -> bool:
        """True if the status command ran and exited cleanly."""
        return self.error is None

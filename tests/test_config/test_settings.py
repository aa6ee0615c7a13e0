"""Tests for Settings environment parsing."""

from pathlib import Path

import pytest

from ssh_dashboard.config.settings import DEFAULT_INTERVAL, Settings, validate_interval


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in [
        "SSH_AUTH_SOCK",
        "SSH_DASHBOARD_INTERVAL",
        "SSH_DASHBOARD_COMMAND",
        "SSH_DASHBOARD_KNOWN_HOSTS",
        "SSH_DASHBOARD_CONNECT_TIMEOUT",
        "SSH_DASHBOARD_LOG_LEVEL",
        "SSH_DASHBOARD_LOG_COLORS",
    ]:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USER", "tester")


def test_defaults(tmp_path: Path) -> None:
    """Unset environment gives documented defaults."""
    settings = Settings.from_env()

    assert settings.home == tmp_path
    assert settings.agent_path is None
    assert settings.current_user == "tester"
    assert settings.interval == DEFAULT_INTERVAL
    assert settings.status_command == "uptime"
    assert settings.known_hosts_path == tmp_path / ".ssh" / "known_hosts"
    assert settings.connect_timeout == 10.0
    assert settings.log_level == "WARNING"
    assert settings.log_colors is True


def test_reads_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Environment variables override defaults."""
    monkeypatch.setenv("SSH_AUTH_SOCK", "/tmp/agent.sock")
    monkeypatch.setenv("SSH_DASHBOARD_INTERVAL", "2.5")
    monkeypatch.setenv("SSH_DASHBOARD_COMMAND", "free -m")
    monkeypatch.setenv("SSH_DASHBOARD_KNOWN_HOSTS", "~/trust/hosts")
    monkeypatch.setenv("SSH_DASHBOARD_CONNECT_TIMEOUT", "3")
    monkeypatch.setenv("SSH_DASHBOARD_LOG_LEVEL", "debug")
    monkeypatch.setenv("SSH_DASHBOARD_LOG_COLORS", "false")

    settings = Settings.from_env()

    assert settings.agent_path == "/tmp/agent.sock"
    assert settings.interval == 2.5
    assert settings.status_command == "free -m"
    assert settings.known_hosts_path == tmp_path / "trust" / "hosts"
    assert settings.connect_timeout == 3.0
    assert settings.log_level == "DEBUG"
    assert settings.log_colors is False


def test_empty_agent_socket_is_none(monkeypatch: pytest.MonkeyPatch) -> None:
    """An empty SSH_AUTH_SOCK counts as unset."""
    monkeypatch.setenv("SSH_AUTH_SOCK", "")
    assert Settings.from_env().agent_path is None


@pytest.mark.parametrize("value", ["0", "0.001", "3601", "-1", "fast"])
def test_invalid_interval_falls_back(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    """Out-of-range or unparsable intervals use the default."""
    monkeypatch.setenv("SSH_DASHBOARD_INTERVAL", value)
    assert Settings.from_env().interval == DEFAULT_INTERVAL


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0.01, 0.01), (5.0, 5.0), (3600.0, 3600.0), (0.0, None), (3600.5, None)],
)
def test_validate_interval(seconds: float, expected: float | None) -> None:
    assert validate_interval(seconds) == expected


def test_known_hosts_follows_home() -> None:
    """known_hosts_path is derived from home when not given."""
    settings = Settings(home=Path("/home/alice"))
    assert settings.known_hosts_path == Path("/home/alice/.ssh/known_hosts")

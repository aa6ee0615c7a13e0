"""Tests for the Config aggregate."""

from pathlib import Path
from unittest.mock import patch

from ssh_dashboard.config import Config, Settings
from ssh_dashboard.services import ConnectionManager


def _config(tmp_path: Path, text: str) -> Config:
    ssh_dir = tmp_path / ".ssh"
    ssh_dir.mkdir()
    (ssh_dir / "config").write_text(text)
    settings = Settings(
        home=tmp_path,
        agent_path="/tmp/agent.sock",
        current_user="tester",
        connect_timeout=4.0,
    )
    return Config.from_settings(settings)


def test_components_use_settings_paths(tmp_path: Path) -> None:
    config = _config(tmp_path, "")

    assert config.parser.config_path == tmp_path / ".ssh" / "config"
    assert config.host_keys.known_hosts_path == tmp_path / ".ssh" / "known_hosts"


def test_get_hosts_is_cached(tmp_path: Path) -> None:
    """Config file is parsed once."""
    config = _config(tmp_path, "Host a\nHost b\n")

    with patch.object(config.parser, "parse", wraps=config.parser.parse) as parse:
        first = config.get_hosts()
        second = config.get_hosts()

    assert [h.name for h in first] == ["a", "b"]
    assert first is second
    parse.assert_called_once()


def test_get_host_by_name(tmp_path: Path) -> None:
    config = _config(tmp_path, "Host a\n  HostName a.example\nHost b\n")

    assert config.get_host("a").hostname == "a.example"
    assert config.get_host("missing") is None


def test_create_manager_wires_settings(tmp_path: Path) -> None:
    config = _config(tmp_path, "")

    manager = config.create_manager()

    assert isinstance(manager, ConnectionManager)
    assert manager.current_user == "tester"
    assert manager.connect_timeout == 4.0
    assert manager.host_keys is config.host_keys
    assert manager.authenticator.agent_path == "/tmp/agent.sock"
    assert manager.authenticator.home == tmp_path

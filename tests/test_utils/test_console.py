"""Tests for the colorful log formatter."""

import logging

from ssh_dashboard.utils.console import ColorfulFormatter, configure_logging


def _record(name: str, level: int, msg: str, *args: object) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, args, None)


def test_plain_format_columns() -> None:
    formatter = ColorfulFormatter(use_colors=False)
    line = formatter.format(
        _record("ssh_dashboard.services.connection", logging.INFO, "Opening %s", "box")
    )

    parts = [p.strip() for p in line.split("|")]
    assert parts[1] == "INFO"
    assert parts[2] == "services.connection"
    assert parts[3] == "Opening box"
    assert "\033[" not in line


def test_colors_highlight_addresses() -> None:
    formatter = ColorfulFormatter(use_colors=True)
    line = formatter.format(
        _record("ssh_dashboard.services.connection", logging.WARNING, "to alice@box.example:22")
    )

    assert "\033[95malice@box.example:22\033[0m" in line


def test_configure_logging_installs_single_handler() -> None:
    package_logger = logging.getLogger("ssh_dashboard")
    saved = list(package_logger.handlers)
    package_logger.handlers = []
    try:
        configure_logging("debug", use_colors=False)
        configure_logging("info", use_colors=False)

        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.INFO
        assert logging.getLogger("asyncssh").level == logging.WARNING
    finally:
        package_logger.handlers = saved
        package_logger.propagate = True

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from snapper.logging_config import configure_logging, resolve_level


@pytest.fixture()
def restore_root_logger():
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield root_logger
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)


def test_configure_logging_mirrors_console_to_file(tmp_path: Path, capsys, restore_root_logger) -> None:
    log_file = tmp_path / "logs" / "scan.txt"

    configure_logging(level="INFO", log_file=log_file)
    scan_logger = logging.getLogger("snapper.scan")
    scan_logger.info("Position 0,0 - block found")
    scan_logger.info("Windows scanned    : %d", 30)
    scan_logger.debug("hidden")
    for handler in restore_root_logger.handlers:
        handler.flush()

    out = capsys.readouterr().out
    assert out == "Position 0,0 - block found\nWindows scanned    : 30\n"
    assert log_file.read_text(encoding="utf-8") == out


@pytest.mark.parametrize("level, expected", [("debug", logging.DEBUG), ("WARNING", logging.WARNING), (logging.ERROR, logging.ERROR)])
def test_resolve_level_accepts_names_and_numbers(level, expected: int) -> None:
    assert resolve_level(level) == expected


def test_unknown_level_is_rejected(restore_root_logger) -> None:
    with pytest.raises(ValueError, match="Unknown logging level"):
        configure_logging(level="LOUD")

"""Tests pour la configuration loguru."""

import pytest
from loguru import logger

from epiorg.logging_config import configure_logging, is_epiorg_record, level_for_verbosity


class TestLevelForVerbosity:
    @pytest.mark.parametrize(
        "verbose,quiet,expected",
        [
            (0, False, "WARNING"),
            (1, False, "INFO"),
            (2, False, "DEBUG"),
            (5, False, "DEBUG"),
            (2, True, "ERROR"),
        ],
    )
    def test_levels(self, verbose, quiet, expected):
        assert level_for_verbosity(verbose, quiet) == expected

    def test_custom_default(self):
        assert level_for_verbosity(0, False, default="INFO") == "INFO"


class TestIsEpiorgRecord:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("epiorg", True),
            ("epiorg.services.reconciler", True),
            ("epiorgx", False),
            ("rich.console", False),
            (None, False),
        ],
    )
    def test_filter(self, name, expected):
        assert is_epiorg_record({"name": name}) is expected


class TestConfigureLogging:
    def test_writes_json_file_for_package_records(self, tmp_path):
        log_file = tmp_path / "logs" / "epiorg.log"
        try:
            handler_ids = configure_logging(log_level="ERROR", log_file=log_file)
            logger.info("message hors package")
            logger.complete()
        finally:
            logger.remove()

        assert len(handler_ids) == 2
        content = log_file.read_text(encoding="utf-8")
        assert "Logging configure" in content
        assert '"name": "epiorg.logging_config"' in content
        assert "message hors package" not in content

    def test_console_only(self, tmp_path):
        try:
            handler_ids = configure_logging(log_level="INFO", log_file=None)
        finally:
            logger.remove()

        assert len(handler_ids) == 1
        assert list(tmp_path.iterdir()) == []

"""
Unit Tests — Logging Configuration
==================================
Level-name resolution and handler installation.
"""
import logging

import pytest

from reviewer.utils.logging_config import resolve_level, setup_logging


class TestResolveLevel:

    @pytest.mark.parametrize("name, expected", [
        ("DEBUG", logging.DEBUG),
        ("warning", logging.WARNING),
        ("ERROR", logging.ERROR),
    ])
    def test_known_names(self, name, expected):
        assert resolve_level(name) == expected

    @pytest.mark.parametrize("name", ["FOO", "", "Level 5"])
    def test_unknown_name_falls_back_to_info(self, name):
        assert resolve_level(name) == logging.INFO

    def test_custom_default(self):
        assert resolve_level("VERBOSE", default=logging.WARNING) == logging.WARNING


class TestSetupLogging:

    def test_unknown_level_name_does_not_raise(self, tmp_path):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging(level=resolve_level("FOO"), log_dir=str(tmp_path))
            assert root.level == logging.INFO
            assert logging.getLogger("reviewer").level == logging.INFO
            assert list(tmp_path.iterdir())
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
                handler.close()
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)

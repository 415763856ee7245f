"""Tests for utilities/logger.py module."""

import logging
from typing import Any

import pytest

from good_codegen.utilities.logger import (
    DEFAULT_FORMAT,
    PACKAGE_LOGGER,
    configure_library_logging,
    level_for_verbosity,
)


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    original_level = logger.level
    yield logger
    logger.setLevel(original_level)


class TestConfigureLibraryLogging:
    """Tests for configure_library_logging helper."""

    def test_configures_basic_logging_when_no_handlers(self, monkeypatch, package_logger):
        root_logger = logging.getLogger()
        original_handlers = list(root_logger.handlers)
        root_logger.handlers = []

        captured_kwargs: dict[str, Any] = {}

        def fake_basic_config(**kwargs):
            captured_kwargs.update(kwargs)

        monkeypatch.setattr(logging, "basicConfig", fake_basic_config)

        try:
            configure_library_logging(level=logging.DEBUG, format="%(message)s", foo="bar")
        finally:
            root_logger.handlers = original_handlers

        assert captured_kwargs == {
            "level": logging.DEBUG,
            "format": "%(message)s",
            "foo": "bar",
        }

    def test_keeps_existing_handlers(self, monkeypatch, package_logger):
        root_logger = logging.getLogger()
        handler = logging.NullHandler()
        root_logger.addHandler(handler)

        called = False

        def fake_basic_config(**kwargs):
            nonlocal called
            called = True

        monkeypatch.setattr(logging, "basicConfig", fake_basic_config)

        try:
            result = configure_library_logging(level=logging.WARNING)
        finally:
            root_logger.removeHandler(handler)

        assert called is False
        # the package level is still applied
        assert result is package_logger
        assert package_logger.level == logging.WARNING

    def test_defaults_are_respected_when_invoked(self, monkeypatch, package_logger):
        root_logger = logging.getLogger()
        original_handlers = list(root_logger.handlers)
        root_logger.handlers = []

        captured_kwargs: dict[str, Any] = {}

        def fake_basic_config(**kwargs):
            captured_kwargs.update(kwargs)

        monkeypatch.setattr(logging, "basicConfig", fake_basic_config)

        try:
            configure_library_logging()
        finally:
            root_logger.handlers = original_handlers

        assert captured_kwargs == {"level": logging.INFO, "format": DEFAULT_FORMAT}
        assert package_logger.level == logging.INFO


@pytest.mark.parametrize(
    ("verbose", "level"),
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
)
def test_level_for_verbosity(verbose, level):
    assert level_for_verbosity(verbose) == level


def test_render_logs_through_package_logger(caplog):
    from good_codegen.templating import render, t

    with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
        render(t("{{ x }}", x=lambda: "later"))

    assert "Rendering template with 1 placeholders" in caplog.text
    assert "Deferred placeholder produced str" in caplog.text

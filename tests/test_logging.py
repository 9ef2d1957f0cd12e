from __future__ import annotations

import logging

import structlog

from pingstatus.logging import configure_logging, get_logger


def test_configure_logging_sets_root_level() -> None:
    configure_logging(level="DEBUG")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    get_logger(__name__).info("structured log test")


def test_configure_logging_unknown_level_defaults_to_info() -> None:
    configure_logging(level="chatty", environment="production")

    assert logging.getLogger().level == logging.INFO

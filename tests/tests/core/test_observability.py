#!/usr/bin/env python3
import logging

import pytest
import structlog

from schemakit.core.observability import configure_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def test_configure_logging_sets_package_level():
    configure_logging("debug")
    assert logging.getLogger("schemakit").level == logging.DEBUG
    configure_logging("WARNING", json_format=True)
    assert logging.getLogger("schemakit").level == logging.WARNING


def test_configure_logging_json_renderer():
    configure_logging("INFO", json_format=True)
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)


def test_unknown_level_rejected():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("LOUD")

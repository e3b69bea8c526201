"""Shared fixtures for jenkins-plugin-cli tests."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from jenkins_plugin_cli.core.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by configure_logging between tests."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)

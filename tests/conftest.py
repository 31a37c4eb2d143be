"""Shared fixtures."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_tinysql_logger() -> Iterator[None]:
    """Drop handlers the CLI installs so they don't outlive CliRunner's streams."""
    yield
    logger = logging.getLogger("tinysql")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)

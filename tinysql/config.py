"""Runtime settings and logging setup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class DuplicateTablePolicy(Enum):
    """What CREATE TABLE does when the table name is already taken."""

    REPLACE = "replace"  # drop the old definition and its rows
    ERROR = "error"


@dataclass(frozen=True)
class Settings:
    """Execution settings shared by a session."""

    on_duplicate_table: DuplicateTablePolicy = DuplicateTablePolicy.REPLACE


def configure_logging(verbose: bool = False) -> None:
    """Send tinysql log records to stderr.

    WARNING and above by default; DEBUG when verbose.
    """
    logger = logging.getLogger("tinysql")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

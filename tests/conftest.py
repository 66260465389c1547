from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.work_tree import WorkTreeBuilder


@pytest.fixture
def work_tree(tmp_path: Path) -> WorkTreeBuilder:
    """Provide a reusable source tree builder rooted at the pytest tmp_path."""
    return WorkTreeBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_joborg_logger():
    """Drop handlers installed by CLI runs so they do not outlive captured streams."""
    yield
    logger = logging.getLogger("joborg")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True

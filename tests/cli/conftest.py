"""CLI test fixtures."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path):
    """Keep the user's global config out of CLI runs."""
    with patch("codeoutline.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "no-global.yaml"):
        yield


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI points log handlers at the runner's streams; drop them afterwards."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

"""
Repository-level pytest configuration.

Keeps local runs predictable: configuration is read from the repo's
config/config.yaml unless the caller already points PAGELOADER_CONFIG
somewhere else, and logging is set up from that configuration.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from pageloader.global_config import init_logger


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _default_env(project_root: Path) -> Generator[None, None, None]:
    """Set environment defaults if not already provided by the user/CI."""
    defaults = {
        "PAGELOADER_CONFIG": str(project_root / "config" / "config.yaml"),
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    init_logger()
    yield

# SPDX-License-Identifier: MIT
"""Shared pytest fixtures for all test directories."""

from __future__ import annotations

from typing import Generator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo any structlog configuration a test (or the CLI) applied."""
    yield
    structlog.reset_defaults()

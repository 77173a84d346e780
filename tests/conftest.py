"""Shared pytest fixtures."""

import pytest

import pgtrigram as pt


@pytest.fixture(autouse=True)
def _fresh_backend():
    """Every test starts with backend state re-read from the environment."""
    pt.reset_backend()
    yield
    pt.reset_backend()

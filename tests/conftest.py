"""Shared pytest fixtures for acme_http_solver tests."""

from __future__ import annotations

import os

import pytest

from tests.fakes import FakeResourceStore


@pytest.fixture
def fake_store() -> FakeResourceStore:
    """Provide an empty in-memory resource store."""
    return FakeResourceStore()


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset environment variables for each test."""
    for key in list(os.environ.keys()):
        if key.startswith("ACME_SOLVER_"):
            monkeypatch.delenv(key, raising=False)

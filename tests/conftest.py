"""Shared pytest fixtures for plotspecs tests."""

from __future__ import annotations

import pytest

from plotspecs.config_helpers import LINEWIDTH_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test without ambient pyproject/env configuration."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(LINEWIDTH_ENV_VAR, raising=False)
    return tmp_path

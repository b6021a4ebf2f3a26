"""Shared pytest fixtures for the keymask test suite."""

from __future__ import annotations

import os
from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from keymask.config import get_settings
from keymask.server.app import create_app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run every test without ambient KEYMASK_* variables or .env files."""

    for key in list(os.environ):
        if key.startswith("KEYMASK_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def app() -> Generator[FastAPI, None, None]:
    """Create a new FastAPI app instance for each test and reset overrides."""

    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app) -> TestClient:
    """Return a test client bound to the FastAPI app."""

    return TestClient(app)

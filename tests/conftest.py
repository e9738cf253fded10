"""Root conftest: shared fixtures for all tests.

Provides:
- Autouse reset of the shared GitHub HTTP client singleton
"""

from __future__ import annotations

import pytest

import gh_activity.services.github.http_client as http_client_module


@pytest.fixture(autouse=True)
def _reset_github_client():
    """Never let a test reuse another test's shared HTTP client."""
    original = http_client_module._client
    http_client_module._client = None
    yield
    http_client_module._client = original

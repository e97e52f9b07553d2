"""Pytest configuration and shared fixtures."""

from datetime import UTC, datetime

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def at():
    """Build an aware datetime from epoch milliseconds."""

    def _at(millis: int) -> datetime:
        return datetime.fromtimestamp(millis / 1000, tz=UTC)

    return _at

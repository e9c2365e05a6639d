"""Shared test fixtures."""

from datetime import timedelta

import pytest


@pytest.fixture
def year():
    return timedelta(days=365)


@pytest.fixture
def week():
    return timedelta(days=7)

"""
Pytest configuration and shared fixtures.

Every test gets its own SQLite file, so Database handles never share state.
"""

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests, no database")
    config.addinivalue_line("markers", "db: uses a throwaway SQLite database")


@pytest.fixture
def database_url(tmp_path):
    """URL of a fresh, empty SQLite database file."""
    return f"sqlite+aiosqlite:///{tmp_path / 'recruiter_test.db'}"

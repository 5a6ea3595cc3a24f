"""Shared pytest fixtures for all tests"""

import pytest
from clickup_mcp.config import Settings


@pytest.fixture
def mock_settings():
    """Settings carrying environment-tier credentials"""
    return Settings(api_key="pk_test_api_key_12345", team_id="9001")


@pytest.fixture
def no_credentials_settings():
    """Settings with no credentials at any tier"""
    return Settings(api_key=None, team_id=None)


@pytest.fixture
def base_url(mock_settings):
    """Base URL for API requests"""
    return str(mock_settings.base_url).rstrip("/")

"""
Pytest configuration and fixtures
"""

import pytest
import sys
import os
from unittest.mock import Mock

import requests

# Add project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tests.test_config import configure_test_environment

configure_test_environment()


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Reset the test environment before each test"""
    configure_test_environment()


def make_response(body=None, status_code=200, json_error=None):
    """Build a mock requests.Response returning body from .json()"""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def mock_session():
    """Mock HTTP session answering every POST with an empty result"""
    session = Mock(spec=requests.Session)
    session.post.return_value = make_response({"jsonrpc": "2.0", "id": 1, "result": []})
    return session


@pytest.fixture
def mock_channel():
    """Mock gRPC channel; unary_unary returns a fresh Mock callable per method"""
    channel = Mock()
    channel.unary_unary.side_effect = lambda *args, **kwargs: Mock()
    return channel

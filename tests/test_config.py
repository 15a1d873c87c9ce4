"""
Test configuration for the Jito SDK tests
"""

import os
from unittest.mock import patch

import pytest
from dotenv import load_dotenv

from jito_sdk.config import Config

# Load environment variables
load_dotenv()

# Test configuration
TEST_CONFIG = {
    'JITO_BLOCK_ENGINE_URL': 'https://block-engine.test/api/v1',
    'JITO_UUID': '',
    'JITO_GRPC_URL': '',

    # gRPC settings
    'JITO_GRPC_CONNECT_TIMEOUT_SECONDS': 1,
    'JITO_GRPC_READY_TIMEOUT_SECONDS': 0.1,

    # Retry settings keep the production schedule
    'JITO_RETRY_MAX_ATTEMPTS': 5,
    'JITO_RETRY_BASE_DELAY_MS': 100,
    'JITO_RETRY_MULTIPLIER': 2.0,

    'LOG_LEVEL': 'DEBUG',
}


def configure_test_environment():
    """Configure environment for testing"""
    for key, value in TEST_CONFIG.items():
        os.environ[key] = str(value)
    os.environ.pop('JITO_HTTP_TIMEOUT_SECONDS', None)


class TestConfig:
    """Test configuration loading"""

    def test_defaults_from_test_environment(self):
        config = Config()
        assert config.BLOCK_ENGINE_URL == 'https://block-engine.test/api/v1'
        assert config.UUID is None
        assert config.GRPC_URL is None
        assert config.HTTP_TIMEOUT_SECONDS is None

    def test_values_read_on_each_access(self):
        config = Config()
        with patch.dict(os.environ, {'JITO_UUID': 'abc', 'JITO_HTTP_TIMEOUT_SECONDS': '2.5'}):
            assert config.UUID == 'abc'
            assert config.HTTP_TIMEOUT_SECONDS == 2.5
        assert config.UUID is None

    def test_grpc_connection_params(self):
        with patch.dict(os.environ, {'JITO_GRPC_URL': 'https://grpc.test', 'JITO_UUID': 'abc'}):
            params = Config().get_grpc_connection_params()
        assert params['url'] == 'https://grpc.test'
        assert params['uuid'] == 'abc'
        assert params['keepalive_time_ms'] == 30000
        assert params['keepalive_timeout_ms'] == 20000
        assert params['max_message_length'] == 4194304

    def test_retry_params_convert_milliseconds(self):
        params = Config().get_retry_params()
        assert params == {'max_attempts': 5, 'base_delay': 0.1, 'multiplier': 2.0}

    def test_production_connect_timeout_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert Config().GRPC_CONNECT_TIMEOUT_SECONDS == 10
            assert Config().BLOCK_ENGINE_URL == 'https://mainnet.block-engine.jito.wtf/api/v1'

    def test_to_dict(self):
        data = Config().to_dict()
        assert 'BLOCK_ENGINE_URL' in data
        assert 'RETRY_MAX_ATTEMPTS' in data
        assert 'to_dict' not in data

    def test_malformed_number_names_variable(self):
        with patch.dict(os.environ, {'JITO_RETRY_MAX_ATTEMPTS': 'x'}):
            with pytest.raises(ValueError, match="JITO_RETRY_MAX_ATTEMPTS must be a number, got 'x'"):
                Config().get_retry_params()

    def test_empty_number_uses_default(self):
        with patch.dict(os.environ, {'JITO_GRPC_KEEPALIVE_TIME_MS': ''}):
            assert Config().GRPC_KEEPALIVE_TIME_MS == 30000

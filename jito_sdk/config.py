import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


def _env_number(name: str, default, cast):
    value = os.getenv(name)
    if value is None or value == '':
        return default
    try:
        return cast(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


def _optional_float(name: str) -> Optional[float]:
    return _env_number(name, None, float)


class Config:
    # Block engine endpoints
    @property
    def BLOCK_ENGINE_URL(self) -> str:
        return os.getenv('JITO_BLOCK_ENGINE_URL', 'https://mainnet.block-engine.jito.wtf/api/v1')

    @property
    def UUID(self) -> Optional[str]:
        return os.getenv('JITO_UUID') or None

    @property
    def GRPC_URL(self) -> Optional[str]:
        return os.getenv('JITO_GRPC_URL') or None

    # HTTP Configuration
    @property
    def HTTP_TIMEOUT_SECONDS(self) -> Optional[float]:
        return _optional_float('JITO_HTTP_TIMEOUT_SECONDS')

    # gRPC Configuration
    @property
    def GRPC_CONNECT_TIMEOUT_SECONDS(self) -> float:
        return _env_number('JITO_GRPC_CONNECT_TIMEOUT_SECONDS', 10, float)

    @property
    def GRPC_READY_TIMEOUT_SECONDS(self) -> float:
        return _env_number('JITO_GRPC_READY_TIMEOUT_SECONDS', 1, float)

    @property
    def GRPC_KEEPALIVE_TIME_MS(self) -> int:
        return _env_number('JITO_GRPC_KEEPALIVE_TIME_MS', 30000, int)

    @property
    def GRPC_KEEPALIVE_TIMEOUT_MS(self) -> int:
        return _env_number('JITO_GRPC_KEEPALIVE_TIMEOUT_MS', 20000, int)

    @property
    def GRPC_MAX_MESSAGE_LENGTH(self) -> int:
        return _env_number('JITO_GRPC_MAX_MESSAGE_LENGTH', 4194304, int)  # 4MB

    # Retry Configuration
    @property
    def RETRY_MAX_ATTEMPTS(self) -> int:
        return _env_number('JITO_RETRY_MAX_ATTEMPTS', 5, int)

    @property
    def RETRY_BASE_DELAY_MS(self) -> int:
        return _env_number('JITO_RETRY_BASE_DELAY_MS', 100, int)

    @property
    def RETRY_MULTIPLIER(self) -> float:
        return _env_number('JITO_RETRY_MULTIPLIER', 2.0, float)

    # Logging Configuration
    @property
    def LOG_LEVEL(self) -> str:
        return os.getenv('LOG_LEVEL', 'INFO')

    @property
    def LOG_FORMAT(self) -> str:
        return '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def get_grpc_connection_params(self) -> dict:
        return {
            'url': self.GRPC_URL,
            'connect_timeout_seconds': self.GRPC_CONNECT_TIMEOUT_SECONDS,
            'ready_timeout_seconds': self.GRPC_READY_TIMEOUT_SECONDS,
            'keepalive_time_ms': self.GRPC_KEEPALIVE_TIME_MS,
            'keepalive_timeout_ms': self.GRPC_KEEPALIVE_TIMEOUT_MS,
            'max_message_length': self.GRPC_MAX_MESSAGE_LENGTH,
            'uuid': self.UUID,
        }

    def get_retry_params(self) -> dict:
        return {
            'max_attempts': self.RETRY_MAX_ATTEMPTS,
            'base_delay': self.RETRY_BASE_DELAY_MS / 1000.0,
            'multiplier': self.RETRY_MULTIPLIER,
        }

    def to_dict(self) -> dict:
        return {
            attr: getattr(self, attr)
            for attr in dir(self)
            if attr.isupper() and not callable(getattr(self, attr))
        }

    def __str__(self) -> str:
        return f"Config(BLOCK_ENGINE_URL={self.BLOCK_ENGINE_URL}, GRPC_URL={self.GRPC_URL})"

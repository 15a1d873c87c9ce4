"""
gRPC Client Base for the Jito SDK

This module holds the connection handling shared by gRPC clients: channel
creation with keepalive settings, readiness checks, the per-handle lock and
the bounded retry around unary calls.
"""

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple
from urllib.parse import urlsplit

import grpc

from ..config import Config
from ..errors import ChannelNotReadyError, EndpointConnectionError, JitoSdkError, ResponseParseError
from ..retry import RetryPolicy

logger = logging.getLogger(__name__)


@dataclass
class ConnectionConfig:
    """Configuration for gRPC connection"""
    url: str
    connect_timeout_seconds: float = 10
    ready_timeout_seconds: float = 1
    keepalive_time_ms: int = 30000
    keepalive_timeout_ms: int = 20000
    max_message_length: int = 4 * 1024 * 1024  # 4MB
    uuid: Optional[str] = None

    @classmethod
    def from_config(cls, config: Optional[Config] = None, url: Optional[str] = None) -> 'ConnectionConfig':
        params = (config or Config()).get_grpc_connection_params()
        if url:
            params['url'] = url
        return cls(**params)


def parse_target(url: str) -> Tuple[str, bool]:
    """Split a gRPC URL into a host:port target and whether TLS is used.

    https URLs get TLS and default to port 443; http URLs and bare
    host:port addresses are insecure and default to port 80.
    """
    if not isinstance(url, str) or not url.strip():
        raise EndpointConnectionError("gRPC URL must be a non-empty string")

    candidate = url.strip()
    if '://' not in candidate:
        candidate = f"http://{candidate}"

    parts = urlsplit(candidate)
    if parts.scheme not in ('http', 'https') or not parts.hostname:
        raise EndpointConnectionError(f"Invalid gRPC URL: {url}")

    try:
        port = parts.port
    except ValueError as e:
        raise EndpointConnectionError(f"Invalid gRPC URL: {url}: {e}") from e

    secure = parts.scheme == 'https'
    host = parts.hostname
    if ':' in host:
        host = f"[{host}]"
    return f"{host}:{port or (443 if secure else 80)}", secure


class GrpcClientBase(ABC):
    """Base class for gRPC clients.

    One instance owns one channel. Calls through an instance are serialized
    by a lock; use several instances for concurrent requests.
    """

    service_name = "grpc"

    def __init__(self, config: ConnectionConfig, retry_policy: Optional[RetryPolicy] = None, channel=None):
        self.config = config
        self.retry_policy = retry_policy or RetryPolicy()
        self.channel = channel
        self._lock = threading.Lock()

        if self.channel is None:
            self._connect()

        self.stub = self._create_stub()

    def _channel_options(self) -> list:
        return [
            ('grpc.max_send_message_length', self.config.max_message_length),
            ('grpc.max_receive_message_length', self.config.max_message_length),
            ('grpc.keepalive_time_ms', self.config.keepalive_time_ms),
            ('grpc.keepalive_timeout_ms', self.config.keepalive_timeout_ms),
            ('grpc.keepalive_permit_without_calls', 1),
        ]

    def _connect(self):
        """Establish gRPC connection"""
        target, secure = parse_target(self.config.url)
        options = self._channel_options()

        if secure:
            channel = grpc.secure_channel(target, grpc.ssl_channel_credentials(), options=options)
        else:
            # Insecure connection (local relays and development)
            channel = grpc.insecure_channel(target, options=options)

        ready = grpc.channel_ready_future(channel)
        try:
            ready.result(timeout=self.config.connect_timeout_seconds)
        except grpc.FutureTimeoutError as e:
            ready.cancel()
            channel.close()
            logger.error(f"Failed to connect to {self.service_name} at {target}")
            raise EndpointConnectionError(
                f"Failed to connect to {self.config.url}: not ready after {self.config.connect_timeout_seconds}s"
            ) from e

        self.channel = channel
        logger.info(f"Connected to {self.service_name} at {target}")

    @abstractmethod
    def _create_stub(self):
        """Create gRPC stub for specific service"""
        pass

    def _channel_ready(self) -> bool:
        ready = grpc.channel_ready_future(self.channel)
        try:
            ready.result(timeout=self.config.ready_timeout_seconds)
            return True
        except grpc.FutureTimeoutError:
            ready.cancel()
            return False

    def _metadata(self) -> Optional[Tuple[Tuple[str, str], ...]]:
        if self.config.uuid:
            return (('uuid', self.config.uuid),)
        return None

    def _execute_with_retry(self, rpc_name: str, request: Any, parse: Callable[[Any], Any]) -> Any:
        """Execute a unary call with readiness checks and retry, then parse the response.

        Parsing happens once, after a successful call; a parse failure is
        raised as ResponseParseError and never retried.
        """
        rpc = getattr(self.stub, rpc_name)
        description = f"{self.service_name}/{rpc_name}"

        def attempt():
            if not self._channel_ready():
                raise ChannelNotReadyError(f"{self.service_name} channel is not ready")
            return rpc(request, metadata=self._metadata())

        with self._lock:
            response = self.retry_policy.run(attempt, description=description)

        try:
            return parse(response)
        except JitoSdkError:
            raise
        except Exception as e:
            logger.error(f"Failed to parse {description} response: {e}")
            raise ResponseParseError(f"Failed to parse {description} response: {e}") from e

    def close(self):
        """Close gRPC connection"""
        if self.channel:
            self.channel.close()
            logger.info(f"Closed connection to {self.service_name}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

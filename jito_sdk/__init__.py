"""
Jito SDK

Client for the Jito block engine: tip accounts, bundle submission and bundle
status over JSON-RPC/HTTP or gRPC.
"""

from .config import Config
from .errors import (
    ErrorCategory,
    JitoSdkError,
    EndpointConnectionError,
    ChannelNotReadyError,
    RemoteCallError,
    ResponseShapeError,
    ResponseParseError,
    PreconditionError,
    GrpcNotEnabledError,
    BundleValidationError,
    BundleValidationErrorType,
)
from .grpc_clients import SearcherClient, ConnectionConfig
from .pretty import PrettyJsonValue
from .retry import RetryPolicy
from .rpc_client import JsonRpcClient
from .sdk import JitoJsonRpcSDK, select_random_tip_account
from .validation import validate_bundle_params, MAX_BUNDLE_TRANSACTIONS

__version__ = "0.1.0"

__all__ = [
    # SDK
    'JitoJsonRpcSDK',
    'JsonRpcClient',
    'SearcherClient',
    'ConnectionConfig',
    'Config',
    'RetryPolicy',
    'PrettyJsonValue',

    # Helpers
    'select_random_tip_account',
    'validate_bundle_params',
    'MAX_BUNDLE_TRANSACTIONS',

    # Errors
    'ErrorCategory',
    'JitoSdkError',
    'EndpointConnectionError',
    'ChannelNotReadyError',
    'RemoteCallError',
    'ResponseShapeError',
    'ResponseParseError',
    'PreconditionError',
    'GrpcNotEnabledError',
    'BundleValidationError',
    'BundleValidationErrorType',
]

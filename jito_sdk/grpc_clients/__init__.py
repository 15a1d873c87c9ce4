"""
gRPC Client Package for the Jito SDK

This package provides the gRPC transport for the block engine searcher
service.
"""

from .grpc_client import GrpcClientBase, ConnectionConfig, parse_target
from .searcher_client import SearcherClient, decode_transaction, packet_from_transaction

__all__ = [
    # Core interfaces
    'GrpcClientBase',
    'ConnectionConfig',
    'parse_target',

    # Searcher client
    'SearcherClient',
    'decode_transaction',
    'packet_from_transaction',
]

"""
Searcher gRPC Client Implementation

Client for the block engine searcher service: tip accounts and bundle
submission over gRPC.
"""

import base64
import binascii
import logging
from typing import Any, Dict, Iterable, List, Optional, Union

import base58
from google.protobuf import json_format

from ..config import Config
from ..errors import BundleValidationError, BundleValidationErrorType, ResponseShapeError
from ..retry import RetryPolicy
from ..validation import as_transaction_list, validate_bundle_params
from .grpc_client import ConnectionConfig, GrpcClientBase
from .protos import (
    SEARCHER_SERVICE,
    Bundle,
    GetTipAccountsRequest,
    Meta,
    Packet,
    SearcherServiceStub,
    SendBundleRequest,
)

logger = logging.getLogger(__name__)

Transaction = Union[bytes, bytearray, str]

SUPPORTED_ENCODINGS = ('base64', 'base58')


def decode_transaction(tx: Transaction, encoding: str = 'base64') -> bytes:
    """Return the raw bytes of a serialized transaction"""
    if isinstance(tx, (bytes, bytearray)):
        return bytes(tx)

    if not isinstance(tx, str):
        raise BundleValidationError(
            BundleValidationErrorType.INVALID_ENCODING,
            f"Transaction must be bytes or an encoded string, got {type(tx).__name__}"
        )

    if encoding not in SUPPORTED_ENCODINGS:
        raise BundleValidationError(
            BundleValidationErrorType.INVALID_ENCODING,
            f"Unsupported transaction encoding: {encoding}"
        )

    try:
        if encoding == 'base58':
            return base58.b58decode(tx)
        return base64.b64decode(tx, validate=True)
    except (ValueError, binascii.Error) as e:
        raise BundleValidationError(
            BundleValidationErrorType.INVALID_ENCODING,
            f"Transaction is not valid {encoding}: {e}"
        ) from e


def packet_from_transaction(tx: Transaction, encoding: str = 'base64') -> Packet:
    data = decode_transaction(tx, encoding)
    return Packet(data=data, meta=Meta(size=len(data)))


def _to_dict(response) -> Dict[str, Any]:
    return json_format.MessageToDict(response, preserving_proto_field_name=True)


def _parse_tip_accounts(response) -> List[str]:
    accounts = _to_dict(response).get('accounts', [])
    return [str(account) for account in accounts]


def _parse_bundle_uuid(response) -> str:
    bundle_uuid = _to_dict(response).get('uuid')
    if not bundle_uuid:
        raise ResponseShapeError("SendBundle response is missing the bundle uuid")
    return bundle_uuid


class SearcherClient(GrpcClientBase):
    """gRPC client for the block engine searcher service"""

    service_name = SEARCHER_SERVICE

    @classmethod
    def connect(cls, url: str, config: Optional[Config] = None, uuid: Optional[str] = None) -> 'SearcherClient':
        """Connect to a searcher endpoint using settings from Config"""
        config = config or Config()
        connection_config = ConnectionConfig.from_config(config, url=url)
        if uuid is not None:
            connection_config.uuid = uuid
        return cls(connection_config, retry_policy=RetryPolicy.from_config(config))

    def _create_stub(self):
        return SearcherServiceStub(self.channel)

    def get_tip_accounts(self) -> List[str]:
        """Get the tip accounts advertised by the block engine"""
        accounts = self._execute_with_retry('GetTipAccounts', GetTipAccountsRequest(), _parse_tip_accounts)
        logger.debug(f"Received {len(accounts)} tip accounts")
        return accounts

    def send_bundle(self, transactions: Iterable[Transaction], encoding: str = 'base64') -> str:
        """Submit a bundle and return its uuid.

        Transactions are raw bytes or strings in the given encoding; each one
        becomes a single packet.
        """
        transactions = as_transaction_list(transactions)
        validate_bundle_params([transactions])

        packets = [packet_from_transaction(tx, encoding) for tx in transactions]
        request = SendBundleRequest(bundle=Bundle(packets=packets))

        logger.info(f"Sending bundle with {len(packets)} transactions")
        bundle_uuid = self._execute_with_retry('SendBundle', request, _parse_bundle_uuid)
        logger.info(f"Bundle sent, uuid: {bundle_uuid}")
        return bundle_uuid

"""
Jito block engine SDK

JitoJsonRpcSDK wraps the JSON-RPC transport and, once enabled, a gRPC
searcher client. JSON-RPC methods return the decoded response body as-is;
gRPC methods reshape their results into the same {"result": ...} envelope
so callers can treat both paths alike.
"""

import logging
import random
from typing import Any, Iterable, List, Optional
from urllib.parse import quote

import requests

from .config import Config
from .errors import GrpcNotEnabledError, PreconditionError, ResponseShapeError
from .grpc_clients import SearcherClient
from .pretty import PrettyJsonValue
from .rpc_client import JsonRpcClient
from .validation import as_transaction_list, validate_bundle_params

logger = logging.getLogger(__name__)

BUNDLES_ENDPOINT = "/bundles"


def bundles_endpoint(uuid: Optional[str] = None) -> str:
    """Return the bundles path, with the attribution id as a query parameter when given"""
    if uuid:
        return f"{BUNDLES_ENDPOINT}?uuid={quote(uuid, safe='')}"
    return BUNDLES_ENDPOINT


def select_random_tip_account(response: Any, rng: Optional[random.Random] = None) -> str:
    """Pick one tip account uniformly at random from a tip-accounts response"""
    tip_accounts = response.get("result") if isinstance(response, dict) else None
    if not isinstance(tip_accounts, list):
        raise ResponseShapeError("Failed to parse tip accounts as array")

    if not tip_accounts:
        raise ResponseShapeError("No tip accounts available")

    account = (rng or random).choice(tip_accounts)
    if not isinstance(account, str):
        raise ResponseShapeError("Failed to parse tip account as string")
    return account


class JitoJsonRpcSDK:
    """Client for the block engine bundles API"""

    def __init__(self, base_url: str, uuid: Optional[str] = None,
                 session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None,
                 config: Optional[Config] = None):
        self.base_url = base_url
        self.uuid = uuid
        self.config = config or Config()
        self.rpc = JsonRpcClient(base_url, session=session, timeout=timeout)
        self.grpc_url: Optional[str] = None
        self.grpc_client: Optional[SearcherClient] = None

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> 'JitoJsonRpcSDK':
        """Create an SDK from environment configuration, enabling gRPC when configured"""
        config = config or Config()
        sdk = cls(
            config.BLOCK_ENGINE_URL,
            uuid=config.UUID,
            timeout=config.HTTP_TIMEOUT_SECONDS,
            config=config,
        )
        if config.GRPC_URL:
            sdk.enable_grpc(config.GRPC_URL)
        return sdk

    # JSON-RPC methods

    def _send_request(self, endpoint: str, method: str, params: Optional[Any] = None) -> Any:
        return self.rpc.send_request(endpoint, method, params)

    def get_tip_accounts(self) -> Any:
        return self._send_request(bundles_endpoint(self.uuid), "getTipAccounts")

    def get_random_tip_account(self) -> str:
        return select_random_tip_account(self.get_tip_accounts())

    def get_bundle_statuses(self, bundle_uuids: List[str]) -> Any:
        """Query the status of previously submitted bundles"""
        if isinstance(bundle_uuids, (str, bytes, bytearray)) or not isinstance(bundle_uuids, Iterable):
            raise PreconditionError("bundle_uuids must be a list of bundle ids")
        params = [list(bundle_uuids)]
        return self._send_request(bundles_endpoint(self.uuid), "getBundleStatuses", params)

    def send_bundle(self, params: Optional[Any] = None, uuid: Optional[str] = None) -> Any:
        """Submit a bundle; params is [serialized_txs, options].

        The uuid argument is attached to this request only and does not fall
        back to the SDK's attribution id. Params are validated before any
        network activity.
        """
        validate_bundle_params(params)
        return self._send_request(bundles_endpoint(uuid), "sendBundle", params)

    @staticmethod
    def prettify(value: Any) -> PrettyJsonValue:
        return PrettyJsonValue(value)

    # gRPC methods

    @property
    def grpc_enabled(self) -> bool:
        return self.grpc_client is not None

    def enable_grpc(self, grpc_url: str) -> SearcherClient:
        """Connect a searcher gRPC client to grpc_url and use it for *_grpc methods"""
        client = SearcherClient.connect(grpc_url, config=self.config, uuid=self.uuid)
        self.attach_grpc_client(client)
        self.grpc_url = grpc_url
        return client

    def attach_grpc_client(self, client: SearcherClient):
        """Use an already connected searcher client for *_grpc methods"""
        if self.grpc_client is not None and self.grpc_client is not client:
            self.grpc_client.close()
        self.grpc_client = client
        self.grpc_url = client.config.url
        logger.info(f"gRPC enabled for {self.grpc_url}")

    def _require_grpc(self) -> SearcherClient:
        if self.grpc_client is None:
            raise GrpcNotEnabledError()
        return self.grpc_client

    def get_tip_accounts_grpc(self) -> dict:
        client = self._require_grpc()
        return {"result": client.get_tip_accounts()}

    def get_random_tip_account_grpc(self) -> str:
        return select_random_tip_account(self.get_tip_accounts_grpc())

    def send_bundle_grpc(self, transactions: Iterable[Any], encoding: str = "base64") -> dict:
        transactions = as_transaction_list(transactions)
        validate_bundle_params([transactions])
        client = self._require_grpc()
        return {"result": client.send_bundle(transactions, encoding=encoding)}

    def close(self):
        if self.grpc_client is not None:
            self.grpc_client.close()
            self.grpc_client = None
        self.rpc.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

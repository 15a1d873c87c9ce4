"""
JSON-RPC over HTTP transport for the block engine API.
"""

import json
import logging
from typing import Any, Optional

import requests

from .errors import RemoteCallError, ResponseParseError

logger = logging.getLogger(__name__)

JSONRPC_VERSION = "2.0"
REQUEST_ID = 1


def build_envelope(method: str, params: Optional[Any] = None) -> dict:
    """Build the JSON-RPC request body; params defaults to an empty array"""
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": REQUEST_ID,
        "method": method,
        "params": [] if params is None else params,
    }


class JsonRpcClient:
    """Long-lived HTTP session posting JSON-RPC envelopes to a base URL"""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def send_request(self, endpoint: str, method: str, params: Optional[Any] = None) -> Any:
        """POST a JSON-RPC call and return the decoded response body unmodified"""
        url = f"{self.base_url}{endpoint}"
        data = build_envelope(method, params)

        logger.debug(f"Sending request to: {url}")
        logger.debug(f"Request body: {json.dumps(data, indent=2)}")

        try:
            response = self.session.post(
                url,
                json=data,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise RemoteCallError(f"Request error: {e}") from e

        logger.debug(f"Response status: {response.status_code}")

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {url} (HTTP {response.status_code}): {e}")
            raise ResponseParseError(
                f"Failed to parse {method} response (HTTP {response.status_code}): {e}"
            ) from e

        logger.debug(f"Response body: {json.dumps(body, indent=2)}")
        return body

    def close(self):
        self.session.close()

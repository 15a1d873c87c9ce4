"""
Test cases for the JSON-RPC transport
"""

import json

import pytest
import requests
from unittest.mock import Mock

from jito_sdk.errors import RemoteCallError, ResponseParseError
from jito_sdk.rpc_client import JsonRpcClient, build_envelope
from tests.conftest import make_response


class TestBuildEnvelope:
    """Test cases for JSON-RPC envelope construction"""

    def test_envelope_fields(self):
        assert build_envelope("getTipAccounts", [["a"]]) == {
            "jsonrpc": "2.0",
            "id": 1,
            "method": "getTipAccounts",
            "params": [["a"]],
        }

    def test_params_default_to_empty_array(self):
        assert build_envelope("getTipAccounts")["params"] == []


class TestJsonRpcClient:
    """Test cases for JsonRpcClient"""

    @pytest.fixture
    def client(self, mock_session):
        return JsonRpcClient("https://block-engine.test/api/v1/", session=mock_session)

    def test_post_request(self, client, mock_session):
        client.send_request("/bundles", "getTipAccounts")

        mock_session.post.assert_called_once()
        args, kwargs = mock_session.post.call_args
        assert args[0] == "https://block-engine.test/api/v1/bundles"
        assert kwargs["headers"] == {"Content-Type": "application/json"}
        assert kwargs["json"]["method"] == "getTipAccounts"
        assert kwargs["json"]["params"] == []
        assert kwargs["timeout"] is None

    def test_response_returned_unmodified(self, client, mock_session):
        body = {"jsonrpc": "2.0", "id": 1, "error": {"code": -32602, "message": "bad params"}}
        mock_session.post.return_value = make_response(body, status_code=400)

        assert client.send_request("/bundles", "sendBundle", [["tx"]]) == body

    def test_timeout_forwarded(self, mock_session):
        client = JsonRpcClient("https://block-engine.test", session=mock_session, timeout=5)
        client.send_request("/bundles", "getTipAccounts")
        assert mock_session.post.call_args.kwargs["timeout"] == 5

    def test_transport_failure(self, client, mock_session):
        mock_session.post.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(RemoteCallError, match="Request error: connection refused"):
            client.send_request("/bundles", "getTipAccounts")

        # JSON-RPC requests are never retried
        assert mock_session.post.call_count == 1

    def test_invalid_json_body(self, client, mock_session):
        mock_session.post.return_value = make_response(
            status_code=502, json_error=json.JSONDecodeError("Expecting value", "<html>", 0)
        )

        with pytest.raises(ResponseParseError, match="HTTP 502"):
            client.send_request("/bundles", "getTipAccounts")

    def test_default_session(self):
        client = JsonRpcClient("https://block-engine.test")
        assert isinstance(client.session, requests.Session)
        client.close()

    def test_close(self, client, mock_session):
        client.close()
        mock_session.close.assert_called_once()

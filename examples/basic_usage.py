#!/usr/bin/env python3
"""
Basic SDK usage

Fetches tip accounts over JSON-RPC, then enables gRPC and repeats the same
calls through the searcher service.

Usage:
    python basic_usage.py
    python basic_usage.py --grpc-url http://localhost:50051
"""

from __future__ import annotations

import argparse
import logging

from jito_sdk import JitoJsonRpcSDK, JitoSdkError
from jito_sdk.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Jito SDK basic usage")
    parser.add_argument("--base-url", default="https://mainnet.block-engine.jito.wtf/api/v1")
    parser.add_argument("--grpc-url", default="http://localhost:50051")
    args = parser.parse_args()

    setup_logging()

    with JitoJsonRpcSDK(args.base_url) as sdk:
        print("Using JSON-RPC:")
        try:
            print(f"Tip accounts (RPC):\n{sdk.prettify(sdk.get_tip_accounts())}")
            print(f"Random tip account (RPC): {sdk.get_random_tip_account()}")
        except JitoSdkError as e:
            logger.error(f"RPC error: {e}")

        print("\nUsing gRPC:")
        try:
            sdk.enable_grpc(args.grpc_url)
            print(f"Tip accounts (gRPC):\n{sdk.prettify(sdk.get_tip_accounts_grpc())}")
            print(f"Random tip account (gRPC): {sdk.get_random_tip_account_grpc()}")
        except JitoSdkError as e:
            logger.error(f"gRPC error: {e}")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
List tip accounts straight from the searcher gRPC service.

Usage:
    python get_tip_accounts.py [--grpc-url https://mainnet.block-engine.jito.wtf]
"""

from __future__ import annotations

import argparse
import sys

from jito_sdk import JitoSdkError, SearcherClient


def main() -> int:
    parser = argparse.ArgumentParser(description="List block engine tip accounts over gRPC")
    parser.add_argument("--grpc-url", default="https://mainnet.block-engine.jito.wtf")
    args = parser.parse_args()

    try:
        with SearcherClient.connect(args.grpc_url) as client:
            accounts = client.get_tip_accounts()
    except JitoSdkError as e:
        print(f"Failed to get tip accounts: {e}", file=sys.stderr)
        return 1

    print("Tip accounts:")
    for index, account in enumerate(accounts, start=1):
        print(f"{index}. {account}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

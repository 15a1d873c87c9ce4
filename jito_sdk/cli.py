#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import Config
from .errors import JitoSdkError
from .logging_config import setup_logging
from .sdk import JitoJsonRpcSDK

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _build_sdk(args: argparse.Namespace) -> JitoJsonRpcSDK:
    config = Config()
    sdk = JitoJsonRpcSDK(
        args.base_url or config.BLOCK_ENGINE_URL,
        uuid=args.uuid or config.UUID,
        timeout=config.HTTP_TIMEOUT_SECONDS,
        config=config,
    )
    grpc_url = args.grpc_url or config.GRPC_URL
    if grpc_url:
        sdk.enable_grpc(grpc_url)
    return sdk


def cmd_tip_accounts(sdk: JitoJsonRpcSDK, args: argparse.Namespace) -> None:
    out = sdk.get_tip_accounts_grpc() if sdk.grpc_enabled else sdk.get_tip_accounts()
    print(JitoJsonRpcSDK.prettify(out))


def cmd_random_tip_account(sdk: JitoJsonRpcSDK, args: argparse.Namespace) -> None:
    print(sdk.get_random_tip_account_grpc() if sdk.grpc_enabled else sdk.get_random_tip_account())


def cmd_bundle_statuses(sdk: JitoJsonRpcSDK, args: argparse.Namespace) -> None:
    print(JitoJsonRpcSDK.prettify(sdk.get_bundle_statuses(args.bundle_ids)))


def cmd_send_bundle(sdk: JitoJsonRpcSDK, args: argparse.Namespace) -> None:
    if sdk.grpc_enabled:
        out = sdk.send_bundle_grpc(args.transactions, encoding=args.encoding)
    else:
        out = sdk.send_bundle([args.transactions, {"encoding": args.encoding}], uuid=sdk.uuid)
    print(JitoJsonRpcSDK.prettify(out))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jito-sdk", description="Jito block engine client")
    parser.add_argument("--base-url", help="JSON-RPC base URL (default: JITO_BLOCK_ENGINE_URL)")
    parser.add_argument("--uuid", help="Attribution id attached to requests (default: JITO_UUID)")
    parser.add_argument("--grpc-url", help="Use the gRPC searcher service at this URL")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                        help="Logging level (default: LOG_LEVEL)")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("tip-accounts", help="List tip accounts")
    p.set_defaults(func=cmd_tip_accounts)

    p = sub.add_parser("random-tip-account", help="Print one random tip account")
    p.set_defaults(func=cmd_random_tip_account)

    p = sub.add_parser("bundle-statuses", help="Get statuses of submitted bundles")
    p.add_argument("bundle_ids", nargs="+")
    p.set_defaults(func=cmd_bundle_statuses)

    p = sub.add_parser("send-bundle", help="Submit serialized transactions as a bundle")
    p.add_argument("transactions", nargs="+", help="Encoded signed transactions")
    p.add_argument("--encoding", choices=["base64", "base58"], default="base64")
    p.set_defaults(func=cmd_send_bundle)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        setup_logging(level=args.log_level)
        with _build_sdk(args) as sdk:
            args.func(sdk, args)
    except JitoSdkError as e:
        print(f"[{e.category.value}] {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        # malformed LOG_LEVEL or numeric JITO_* environment values
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

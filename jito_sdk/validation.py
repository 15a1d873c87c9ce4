"""
Bundle parameter validation shared by the JSON-RPC and gRPC paths.
"""

from typing import Any, Iterable

from .errors import BundleValidationError, BundleValidationErrorType

MAX_BUNDLE_TRANSACTIONS = 5


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def validate_bundle_params(params: Any) -> None:
    """Check that params looks like [serialized_txs, options].

    The first element must hold between 1 and MAX_BUNDLE_TRANSACTIONS
    transactions. The transactions themselves and the options are opaque
    and are not inspected.
    """
    if not _is_sequence(params) or len(params) < 1:
        raise BundleValidationError(
            BundleValidationErrorType.INVALID_FORMAT,
            "Invalid bundle format: expected [serialized_txs, options]"
        )

    serialized_txs = params[0]
    if not _is_sequence(serialized_txs):
        raise BundleValidationError(
            BundleValidationErrorType.NOT_AN_ARRAY,
            "First element must be an array of transactions"
        )

    if len(serialized_txs) == 0:
        raise BundleValidationError(
            BundleValidationErrorType.EMPTY_BUNDLE,
            "Bundle must contain at least one transaction"
        )

    if len(serialized_txs) > MAX_BUNDLE_TRANSACTIONS:
        raise BundleValidationError(
            BundleValidationErrorType.TOO_MANY_TRANSACTIONS,
            f"Bundle can contain at most {MAX_BUNDLE_TRANSACTIONS} transactions"
        )


def as_transaction_list(transactions: Any) -> list:
    """Return transactions as a list, rejecting a single str/bytes value.

    A bare string or bytes object is one transaction, not a sequence of
    them, and must not be split into characters.
    """
    if isinstance(transactions, (str, bytes, bytearray)) or not isinstance(transactions, Iterable):
        raise BundleValidationError(
            BundleValidationErrorType.NOT_AN_ARRAY,
            "Transactions must be an array of serialized transactions"
        )
    return list(transactions)

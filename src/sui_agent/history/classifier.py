"""
Turn raw transaction records into human-readable descriptions.

Every heuristic lives in an ordered rule table below; the first matching
rule wins and each table has an explicit fallback.

Line order for one transaction:
    1. balance changes   ("Sent 1.500000000 SUI to 0x1234ab...")
    2. object changes    ("Created 0x2::coin::Coin<...>")
    3. events            ("Token swap")
    4. call operations   ("Called swap_exact_input"), only for the wallet's own transactions
The first line is the primary summary; the rest are secondary details.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

from sui_agent.core.address import AddressError, normalize_address, shorten_address
from sui_agent.core.models import (
    MIST_PER_SUI,
    USDC_UNIT,
    AssetClass,
    BalanceChange,
    CallOperation,
    ClassifiedTransaction,
    ObjectChange,
    TransactionEvent,
    TransactionRecord,
)

SELF_RECIPIENT = "to yourself (same wallet)"
SELF_SENDER = "from yourself (same wallet)"
FALLBACK_SUMMARY = "Blockchain operation"

# ------------------------------------------------------------------
# Rule tables
# ------------------------------------------------------------------

ASSET_RULES: list[tuple[Callable[[str], bool], AssetClass]] = [
    (lambda coin_type: coin_type.endswith("::sui::SUI"), AssetClass.NATIVE),
    (lambda coin_type: "usdc" in coin_type.lower(), AssetClass.STABLECOIN),
]

EVENT_RULES: list[tuple[Callable[[str], bool], str]] = [
    (lambda event_type: "swap" in event_type.lower(), "Token swap"),
    (lambda event_type: "stake" in event_type.lower(), "Staking operation"),
    (lambda event_type: "liquidity" in event_type.lower(), "Liquidity operation"),
    (lambda event_type: "mint" in event_type.lower(), "Token minting"),
    (lambda event_type: "burn" in event_type.lower(), "Token burning"),
]

OBJECT_CHANGE_VERBS: dict[str, str] = {
    "created": "Created",
    "transferred": "Transferred",
    "mutated": "Modified",
    "deleted": "Deleted",
}

# asset class -> (unit scale, decimals, symbol); OTHER renders raw amounts
ASSET_FORMATS: dict[AssetClass, tuple[int, int, str]] = {
    AssetClass.NATIVE: (MIST_PER_SUI, 9, "SUI"),
    AssetClass.STABLECOIN: (USDC_UNIT, 2, "USDC"),
}


def classify_asset(coin_type: str) -> AssetClass:
    """Return the asset class of a coin type string."""
    for predicate, asset_class in ASSET_RULES:
        if predicate(coin_type):
            return asset_class
    return AssetClass.OTHER


def token_name(coin_type: str) -> str:
    """Last path segment of a coin type: '0xabc::cetus::CETUS' -> 'CETUS'."""
    return coin_type.split("::")[-1]


def convert_amount(amount: int, asset_class: AssetClass) -> Decimal:
    """Absolute amount in display units (exact)."""
    if asset_class in ASSET_FORMATS:
        scale = ASSET_FORMATS[asset_class][0]
        return Decimal(abs(amount)) / Decimal(scale)
    return Decimal(abs(amount))


def format_amount(amount: int, coin_type: str) -> str:
    """'2.000000000 SUI', '1.50 USDC' or '500 CETUS'."""
    asset_class = classify_asset(coin_type)
    if asset_class in ASSET_FORMATS:
        _, decimals, symbol = ASSET_FORMATS[asset_class]
        return f"{convert_amount(amount, asset_class):.{decimals}f} {symbol}"
    return f"{abs(amount)} {token_name(coin_type)}"


def _canonical(address: str | None) -> str | None:
    if not address:
        return None
    try:
        return normalize_address(address)
    except AddressError:
        return address


def _same_address(a: str | None, b: str | None) -> bool:
    return a is not None and _canonical(a) == _canonical(b)


# ------------------------------------------------------------------
# Per-category descriptions
# ------------------------------------------------------------------

def external_recipient(record: TransactionRecord, wallet_address: str) -> str | None:
    """First TransferObjects / TransferSui recipient that is not the wallet."""
    for operation in record.call_operations:
        if operation.kind not in ("TransferObjects", "TransferSui"):
            continue
        if operation.recipient and not _same_address(operation.recipient, wallet_address):
            return operation.recipient
    return None


def external_sender(record: TransactionRecord, wallet_address: str) -> str | None:
    if record.sender and not _same_address(record.sender, wallet_address):
        return record.sender
    return None


def describe_balance_change(
    change: BalanceChange,
    wallet_address: str,
    recipient: str | None = None,
    sender: str | None = None,
) -> str | None:
    """Describe one balance change, or None if its owner is unknown."""
    owner = change.owner_address
    if not owner:
        return None

    amount = format_amount(change.amount, change.coin_type)
    if change.amount < 0:
        if recipient:
            return f"Sent {amount} to {shorten_address(recipient)}"
        if _same_address(owner, wallet_address):
            return f"Sent {amount} {SELF_RECIPIENT}"
        return f"Sent {amount} to {shorten_address(owner)}"

    if sender:
        return f"Received {amount} from {shorten_address(sender)}"
    if _same_address(owner, wallet_address):
        return f"Received {amount} {SELF_SENDER}"
    return f"Received {amount} from {shorten_address(owner)}"


def describe_object_change(change: ObjectChange) -> str:
    verb = OBJECT_CHANGE_VERBS.get(change.change_kind)
    if verb is None:
        return f"Object change: {change.change_kind}"
    return f"{verb} {change.object_type or 'object'}"


def describe_event(event: TransactionEvent) -> str:
    for predicate, label in EVENT_RULES:
        if predicate(event.event_type):
            return label
    return f"Event: {event.event_type.split('::')[-1]}"


def _describe_transfer_sui(operation: CallOperation, wallet_address: str) -> str:
    if operation.recipient and not _same_address(operation.recipient, wallet_address):
        return f"TransferSui to {shorten_address(operation.recipient)}"
    if operation.recipient:
        return "TransferSui to yourself"
    return "TransferSui"


CALL_RULES: dict[str, Callable[[CallOperation, str], str]] = {
    "MoveCall": lambda op, _: f"Called {(op.target or 'unknown').split('::')[-1]}",
    "TransferObjects": lambda op, _: "Object transfer",
    "SplitCoins": lambda op, _: "Coin splitting",
    "MergeCoins": lambda op, _: "Coin merging",
    "TransferSui": _describe_transfer_sui,
}


def describe_call(operation: CallOperation, wallet_address: str) -> str:
    rule = CALL_RULES.get(operation.kind)
    if rule is None:
        return f"Operation: {operation.kind}"
    return rule(operation, wallet_address)


# ------------------------------------------------------------------
# Entry point
# ------------------------------------------------------------------

def describe_transaction(record: TransactionRecord, wallet_address: str) -> list[str]:
    """All description lines for a record, in precedence order."""
    recipient = external_recipient(record, wallet_address)
    sender = external_sender(record, wallet_address)

    lines: list[str] = []
    for change in record.balance_changes:
        line = describe_balance_change(change, wallet_address, recipient, sender)
        if line is not None:
            lines.append(line)
    lines.extend(describe_object_change(c) for c in record.object_changes)
    lines.extend(describe_event(e) for e in record.events)
    if _same_address(record.sender, wallet_address):
        lines.extend(describe_call(op, wallet_address) for op in record.call_operations)

    return patch_self_reference(lines, recipient) or [FALLBACK_SUMMARY]


def patch_self_reference(lines: list[str], recipient: str | None) -> list[str]:
    """
    Replace a self-transfer headline with the outside recipient, if any.
    Only the first line is patched; later lines keep their wording.
    """
    if recipient and lines and SELF_RECIPIENT in lines[0]:
        lines = list(lines)
        lines[0] = lines[0].replace(SELF_RECIPIENT, f"to {shorten_address(recipient)}")
    return lines


def classify_transaction(record: TransactionRecord, wallet_address: str) -> ClassifiedTransaction:
    """
    Summarize a transaction from the point of view of `wallet_address`.

    Returns:
        ClassifiedTransaction: primary summary plus secondary details
    """
    lines = describe_transaction(record, wallet_address)
    return ClassifiedTransaction(
        primary_summary=lines[0],
        secondary_details=lines[1:],
        timestamp_ms=record.timestamp_ms,
        status=record.status,
        digest=record.digest,
    )

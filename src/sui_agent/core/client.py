"""
SuiClient: async JSON-RPC client for a Sui fullnode.

Docs: https://docs.sui.io/sui-api-ref
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from sui_agent.core.models import (
    SUI_COIN_TYPE,
    Balance,
    BalanceChange,
    CallOperation,
    ObjectChange,
    OwnedObject,
    TransactionEvent,
    TransactionRecord,
)

logger = logging.getLogger("sui_agent.client")

# Public fullnode endpoints
FULLNODE_URLS: dict[str, str] = {
    "mainnet": "https://fullnode.mainnet.sui.io:443",
    "testnet": "https://fullnode.testnet.sui.io:443",
    "devnet": "https://fullnode.devnet.sui.io:443",
    "localnet": "http://127.0.0.1:9000",
}

# Everything the classifier reads must be requested here.
TRANSACTION_DETAIL_OPTIONS: dict[str, bool] = {
    "showEffects": True,
    "showBalanceChanges": True,
    "showObjectChanges": True,
    "showEvents": True,
    "showInput": True,
}

OBJECT_DETAIL_OPTIONS: dict[str, bool] = {
    "showType": True,
    "showContent": True,
    "showDisplay": True,
}


class SuiClientError(Exception):
    """Raised when the fullnode returns an error or cannot be reached."""
    pass


class SuiClient:
    """
    Async client for the Sui JSON-RPC API.
    Uses the public testnet fullnode by default.

    Usage:
        async with SuiClient() as client:
            balance = await client.get_balance("0x...")

        client = SuiClient(rpc_url=FULLNODE_URLS["mainnet"], timeout=30.0)
    """

    def __init__(
        self,
        rpc_url: str = FULLNODE_URLS["testnet"],
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.rpc_url = rpc_url.rstrip("/")
        self._client = httpx.AsyncClient(
            headers={"Content-Type": "application/json"},
            timeout=timeout,
            transport=transport,
        )
        self._request_id = 0

    # ------------------------------------------------------------------
    # Chain info
    # ------------------------------------------------------------------

    async def get_chain_identifier(self) -> str:
        """Return the chain identifier (first checkpoint digest prefix)."""
        return str(await self._call("sui_getChainIdentifier", []))

    async def get_latest_checkpoint(self) -> int:
        """Return the latest executed checkpoint sequence number."""
        return int(await self._call("sui_getLatestCheckpointSequenceNumber", []))

    # ------------------------------------------------------------------
    # Balance & objects
    # ------------------------------------------------------------------

    async def get_balance(self, address: str, coin_type: str = SUI_COIN_TYPE) -> Balance:
        """
        Return the total balance of one coin type for an address.

        Returns:
            Balance: structured balance in MIST with a SUI convenience property.
        """
        data = await self._call("suix_getBalance", [address, coin_type])
        return Balance(
            address=address,
            coin_type=data.get("coinType", coin_type),
            total_balance_mist=int(data.get("totalBalance", 0)),
            coin_object_count=int(data.get("coinObjectCount", 0)),
        )

    async def get_owned_objects(self, address: str, limit: int = 50) -> list[OwnedObject]:
        """Return objects owned by an address (first page only)."""
        query = {"filter": None, "options": OBJECT_DETAIL_OPTIONS}
        data = await self._call("suix_getOwnedObjects", [address, query, None, limit])
        objects = []
        for item in data.get("data", []):
            obj = item.get("data") or {}
            if not obj.get("objectId"):
                continue
            display = (obj.get("display") or {}).get("data") or {}
            objects.append(OwnedObject(
                object_id=obj["objectId"],
                object_type=obj.get("type"),
                name=display.get("name"),
            ))
        return objects

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    async def query_by_sender(
        self,
        address: str,
        limit: int = 50,
        options: dict[str, bool] | None = None,
        descending: bool = True,
    ) -> list[TransactionRecord]:
        """Return transactions sent by an address, newest first by default."""
        return await self._query_transactions({"FromAddress": address}, limit, options, descending)

    async def query_by_recipient(
        self,
        address: str,
        limit: int = 50,
        options: dict[str, bool] | None = None,
        descending: bool = True,
    ) -> list[TransactionRecord]:
        """Return transactions that sent objects or coins to an address."""
        return await self._query_transactions({"ToAddress": address}, limit, options, descending)

    async def _query_transactions(
        self,
        tx_filter: dict[str, Any],
        limit: int,
        options: dict[str, bool] | None,
        descending: bool,
    ) -> list[TransactionRecord]:
        query = {
            "filter": tx_filter,
            "options": options if options is not None else TRANSACTION_DETAIL_OPTIONS,
        }
        data = await self._call("suix_queryTransactionBlocks", [query, None, limit, descending])
        records = []
        for tx in data.get("data") or []:
            try:
                records.append(parse_transaction(tx))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                digest = tx.get("digest") if isinstance(tx, dict) else None
                logger.warning(f"Skipping unparseable transaction {digest}: {e}")
        return records

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _call(self, method: str, params: list[Any]) -> Any:
        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "id": self._request_id,
            "method": method,
            "params": params,
        }
        try:
            response = await self._client.post(self.rpc_url, json=payload)
        except httpx.HTTPError as e:
            raise SuiClientError(f"RPC request {method} failed: {e}") from e

        if response.status_code != 200:
            raise SuiClientError(
                f"RPC error {response.status_code} for {method}: {response.text}"
            )

        try:
            body = response.json()
        except ValueError as e:
            raise SuiClientError(f"RPC response for {method} was not valid JSON") from e

        if body.get("error"):
            error = body["error"]
            message = error.get("message", error) if isinstance(error, dict) else error
            raise SuiClientError(f"RPC {method} returned an error: {message}")

        logger.debug(f"{method} ok")
        return body.get("result")

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> SuiClient:
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.aclose()


# ------------------------------------------------------------------
# Response parsing
# ------------------------------------------------------------------

def parse_transaction(data: dict[str, Any]) -> TransactionRecord:
    """Build a TransactionRecord from a SuiTransactionBlockResponse dict."""
    tx_data = (data.get("transaction") or {}).get("data") or {}
    status = ((data.get("effects") or {}).get("status") or {}).get("status")
    timestamp = data.get("timestampMs")

    return TransactionRecord(
        digest=data["digest"],
        timestamp_ms=int(timestamp) if timestamp else None,
        status=status,
        sender=tx_data.get("sender"),
        balance_changes=[_parse_balance_change(c) for c in data.get("balanceChanges") or []],
        object_changes=[
            ObjectChange(change_kind=str(c.get("type", "unknown")), object_type=c.get("objectType"))
            for c in data.get("objectChanges") or []
        ],
        events=[
            TransactionEvent(event_type=str(e.get("type", "")))
            for e in data.get("events") or []
        ],
        call_operations=_parse_call_operations(tx_data),
    )


def _parse_balance_change(change: dict[str, Any]) -> BalanceChange:
    return BalanceChange(
        owner_address=_owner_address(change.get("owner")),
        coin_type=str(change.get("coinType", "")),
        amount=int(change.get("amount", 0)),
    )


# Placeholder owner strings some serializers emit for a missing owner
_UNRESOLVED_OWNERS = {"", "null", "undefined"}


def _owner_address(owner: Any) -> str | None:
    if isinstance(owner, str):
        return owner if owner not in _UNRESOLVED_OWNERS else None
    if isinstance(owner, dict):
        for key in ("AddressOwner", "ObjectOwner"):
            if owner.get(key):
                return _owner_address(str(owner[key]))
        return json.dumps(owner, separators=(",", ":"))
    return None


def _parse_call_operations(tx_data: dict[str, Any]) -> list[CallOperation]:
    operations: list[CallOperation] = []

    # Programmable transaction blocks: [{"MoveCall": {...}}, {"TransferObjects": [...]}, ...]
    kind_data = tx_data.get("transaction") or {}
    if kind_data.get("kind") == "ProgrammableTransaction":
        inputs = kind_data.get("inputs") or []
        for command in kind_data.get("transactions") or []:
            if isinstance(command, dict) and command:
                operations.append(_parse_ptb_command(command, inputs))
        return operations

    # Older responses list commands with an explicit "kind"
    for command in tx_data.get("transactions") or []:
        if not isinstance(command, dict) or "kind" not in command:
            continue
        arguments = command.get("arguments") or []
        recipient = None
        if command["kind"] == "TransferSui" and len(arguments) >= 2 and isinstance(arguments[1], str):
            recipient = arguments[1]
        operations.append(CallOperation(
            kind=str(command["kind"]),
            target=command.get("target"),
            recipient=recipient,
        ))
    return operations


def _parse_ptb_command(command: dict[str, Any], inputs: list[dict[str, Any]]) -> CallOperation:
    kind, body = next(iter(command.items()))

    if kind == "MoveCall" and isinstance(body, dict):
        parts = [body.get("package"), body.get("module"), body.get("function")]
        target = "::".join(str(p) for p in parts if p) or None
        return CallOperation(kind=kind, target=target)

    if kind == "TransferObjects" and isinstance(body, list) and len(body) >= 2:
        return CallOperation(kind=kind, recipient=_pure_address(body[1], inputs))

    return CallOperation(kind=str(kind))


def _pure_address(argument: Any, inputs: list[dict[str, Any]]) -> str | None:
    """Resolve an {"Input": i} argument to a pure address input, if it is one."""
    if not isinstance(argument, dict) or "Input" not in argument:
        return None
    index = argument["Input"]
    if not isinstance(index, int) or not 0 <= index < len(inputs):
        return None
    value = inputs[index]
    if not isinstance(value, dict):
        return None
    if value.get("type") == "pure" and value.get("valueType") == "address":
        address = value.get("value")
        return address if isinstance(address, str) else None
    return None

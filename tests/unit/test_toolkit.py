"""Unit tests for SuiToolkit with a mocked RPC client."""

import json
import time
from unittest.mock import AsyncMock, MagicMock

import pytest

from sui_agent.core.client import SuiClientError
from sui_agent.core.models import Balance, BalanceChange, OwnedObject, TransactionRecord
from sui_agent.core.wallet import Wallet
from sui_agent.tools.toolkit import SuiToolkit

WALLET = "0x" + "a" * 64
OTHER = "0x" + "b" * 64


def record(digest, amount, coin_type="0x2::sui::SUI", age_days=0):
    return TransactionRecord(
        digest=digest,
        timestamp_ms=int((time.time() - age_days * 86400) * 1000),
        status="success",
        sender=WALLET,
        balance_changes=[BalanceChange(owner_address=WALLET, coin_type=coin_type, amount=amount)],
    )


def make_client(sent=None, received=None):
    client = MagicMock()
    client.rpc_url = "http://node.test"
    client.query_by_sender = AsyncMock(return_value=sent or [])
    client.query_by_recipient = AsyncMock(return_value=received or [])
    return client


def make_toolkit(client, wallet=WALLET):
    return SuiToolkit(client, Wallet.read_only(wallet) if wallet else None)


# ------------------------------------------------------------------
# History & summary
# ------------------------------------------------------------------

@pytest.mark.asyncio
async def test_history_report():
    client = make_client(sent=[record("TxSent0000001", -2_000_000_000)])
    report = await make_toolkit(client).get_transaction_history("last week")

    assert report.startswith("**Transaction History - last week**")
    assert "Sent 2.000000000 SUI" in report
    assert report.endswith("Showing 1 of 1 total transactions in last week.")
    client.query_by_sender.assert_awaited_once()
    assert client.query_by_sender.await_args.args[0] == WALLET


@pytest.mark.asyncio
async def test_history_window_excludes_old_records():
    client = make_client(sent=[record("Old", -1, age_days=40)])
    report = await make_toolkit(client).get_transaction_history("last month")
    assert report == f"No transaction history found for wallet address: {WALLET}"


@pytest.mark.asyncio
async def test_summary_report():
    client = make_client(
        sent=[record("A", -5_000_000_000), record("U", -1_500_000, coin_type="0xdba3::usdc::USDC")],
        received=[record("B", 3_000_000_000)],
    )
    report = await make_toolkit(client).get_sui_summary()

    assert report.startswith("**SUI & USDC Summary**")
    assert "**Transaction Count:** 3 transactions" in report
    assert "Net Flow: -2.000000000 SUI (loss)" in report
    assert "Total Sent: 1.50 USDC" in report


@pytest.mark.asyncio
async def test_summary_partial_failure_still_reports():
    client = make_client(received=[record("B", 1_000_000_000)])
    client.query_by_sender = AsyncMock(side_effect=SuiClientError("timeout"))
    report = await make_toolkit(client).get_sui_summary("today")
    assert "Total Received: 1.000000000 SUI" in report


@pytest.mark.asyncio
async def test_fetch_failure_becomes_error_text():
    client = make_client()
    client.query_by_sender = AsyncMock(side_effect=SuiClientError("timeout"))
    client.query_by_recipient = AsyncMock(side_effect=SuiClientError("timeout"))
    toolkit = make_toolkit(client)

    history = await toolkit.get_transaction_history()
    summary = await toolkit.get_sui_summary()
    assert history.startswith("Error fetching transaction history:")
    assert history.endswith("Please try again.")
    assert summary.startswith("Error calculating SUI summary:")


@pytest.mark.asyncio
async def test_history_without_wallet():
    result = await make_toolkit(make_client(), wallet=None).get_transaction_history()
    assert "No wallet configured" in result


# ------------------------------------------------------------------
# Account & network
# ------------------------------------------------------------------

@pytest.mark.asyncio
async def test_wallet_balance_defaults_to_wallet():
    client = make_client()
    client.get_balance = AsyncMock(return_value=Balance(address=WALLET, total_balance_mist=1_250_000_000, coin_object_count=2))
    result = await make_toolkit(client).get_wallet_balance("my")

    client.get_balance.assert_awaited_once_with(WALLET)
    assert result["sui"] == pytest.approx(1.25)
    assert result["mist"] == 1_250_000_000
    assert result["summary"] == "SUI: 1.2500 (1250000000 MIST)"


@pytest.mark.asyncio
async def test_owned_objects_truncated():
    client = make_client()
    client.get_owned_objects = AsyncMock(return_value=[
        OwnedObject(object_id=f"0x{i}", object_type="0x2::coin::Coin<0x2::sui::SUI>") for i in range(4)
    ])
    result = await make_toolkit(client).get_owned_objects(OTHER, limit=3)

    client.get_owned_objects.assert_awaited_once_with(OTHER, limit=50)
    assert result["page_count"] == 4
    assert result["page_size"] == 50
    assert len(result["objects"]) == 3
    assert result["truncated"] is True


@pytest.mark.asyncio
async def test_network_info():
    client = make_client()
    client.get_chain_identifier = AsyncMock(return_value="4c78adac")
    client.get_latest_checkpoint = AsyncMock(return_value=9001)
    result = await make_toolkit(client).get_network_info()
    assert result == {
        "network": "testnet",
        "rpc_url": "http://node.test",
        "chain_id": "4c78adac",
        "latest_checkpoint": 9001,
        "wallet": WALLET,
    }


# ------------------------------------------------------------------
# Dispatch
# ------------------------------------------------------------------

@pytest.mark.asyncio
async def test_execute_tool_returns_report_text():
    client = make_client(sent=[record("A", -1_000_000_000)])
    result = await make_toolkit(client).execute_tool("get_sui_summary", {"time_filter": "today"})
    assert result.startswith("**SUI & USDC Summary - today**")


@pytest.mark.asyncio
async def test_execute_tool_json_result():
    client = make_client()
    client.get_balance = AsyncMock(return_value=Balance(address=WALLET, total_balance_mist=0))
    data = json.loads(await make_toolkit(client).execute_tool("get_wallet_balance"))
    assert data["address"] == WALLET
    assert data["mist"] == 0


@pytest.mark.asyncio
async def test_execute_tool_error_is_json():
    client = make_client()
    client.get_chain_identifier = AsyncMock(side_effect=SuiClientError("node down"))
    data = json.loads(await make_toolkit(client).execute_tool("get_network_info", {}))
    assert data == {"error": "node down"}

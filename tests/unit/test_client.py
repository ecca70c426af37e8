"""
Unit tests for SuiClient and fullnode response parsing.

HTTP is served by httpx.MockTransport; no network access.
"""

import json

import httpx
import pytest

from sui_agent.core.client import SuiClient, SuiClientError, parse_transaction

WALLET = "0x" + "a" * 64
OTHER = "0x" + "b" * 64


def make_client(handler):
    return SuiClient("http://node.test", transport=httpx.MockTransport(handler))


def rpc_result(result):
    def handler(request):
        body = json.loads(request.content)
        handler.requests.append(body)
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": result})

    handler.requests = []
    return handler


PTB_RESPONSE = {
    "digest": "9xPtbDigest",
    "timestampMs": "1710000000000",
    "effects": {"status": {"status": "success"}},
    "transaction": {
        "data": {
            "sender": WALLET,
            "transaction": {
                "kind": "ProgrammableTransaction",
                "inputs": [
                    {"type": "pure", "valueType": "u64", "value": "1000"},
                    {"type": "pure", "valueType": "address", "value": OTHER},
                    {"type": "object", "objectType": "sharedObject", "objectId": "0x6"},
                ],
                "transactions": [
                    {"SplitCoins": ["GasCoin", [{"Input": 0}]]},
                    {"TransferObjects": [[{"NestedResult": [0, 0]}], {"Input": 1}]},
                    {"MoveCall": {"package": "0xdee9", "module": "clob_v2", "function": "swap_exact_base_for_quote"}},
                    {"TransferObjects": [[{"Result": 2}], {"Input": 2}]},
                ],
            },
        }
    },
    "balanceChanges": [
        {"owner": {"AddressOwner": WALLET}, "coinType": "0x2::sui::SUI", "amount": "-1000"},
        {"owner": {"ObjectOwner": "0xparent"}, "coinType": "0x2::sui::SUI", "amount": "10"},
        {"owner": {"Shared": {"initial_shared_version": 5}}, "coinType": "0x2::sui::SUI", "amount": "1"},
        {"owner": "Immutable", "coinType": "0x2::sui::SUI", "amount": "2"},
    ],
    "objectChanges": [{"type": "created", "objectType": "0x2::coin::Coin<0x2::sui::SUI>"}],
    "events": [{"type": "0xdee9::clob_v2::OrderFilled"}],
}


# ------------------------------------------------------------------
# Parsing
# ------------------------------------------------------------------

def test_parse_programmable_transaction():
    record = parse_transaction(PTB_RESPONSE)

    assert record.digest == "9xPtbDigest"
    assert record.timestamp_ms == 1_710_000_000_000
    assert record.status == "success"
    assert record.sender == WALLET
    assert [op.kind for op in record.call_operations] == [
        "SplitCoins", "TransferObjects", "MoveCall", "TransferObjects",
    ]
    assert record.call_operations[1].recipient == OTHER
    assert record.call_operations[2].target == "0xdee9::clob_v2::swap_exact_base_for_quote"
    # non-pure input is not an address
    assert record.call_operations[3].recipient is None
    assert record.object_changes[0].change_kind == "created"
    assert record.events[0].event_type == "0xdee9::clob_v2::OrderFilled"


def test_parse_owner_forms():
    owners = [c.owner_address for c in parse_transaction(PTB_RESPONSE).balance_changes]
    assert owners[0] == WALLET
    assert owners[1] == "0xparent"
    assert owners[2] == '{"Shared":{"initial_shared_version":5}}'
    assert owners[3] == "Immutable"
    assert parse_transaction(PTB_RESPONSE).balance_changes[0].amount == -1000


@pytest.mark.parametrize("owner", ["null", "undefined", "", {"AddressOwner": "null"}, None])
def test_placeholder_owners_are_unresolved(owner):
    record = parse_transaction({
        "digest": "placeholder",
        "balanceChanges": [{"owner": owner, "coinType": "0x2::sui::SUI", "amount": "-5"}],
    })
    assert record.balance_changes[0].owner_address is None


def test_non_dict_input_is_not_an_address():
    data = {
        "digest": "odd-inputs",
        "transaction": {"data": {"transaction": {
            "kind": "ProgrammableTransaction",
            "inputs": ["0xnot-a-dict", {"type": "pure", "valueType": "address", "value": 7}],
            "transactions": [
                {"TransferObjects": [[{"Result": 0}], {"Input": 0}]},
                {"TransferObjects": [[{"Result": 0}], {"Input": 1}]},
            ],
        }}},
    }
    operations = parse_transaction(data).call_operations
    assert [op.recipient for op in operations] == [None, None]


def test_parse_legacy_transfer_sui():
    record = parse_transaction({
        "digest": "legacy",
        "transaction": {
            "data": {
                "sender": WALLET,
                "transactions": [
                    {"kind": "TransferSui", "arguments": ["0xcoin", OTHER]},
                    {"kind": "MoveCall", "target": "0x2::pay::split"},
                ],
            }
        },
    })
    assert record.call_operations[0].kind == "TransferSui"
    assert record.call_operations[0].recipient == OTHER
    assert record.call_operations[1].target == "0x2::pay::split"


def test_parse_minimal_response():
    record = parse_transaction({"digest": "bare"})
    assert record.timestamp_ms is None
    assert record.status is None
    assert record.sender is None
    assert record.balance_changes == []
    assert record.call_operations == []


# ------------------------------------------------------------------
# RPC calls
# ------------------------------------------------------------------

@pytest.mark.asyncio
async def test_query_by_sender_request_shape():
    handler = rpc_result({"data": [PTB_RESPONSE], "hasNextPage": False})
    async with make_client(handler) as client:
        records = await client.query_by_sender(WALLET, limit=25)

    assert len(records) == 1
    request = handler.requests[0]
    assert request["method"] == "suix_queryTransactionBlocks"
    query, cursor, limit, descending = request["params"]
    assert query["filter"] == {"FromAddress": WALLET}
    assert query["options"]["showBalanceChanges"] is True
    assert query["options"]["showInput"] is True
    assert cursor is None
    assert limit == 25
    assert descending is True


@pytest.mark.asyncio
async def test_query_by_recipient_filter():
    handler = rpc_result({"data": []})
    async with make_client(handler) as client:
        assert await client.query_by_recipient(WALLET) == []
    assert handler.requests[0]["params"][0]["filter"] == {"ToAddress": WALLET}


@pytest.mark.asyncio
async def test_get_balance():
    handler = rpc_result({"coinType": "0x2::sui::SUI", "coinObjectCount": 2, "totalBalance": "3500000000"})
    async with make_client(handler) as client:
        balance = await client.get_balance(WALLET)

    assert handler.requests[0]["params"] == [WALLET, "0x2::sui::SUI"]
    assert balance.total_balance_mist == 3_500_000_000
    assert balance.coin_object_count == 2
    assert balance.sui == pytest.approx(3.5)


@pytest.mark.asyncio
async def test_get_owned_objects():
    handler = rpc_result({
        "data": [
            {"data": {"objectId": "0x11", "type": "0x2::coin::Coin<0x2::sui::SUI>"}},
            {"data": {"objectId": "0x12", "type": "0xnft::hero::Hero", "display": {"data": {"name": "Hero #1"}}}},
            {"error": {"code": "deleted"}},
        ]
    })
    async with make_client(handler) as client:
        objects = await client.get_owned_objects(WALLET, limit=5)

    assert [o.object_id for o in objects] == ["0x11", "0x12"]
    assert objects[1].name == "Hero #1"
    assert handler.requests[0]["params"][3] == 5


@pytest.mark.asyncio
async def test_chain_info():
    async with make_client(rpc_result("4c78adac")) as client:
        assert await client.get_chain_identifier() == "4c78adac"
    async with make_client(rpc_result("123456")) as client:
        assert await client.get_latest_checkpoint() == 123456


@pytest.mark.asyncio
async def test_rpc_error_payload():
    def handler(request):
        return httpx.Response(200, json={
            "jsonrpc": "2.0", "id": 1,
            "error": {"code": -32602, "message": "Invalid params"},
        })

    async with make_client(handler) as client:
        with pytest.raises(SuiClientError, match="Invalid params"):
            await client.get_balance(WALLET)


@pytest.mark.asyncio
async def test_http_error_status():
    async with make_client(lambda request: httpx.Response(503, text="overloaded")) as client:
        with pytest.raises(SuiClientError, match="503"):
            await client.get_chain_identifier()


@pytest.mark.asyncio
async def test_invalid_json():
    async with make_client(lambda request: httpx.Response(200, text="<html>")) as client:
        with pytest.raises(SuiClientError, match="not valid JSON"):
            await client.get_chain_identifier()


@pytest.mark.asyncio
async def test_connection_error():
    def handler(request):
        raise httpx.ConnectError("connection refused")

    async with make_client(handler) as client:
        with pytest.raises(SuiClientError, match="connection refused"):
            await client.get_latest_checkpoint()


@pytest.mark.asyncio
async def test_unparseable_record_is_skipped(caplog):
    bad = {
        "digest": "BadAmount",
        "balanceChanges": [{"owner": WALLET, "coinType": "0x2::sui::SUI", "amount": "1.5"}],
    }
    page = {"data": [PTB_RESPONSE, bad, {"digest": "Plain", "timestampMs": "1709000000000"}]}
    with caplog.at_level("WARNING", logger="sui_agent.client"):
        async with make_client(rpc_result(page)) as client:
            records = await client.query_by_sender(WALLET)

    assert [r.digest for r in records] == ["9xPtbDigest", "Plain"]
    assert "Skipping unparseable transaction BadAmount" in caplog.text


@pytest.mark.asyncio
async def test_bad_record_does_not_empty_fetch_direction():
    from sui_agent.history.fetcher import LedgerFetcher

    bad = {"digest": "BadTimestamp", "timestampMs": "soon"}
    page = {"data": [PTB_RESPONSE, bad]}
    async with make_client(rpc_result(page)) as client:
        records = await LedgerFetcher(client).fetch(WALLET)

    assert [r.digest for r in records] == ["9xPtbDigest"]

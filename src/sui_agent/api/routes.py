from fastapi import APIRouter, HTTPException, Query, Request

from sui_agent.api.models import (
    BalanceResponse,
    NetworkInfoResponse,
    OwnedObjectsResponse,
    ReportResponse,
)
from sui_agent.core.client import SuiClientError

router = APIRouter(tags=["Wallet"])

TIME_FILTER_QUERY = Query(None, description="e.g. 'today', 'last week', '45 days'")


def get_toolkit(request: Request):
    """Dependency to retrieve the initialized SuiToolkit from app state."""
    toolkit = getattr(request.app.state, "toolkit", None)
    if not toolkit:
        raise HTTPException(status_code=500, detail="toolkit not initialized")
    return toolkit


@router.get("/balance", response_model=BalanceResponse)
async def balance(request: Request, address: str | None = None):
    """SUI balance of `address`, or of the configured wallet."""
    toolkit = get_toolkit(request)
    try:
        return await toolkit.get_wallet_balance(address=address)
    except SuiClientError as e:
        raise HTTPException(status_code=502, detail=str(e)) from None


@router.get("/objects", response_model=OwnedObjectsResponse)
async def owned_objects(request: Request, address: str | None = None, limit: int = Query(10, ge=1, le=50)):
    """Objects owned by `address`, or by the configured wallet."""
    toolkit = get_toolkit(request)
    try:
        return await toolkit.get_owned_objects(address=address, limit=limit)
    except SuiClientError as e:
        raise HTTPException(status_code=502, detail=str(e)) from None


@router.get("/network", response_model=NetworkInfoResponse)
async def network(request: Request):
    toolkit = get_toolkit(request)
    try:
        return await toolkit.get_network_info()
    except SuiClientError as e:
        raise HTTPException(status_code=502, detail=str(e)) from None


@router.get("/history", response_model=ReportResponse)
async def history(request: Request, time_filter: str | None = TIME_FILTER_QUERY):
    """
    Transaction history of the configured wallet.

    Fetch failures are reported inside the text, matching what an agent sees.
    """
    toolkit = get_toolkit(request)
    report = await toolkit.get_transaction_history(time_filter)
    return ReportResponse(report=report, time_filter=time_filter)


@router.get("/summary", response_model=ReportResponse)
async def summary(request: Request, time_filter: str | None = TIME_FILTER_QUERY):
    """SUI / USDC sent, received and net flow of the configured wallet."""
    toolkit = get_toolkit(request)
    report = await toolkit.get_sui_summary(time_filter)
    return ReportResponse(report=report, time_filter=time_filter)

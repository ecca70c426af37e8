"""
API module for the Sui Agent SDK.

Provides FastAPI routes and models for exposing the wallet tools as a REST API.
"""

from sui_agent.api.models import (
    BalanceResponse,
    NetworkInfoResponse,
    OwnedObjectsResponse,
    ReportResponse,
)

__all__ = [
    "BalanceResponse",
    "NetworkInfoResponse",
    "OwnedObjectsResponse",
    "ReportResponse",
]

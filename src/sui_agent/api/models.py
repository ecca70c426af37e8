from pydantic import BaseModel, Field


class ReportResponse(BaseModel):
    """A text report produced for an agent or a human reader."""

    report: str = Field(..., description="Formatted report text")
    time_filter: str | None = Field(None, description="Time filter the report was built for")


class BalanceResponse(BaseModel):
    address: str = Field(..., description="Queried Sui address")
    sui: float = Field(..., description="Balance in SUI")
    mist: int = Field(..., description="Balance in MIST")
    coin_objects: int = Field(0, description="Number of coin objects backing the balance")
    summary: str


class OwnedObjectItem(BaseModel):
    object_id: str
    type: str
    name: str | None = None


class OwnedObjectsResponse(BaseModel):
    address: str
    page_count: int = Field(..., description="Objects on the first page")
    page_size: int = Field(..., description="Maximum objects requested for the page")
    objects: list[OwnedObjectItem]
    truncated: bool = False


class NetworkInfoResponse(BaseModel):
    network: str
    rpc_url: str
    chain_id: str
    latest_checkpoint: int
    wallet: str | None = None

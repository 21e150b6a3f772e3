"""Public routes."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from src.core.constants import DATA_RECEIVED_MESSAGE, GREETING

router = APIRouter()


class DataReceivedResponse(BaseModel):
    """Acknowledgement returned by POST /data."""

    message: str = DATA_RECEIVED_MESSAGE


@router.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse, tags=["Greeting"])
async def read_root() -> str:
    """Plain-text greeting confirming the service and its headers are up."""
    return GREETING


@router.post("/data", response_model=DataReceivedResponse, tags=["Data"])
async def receive_data() -> DataReceivedResponse:
    """
    Acknowledge a data submission.

    The request body is deliberately not declared, so FastAPI never reads or
    validates it and any payload is accepted.
    """
    return DataReceivedResponse()

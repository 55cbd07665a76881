from datetime import datetime, UTC

from fastapi import APIRouter, Depends
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.client.schemas import DbCheckResponse, HealthResponse
from src.shared.database.database import Database

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", utc=datetime.now(UTC))


@router.get("/dbcheck", response_model=DbCheckResponse)
@inject
async def dbcheck(
    db: Database = Depends(Provide[Container.database]),
) -> DbCheckResponse:
    """Round-trip to the database. Failures surface through the generic 500 handler."""
    await db.ping()
    return DbCheckResponse(db="ok")

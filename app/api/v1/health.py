"""Liveness endpoint reporting uptime and whether the users database answers."""

import time
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse

router = APIRouter()

_STARTED_AT = time.monotonic()


@router.get("", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    return HealthResponse(
        environment=settings.APP_ENV,
        timestamp=datetime.now(UTC),
        uptime_seconds=round(time.monotonic() - _STARTED_AT, 3),
        database="connected" if check_db_connected(db) else "disconnected",
    )

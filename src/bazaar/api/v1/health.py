"""
Health check API route
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bazaar.database.session import get_async_session

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("")
async def health_check(db: AsyncSession = Depends(get_async_session)):
    """Report healthy only when the database answers a trivial query."""
    try:
        await db.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError):
        logger.warning("health.database_unavailable", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "unhealthy",
                "database": "unavailable",
                "timestamp": datetime.now().isoformat(),
            },
        )

    return {
        "status": "healthy",
        "database": "connected",
        "timestamp": datetime.now().isoformat(),
    }

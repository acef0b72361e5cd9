"""
Health check API route
"""

from datetime import datetime
from fastapi import APIRouter, HTTPException, Depends
from pymongo.asynchronous.database import AsyncDatabase

from database.connection import get_database

router = APIRouter()

@router.get("/health")
async def health_check(database: AsyncDatabase = Depends(get_database)):
    """Health check - reports whether the database answers a ping"""
    try:
        await database.command("ping")

        return {
            "status": "healthy",
            "timestamp": datetime.utcnow().isoformat(),
            "database": "connected"
        }

    except Exception as e:
        # Only report unhealthy for actual infrastructure issues
        raise HTTPException(status_code=503, detail=f"Health check failed: {str(e)}")

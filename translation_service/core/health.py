"""
Health check utilities
"""
from typing import Dict, Any
from sqlalchemy import text

from translation_service import __version__
from translation_service.core.database import SessionLocal
from translation_service.core.config import settings
from translation_service.core.redis import cache
import logging

logger = logging.getLogger(__name__)


async def check_database() -> Dict[str, Any]:
    """
    Check database connectivity.
    
    Returns:
        Dictionary with status and details
    """
    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
            return {
                "status": "healthy",
                "message": "Database connection successful"
            }
        finally:
            db.close()
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return {
            "status": "unhealthy",
            "message": f"Database connection failed: {str(e)}"
        }


async def check_redis() -> Dict[str, Any]:
    """Check Redis cache state. Redis is optional, so it never fails overall health."""
    if not settings.CACHE_ENABLED:
        return {"status": "disabled", "message": "Redis cache disabled"}
    if cache.is_connected:
        return {"status": "healthy", "message": "Redis connection successful"}
    return {"status": "unhealthy", "message": "Redis not connected, caching disabled"}


async def get_health_status() -> Dict[str, Any]:
    """
    Get overall health status.
    
    Returns:
        Dictionary with health status of all components
    """
    db_status = await check_database()
    redis_status = await check_redis()
    
    overall_status = "healthy"
    if db_status["status"] != "healthy":
        overall_status = "unhealthy"
    
    return {
        "status": overall_status,
        "version": __version__,
        "environment": settings.ENVIRONMENT,
        "components": {
            "database": db_status,
            "redis": redis_status,
        }
    }

"""
Monitoring utilities for metrics and error tracking
"""
from typing import Dict, Any, Optional
from datetime import datetime, timezone
from functools import wraps
import asyncio
import logging
import time

logger = logging.getLogger(__name__)


def track_error(
    error_type: str,
    language_code: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None
):
    """
    Track error for monitoring.
    
    Args:
        error_type: Type of error
        language_code: Target language (optional)
        metadata: Additional metadata
    """
    error_data = {
        "error_type": error_type,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "language_code": language_code,
        "metadata": metadata or {},
    }
    
    logger.error(f"Error tracked: {error_data}")


def track_metric(
    metric_name: str,
    value: float,
    language_code: Optional[str] = None,
    tags: Optional[Dict[str, str]] = None
):
    """
    Track metric for monitoring.
    
    Args:
        metric_name: Name of metric
        value: Metric value
        language_code: Target language (optional)
        tags: Additional tags
    """
    metric_data = {
        "metric": metric_name,
        "value": value,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "language_code": language_code,
        "tags": tags or {},
    }
    
    logger.info(f"Metric: {metric_data}")


def monitor_performance(func):
    """
    Decorator to monitor function performance.
    
    Usage:
        @monitor_performance
        async def my_function():
            ...
    """
    @wraps(func)
    async def async_wrapper(*args, **kwargs):
        start_time = time.time()
        
        try:
            result = await func(*args, **kwargs)
        except Exception as e:
            duration = time.time() - start_time
            track_error(
                f"{func.__name__}.error",
                metadata={"error": str(e), "duration": duration}
            )
            track_metric(f"{func.__name__}.duration", duration, tags={"status": "error"})
            raise
        
        track_metric(f"{func.__name__}.duration", time.time() - start_time, tags={"status": "success"})
        return result
    
    @wraps(func)
    def sync_wrapper(*args, **kwargs):
        start_time = time.time()
        
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            duration = time.time() - start_time
            track_error(
                f"{func.__name__}.error",
                metadata={"error": str(e), "duration": duration}
            )
            track_metric(f"{func.__name__}.duration", duration, tags={"status": "error"})
            raise
        
        track_metric(f"{func.__name__}.duration", time.time() - start_time, tags={"status": "success"})
        return result
    
    if asyncio.iscoroutinefunction(func):
        return async_wrapper
    return sync_wrapper

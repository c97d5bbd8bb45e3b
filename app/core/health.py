"""
Health check helpers
"""
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict

from .config import settings
from .database import Database


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


_start_time = time.time()


async def check_basic_health(database: Database) -> Dict[str, Any]:
    """Service identity plus a SELECT 1 round trip"""
    started = time.time()
    database_ok = await database.health_check()
    response_time_ms = round((time.time() - started) * 1000, 2)

    return {
        "status": (HealthStatus.HEALTHY if database_ok else HealthStatus.UNHEALTHY).value,
        "service": "event-registry-backend",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime_seconds": round(time.time() - _start_time, 2),
        "components": {
            "database": {
                "status": "up" if database_ok else "down",
                "response_time_ms": response_time_ms,
            }
        },
    }

"""
ApisLabs Catalog API - Health Check Route
==========================================

What:  Liveness endpoint for monitoring and load balancer probes.
How:   Returns a fixed status with the current UTC time.

The probe does not touch the document store: it answers as long as the
process can serve requests. Store connectivity is logged at startup.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from apislabs.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    logger.debug("Health check requested")
    return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc))

"""Health check endpoint."""

import time
from fastapi import APIRouter

from infivalidator import __version__
from infivalidator.models.responses import HealthResponse
from infivalidator.validators import RuleCategory, RuleRegistry, register_rules

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Service health with the rule set every validator instance loads."""
    registry = RuleRegistry().load_from([register_rules])

    return HealthResponse(
        status="healthy" if len(registry) else "degraded",
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
        rules={category.value: registry.names(category) for category in RuleCategory},
    )

# summation\adapters\api\routers\health.py
from fastapi import APIRouter, Depends, Request, status, Response
from dependency_injector.wiring import inject, Provide
from typing import Dict
import structlog

from summation.core.domain.models import SumRequest
from summation.core.use_cases.compute_sum import ComputeSum
from summation.shared.container import Container

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])

# Known-answer probe for the readiness check.
_PROBE = SumRequest(a=1, b=2)
_PROBE_ANSWER = 3

@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe(request: Request):
    """
    K8s Liveness Probe.
    Returns 200 OK if the service is operational.
    """
    return {"status": "ok", "service": request.app.state.settings.APP_NAME}

@router.get("/ready", status_code=status.HTTP_200_OK)
@inject
async def readiness_probe(
    response: Response,
    use_case: ComputeSum = Depends(Provide[Container.compute_sum_use_case]),
) -> Dict[str, str]:
    """
    K8s Readiness Probe.
    Runs the Sum use case on a known input through the container.
    Returns 503 Service Unavailable if it does not produce the known answer.
    """
    health_status = {"status": "ok", "use_case": "down"}

    try:
        if use_case.execute(_PROBE).answer == _PROBE_ANSWER:
            health_status["use_case"] = "up"
    except Exception as e:
        logger.error("health_check_failed", component="use_case", error=str(e))

    if health_status["use_case"] != "up":
        health_status["status"] = "degraded"
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("readiness_probe_failed", status=health_status)

    return health_status

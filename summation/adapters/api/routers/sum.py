# summation\adapters\api\routers\sum.py
import math
from typing import Any, Dict

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Body, Depends, HTTPException, status

from summation.adapters.api.errors import UNPROCESSABLE_RESULT_STATUS
from summation.adapters.api.schemas import ErrorResponse
from summation.core.domain.models import SumResponse
from summation.core.use_cases.compute_sum import ComputeSum
from summation.shared.container import Container

logger = structlog.get_logger()

router = APIRouter(tags=["Summation"])

@router.post(
    "/sum",
    response_model=SumResponse,
    status_code=status.HTTP_200_OK,
    summary="Add two numbers",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Missing or non-numeric operand"},
        UNPROCESSABLE_RESULT_STATUS: {"model": ErrorResponse, "description": "Sum overflows a JSON number"},
    },
)
@inject
async def compute_sum(
    payload: Dict[str, Any] = Body(
        ...,
        description="Object with the two numeric operands",
        examples=[{"a": 1, "b": 2}],
    ),
    use_case: ComputeSum = Depends(Provide[Container.compute_sum_use_case]),
) -> SumResponse:
    """
    Returns `{"answer": a + b}` for a body `{"a": number, "b": number}`.

    Both operands are required. Integers and finite floats are accepted;
    strings, booleans and nulls are rejected with a 400 error envelope.
    """
    # ValidationError propagates to the registered exception handler (400).
    try:
        response = use_case.execute(payload)
    except OverflowError:
        # int + float where the int is beyond the float range
        response = None

    if response is None or (isinstance(response.answer, float) and not math.isfinite(response.answer)):
        raise HTTPException(
            status_code=UNPROCESSABLE_RESULT_STATUS,
            detail="The sum is too large to be represented as a JSON number.",
        )

    logger.debug("sum_computed", answer=response.answer)
    return response

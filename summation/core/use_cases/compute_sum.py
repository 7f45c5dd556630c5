# summation/core/use_cases/compute_sum.py
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Union

from pydantic import ValidationError as PydanticValidationError

from summation.core.domain.exceptions import ValidationError
from summation.core.domain.models import SumRequest, SumResponse
from summation.shared.telemetry import get_tracer

tracer = get_tracer(__name__)

INVALID_REQUEST_MESSAGE = "Invalid sum request"

# Problem descriptions, most specific first.
_MISSING = "field required"
_NOT_FINITE = "must be a finite number"
_NOT_A_NUMBER = "must be a number"


class ComputeSum:
    """
    Use Case: Adds the two operands of a Sum request.

    Responsibilities:
    1. Validates the raw request (both operands present, both numeric).
    2. Computes answer = a + b with the host's own numeric semantics.
    3. Traces the operation for observability.

    The use case holds no state; every call is a pure function of its input.
    """

    def execute(self, request: Union[SumRequest, Mapping[str, Any]]) -> SumResponse:
        """
        Executes the Sum operation.

        Args:
            request: A validated SumRequest, or a raw mapping such as a decoded
                JSON body, which is validated first.

        Returns:
            SumResponse: The answer.

        Raises:
            ValidationError: If an operand is missing or not a number.
        """
        with tracer.start_as_current_span("use_case.compute_sum") as span:
            if not isinstance(request, SumRequest):
                request = self.validate(request)

            span.set_attribute("app.operand_a_type", type(request.a).__name__)
            span.set_attribute("app.operand_b_type", type(request.b).__name__)

            return SumResponse(answer=request.a + request.b)

    def validate(self, payload: Mapping[str, Any]) -> SumRequest:
        """
        Converts a raw payload into a SumRequest.

        Missing operands are reported, never defaulted to zero, and numeric
        strings are not coerced.
        """
        if not isinstance(payload, Mapping):
            raise ValidationError(
                INVALID_REQUEST_MESSAGE,
                details={"body": "must be an object with numeric 'a' and 'b'"},
            )

        try:
            return SumRequest.model_validate(dict(payload))
        except PydanticValidationError as e:
            raise ValidationError(
                INVALID_REQUEST_MESSAGE,
                details=_describe_errors(e.errors()),
            ) from e


def _describe_errors(errors: Iterable[Dict[str, Any]]) -> Dict[str, str]:
    """
    Collapses pydantic error entries into one message per operand.

    A union field reports one entry per member type (int, float), so the most
    specific problem found for a field wins.
    """
    rank = {_MISSING: 0, _NOT_FINITE: 1, _NOT_A_NUMBER: 2}
    details: Dict[str, str] = {}

    for error in errors:
        loc = error.get("loc") or ("body",)
        field = str(loc[0])

        if error.get("type") == "missing":
            problem = _MISSING
        elif error.get("type") == "finite_number":
            problem = _NOT_FINITE
        else:
            problem = _NOT_A_NUMBER

        current = details.get(field)
        if current is None or rank[problem] < rank[current]:
            details[field] = problem

    return details

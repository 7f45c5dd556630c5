# summation\core\domain\models.py
from typing import Union

from pydantic import AllowInfNan, BaseModel, ConfigDict, Field, Strict, StrictInt
from typing_extensions import Annotated

# --- Value Types ---

# Operands are real JSON numbers: no bools, no numeric strings, no NaN/Infinity.
FiniteFloat = Annotated[float, Strict(), AllowInfNan(False)]
Operand = Union[StrictInt, FiniteFloat]

# Results follow the host arithmetic, so a float sum may overflow to infinity.
Number = Union[StrictInt, Annotated[float, Strict()]]

# --- Entities ---

class SumRequest(BaseModel):
    """
    The two operands of a Sum operation.
    Each request is independent: there is no identity and nothing is stored.
    """
    model_config = ConfigDict(frozen=True)

    a: Operand = Field(..., description="First operand (integer or finite float)")
    b: Operand = Field(..., description="Second operand (integer or finite float)")

class SumResponse(BaseModel):
    """
    The result of a Sum operation: answer == a + b.
    """
    model_config = ConfigDict(frozen=True)

    answer: Number = Field(..., description="Arithmetic sum of the two operands")

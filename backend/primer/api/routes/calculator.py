"""Calculator Route: one endpoint for the four arithmetic operations.

Invariants:
    - Unknown operation names rejected as INVALID_ARGUMENT (400), not 404
    - Zero operands reach core.calculator unchanged so its guards decide the outcome
    - Infinite or NaN results become NON_FINITE_RESULT (400); JSON has no spelling for them
"""

import logging
import math

from fastapi import APIRouter

from primer.core.calculator import calculate
from primer.core.errors import NonFiniteResultError
from primer.schemas.operations import CalculatorRequest, CalculatorResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/calculator", tags=["calculator"])


@router.post("/{operation}", response_model=CalculatorResponse)
async def run_operation(operation: str, body: CalculatorRequest):
    """Apply operation to (a, b)."""
    result = calculate(operation, body.a, body.b)
    if isinstance(result, float) and not math.isfinite(result):
        raise NonFiniteResultError(operation)
    logger.debug(f"calculator {operation} ok", extra={"operation": operation})
    return CalculatorResponse(operation=operation, result=result)

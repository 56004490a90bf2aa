"""Array Routes: summary statistics for a list of numbers."""

import math

from fastapi import APIRouter

from primer.core.array_analysis import analyze_array
from primer.core.errors import NonFiniteResultError
from primer.schemas.operations import AnalyzeRequest, AnalyzeResponse

router = APIRouter(prefix="/api/v1/arrays", tags=["arrays"])


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(body: AnalyzeRequest):
    analysis = analyze_array(body.values)
    # inf/nan would serialize as null, indistinguishable from the empty-list result
    if any(
        isinstance(analysis[key], float) and not math.isfinite(analysis[key])
        for key in ("average", "min", "max")
    ):
        raise NonFiniteResultError("analyze_array")
    return AnalyzeResponse(**analysis)

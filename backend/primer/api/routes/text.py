"""Text Routes: capitalize and reverse.

Invariants:
    - Thin handlers: all validation beyond JSON shape happens in core.text_ops
"""

from fastapi import APIRouter

from primer.core.text_ops import capitalize, reverse_string
from primer.schemas.operations import TextRequest, TextResponse

router = APIRouter(prefix="/api/v1/text", tags=["text"])


@router.post("/capitalize", response_model=TextResponse)
async def capitalize_text(body: TextRequest):
    return TextResponse(result=capitalize(body.text))


@router.post("/reverse", response_model=TextResponse)
async def reverse_text(body: TextRequest):
    return TextResponse(result=reverse_string(body.text))

"""Cipher Route: Caesar cipher over JSON.

Invariants:
    - Response echoes the normalized shift in [0, 26)
"""

from fastapi import APIRouter

from primer.core.caesar_cipher import caesar_cipher, normalize_shift
from primer.schemas.operations import CaesarRequest, CaesarResponse

router = APIRouter(prefix="/api/v1/cipher", tags=["cipher"])


@router.post("/caesar", response_model=CaesarResponse)
async def encrypt_caesar(body: CaesarRequest):
    result = caesar_cipher(body.text, body.shift)
    return CaesarResponse(result=result, shift=normalize_shift(body.shift))

"""Operation Schemas: request/response models for the utility endpoints.

Invariants:
    - Numeric fields are StrictInt | StrictFloat: JSON booleans and numeric strings never coerce
    - Schemas check shape only; value rules (zero operands, integer shift) live in core/
    - Text payloads capped at MAX_TEXT_LENGTH characters

Design Decisions:
    - Core stays the single source of semantic validation: the API returns the same
      INVALID_ARGUMENT error a direct caller would see
"""

from pydantic import BaseModel, Field, StrictFloat, StrictInt

from primer.core.domain_types import CalculatorOperation

MAX_TEXT_LENGTH = 100_000
MAX_VALUES = 100_000

Numeric = StrictInt | StrictFloat


class TextRequest(BaseModel):
    """Body for capitalize / reverse."""
    text: str = Field(max_length=MAX_TEXT_LENGTH)


class TextResponse(BaseModel):
    result: str


class CalculatorRequest(BaseModel):
    """Two operands; zero is accepted here and rejected by the calculator itself."""
    a: Numeric
    b: Numeric


class CalculatorResponse(BaseModel):
    operation: CalculatorOperation
    result: float | int


class CaesarRequest(BaseModel):
    text: str = Field(max_length=MAX_TEXT_LENGTH)
    shift: Numeric


class CaesarResponse(BaseModel):
    """Encrypted text plus the shift after normalization into [0, 26)."""
    result: str
    shift: int


class AnalyzeRequest(BaseModel):
    values: list[Numeric] = Field(max_length=MAX_VALUES)


class AnalyzeResponse(BaseModel):
    average: float | None
    min: float | int | None
    max: float | int | None
    length: int

"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ModelId, ItemId wrap UUIDs: never use bare UUID in registry logic
    - All valid states encoded as Enums: no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ModelId = NewType("ModelId", UUID)
ItemId = NewType("ItemId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class Status(str, Enum):
    """Lifecycle status shared by registry models."""
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    COMPLETED = "COMPLETED"


class CalculatorOperation(str, Enum):
    """The four calculator operations, keyed by their public name."""
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

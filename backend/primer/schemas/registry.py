"""Registry Schemas: Pydantic models for the model/item endpoints.

Invariants:
    - Names are stripped; blank names fall back to the registry default
    - Responses expose ids as UUIDs and status as its string value

Design Decisions:
    - from_domain() classmethods keep route handlers free of field-by-field mapping
"""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from primer.core.domain_types import Status
from primer.core.registry import DEFAULT_ITEM_NAME, Item, Model, ModelRegistry


class ModelCreate(BaseModel):
    """Model creation: name optional, stripped."""
    name: str | None = Field(None, max_length=200)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None


class ModelRename(BaseModel):
    name: str = Field(min_length=1, max_length=200)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class ItemCreate(BaseModel):
    name: str = Field(DEFAULT_ITEM_NAME, min_length=1, max_length=200)


class ItemResponse(BaseModel):
    id: UUID
    name: str

    @classmethod
    def from_domain(cls, item: Item) -> "ItemResponse":
        return cls(id=item.id, name=item.name)


class ModelResponse(BaseModel):
    id: UUID
    name: str
    status: Status
    items: list[ItemResponse]

    @classmethod
    def from_domain(cls, model: Model) -> "ModelResponse":
        return cls(
            id=model.id,
            name=model.name,
            status=model.status,
            items=[ItemResponse.from_domain(i) for i in model.items],
        )


class RegistryResponse(BaseModel):
    """Every model plus the current active/default selections."""
    models: list[ModelResponse]
    active_model_id: UUID | None
    default_model_id: UUID | None

    @classmethod
    def from_domain(cls, registry: ModelRegistry) -> "RegistryResponse":
        active = registry.active_model
        default = registry.default_model
        return cls(
            models=[ModelResponse.from_domain(m) for m in registry.all_models],
            active_model_id=active.id if active else None,
            default_model_id=default.id if default else None,
        )

"""Model Routes: CRUD and selection over the in-memory ModelRegistry.

Invariants:
    - Registry comes from Depends(get_registry); handlers never hold their own state
    - Unknown model or item ids produce RESOURCE_NOT_FOUND (404)
    - DELETE responses are 204 with an empty body

Design Decisions:
    - activate / default / toggle-state as POST sub-resources: each is a single
      state transition, not a partial update of the model document
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from primer.api.deps import get_registry
from primer.core.domain_types import ItemId, ModelId
from primer.core.errors import ResourceNotFoundError
from primer.core.registry import ModelRegistry
from primer.schemas.registry import (
    ItemCreate,
    ItemResponse,
    ModelCreate,
    ModelRename,
    ModelResponse,
    RegistryResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/models", tags=["models"])


@router.get("", response_model=RegistryResponse)
async def list_models(registry: ModelRegistry = Depends(get_registry)):
    """All models with the active and default selections."""
    return RegistryResponse.from_domain(registry)


@router.post(
    "", response_model=ModelResponse, status_code=status.HTTP_201_CREATED,
)
async def create_model(
    body: ModelCreate, registry: ModelRegistry = Depends(get_registry),
):
    model = registry.create_model(body.name)
    logger.info(f"Created model {model.name!r}", extra={"model_id": str(model.id)})
    return ModelResponse.from_domain(model)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_all_models(registry: ModelRegistry = Depends(get_registry)):
    registry.delete_all_models()
    logger.info("Deleted all models")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{model_id}", response_model=ModelResponse)
async def get_model(
    model_id: UUID, registry: ModelRegistry = Depends(get_registry),
):
    return ModelResponse.from_domain(registry.require_model(ModelId(model_id)))


@router.patch("/{model_id}", response_model=ModelResponse)
async def rename_model(
    model_id: UUID, body: ModelRename,
    registry: ModelRegistry = Depends(get_registry),
):
    model = registry.require_model(ModelId(model_id))
    model.name = body.name
    return ModelResponse.from_domain(model)


@router.delete("/{model_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_model(
    model_id: UUID, registry: ModelRegistry = Depends(get_registry),
):
    if not registry.delete_model(ModelId(model_id)):
        raise ResourceNotFoundError("Model", str(model_id), model_id=str(model_id))
    logger.info("Deleted model", extra={"model_id": str(model_id)})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ─── Selection ───────────────────────────────────────────────────

@router.post("/{model_id}/activate", response_model=RegistryResponse)
async def activate_model(
    model_id: UUID, registry: ModelRegistry = Depends(get_registry),
):
    registry.require_model(ModelId(model_id))
    registry.set_active_model(ModelId(model_id))
    return RegistryResponse.from_domain(registry)


@router.post("/{model_id}/default", response_model=RegistryResponse)
async def toggle_default_model(
    model_id: UUID, registry: ModelRegistry = Depends(get_registry),
):
    """Make the model the default, or clear the default if it already is."""
    registry.require_model(ModelId(model_id))
    registry.toggle_default_model(ModelId(model_id))
    return RegistryResponse.from_domain(registry)


@router.post("/{model_id}/toggle-state", response_model=ModelResponse)
async def toggle_model_state(
    model_id: UUID, registry: ModelRegistry = Depends(get_registry),
):
    model = registry.require_model(ModelId(model_id))
    model.toggle_state()
    return ModelResponse.from_domain(model)


# ─── Items ───────────────────────────────────────────────────────

@router.post(
    "/{model_id}/items", response_model=ItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_item(
    model_id: UUID, body: ItemCreate,
    registry: ModelRegistry = Depends(get_registry),
):
    model = registry.require_model(ModelId(model_id))
    return ItemResponse.from_domain(model.add_item(body.name))


@router.get("/{model_id}/items/{item_id}", response_model=ItemResponse)
async def get_item(
    model_id: UUID, item_id: UUID,
    registry: ModelRegistry = Depends(get_registry),
):
    item = registry.require_model(ModelId(model_id)).get_item(ItemId(item_id))
    if item is None:
        raise ResourceNotFoundError(
            "Item", str(item_id), model_id=str(model_id), item_id=str(item_id),
        )
    return ItemResponse.from_domain(item)


@router.delete(
    "/{model_id}/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_item(
    model_id: UUID, item_id: UUID,
    registry: ModelRegistry = Depends(get_registry),
):
    model = registry.require_model(ModelId(model_id))
    if not model.remove_item(ItemId(item_id)):
        raise ResourceNotFoundError(
            "Item", str(item_id), model_id=str(model_id), item_id=str(item_id),
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)

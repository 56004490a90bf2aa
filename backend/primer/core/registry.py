"""Model Registry: in-memory collection of models with active/default selection.

Invariants:
    - Registry is an explicit context object; one instance per running app (never a module global)
    - all_models and Model.items return copies: callers cannot mutate internal lists
    - Deleting the active or default model falls back to the first remaining model (or None)
    - delete_all_models clears both the active and the default selection

Design Decisions:
    - Dataclasses with private lists: pure, deterministic, testable without mocks
    - In-memory only, no persistence (ADR: persistence format out of scope)
    - get_model returns None, require_model raises: lookups stay cheap, routes get a 404
"""

import logging
import uuid
from dataclasses import dataclass, field

from primer.core.domain_types import ItemId, ModelId, Status
from primer.core.errors import ResourceNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_MODEL_NAME = "Untitled Model"
DEFAULT_ITEM_NAME = "Untitled Item"


@dataclass
class Item:
    """Small named entry owned by a Model."""
    name: str = DEFAULT_ITEM_NAME
    id: ItemId = field(default_factory=lambda: ItemId(uuid.uuid4()))


@dataclass
class Model:
    """Named model holding an ordered list of items."""
    name: str = DEFAULT_MODEL_NAME
    status: Status = Status.ACTIVE
    id: ModelId = field(default_factory=lambda: ModelId(uuid.uuid4()))
    _items: list[Item] = field(default_factory=list, repr=False)

    @property
    def items(self) -> list[Item]:
        return list(self._items)

    def add_item(self, name: str = DEFAULT_ITEM_NAME) -> Item:
        item = Item(name=name)
        self._items.append(item)
        return item

    def get_item(self, item_id: ItemId) -> Item | None:
        return next((i for i in self._items if i.id == item_id), None)

    def remove_item(self, item_id: ItemId) -> bool:
        """Remove an item by id. Returns False when no such item exists."""
        before = len(self._items)
        self._items = [i for i in self._items if i.id != item_id]
        return len(self._items) != before

    def toggle_state(self) -> Status:
        """ACTIVE -> INACTIVE, anything else -> ACTIVE."""
        self.status = Status.INACTIVE if self.status == Status.ACTIVE else Status.ACTIVE
        return self.status


class ModelRegistry:
    """Owns every Model plus the active and default selections."""

    def __init__(self, default_model_name: str = DEFAULT_MODEL_NAME):
        self._models: list[Model] = []
        self._active: Model | None = None
        self._default: Model | None = None
        self.default_model_name = default_model_name

    # ─── CRUD ────────────────────────────────────────────────────

    def create_model(self, name: str | None = None) -> Model:
        model = Model(
            name=self.default_model_name if name is None else name,
        )
        self._models.append(model)
        logger.debug(f"Model created: {model.id}", extra={"model_id": str(model.id)})
        return model

    @property
    def all_models(self) -> list[Model]:
        return list(self._models)

    def get_model(self, model_id: ModelId) -> Model | None:
        return next((m for m in self._models if m.id == model_id), None)

    def require_model(self, model_id: ModelId) -> Model:
        model = self.get_model(model_id)
        if model is None:
            raise ResourceNotFoundError("Model", str(model_id), model_id=str(model_id))
        return model

    def delete_model(self, model_id: ModelId) -> bool:
        """Delete a model. Returns False when the id is unknown."""
        before = len(self._models)
        self._models = [m for m in self._models if m.id != model_id]
        if len(self._models) == before:
            return False

        fallback = self._models[0] if self._models else None
        if self._active is not None and self._active.id == model_id:
            self._active = fallback
        if self._default is not None and self._default.id == model_id:
            self._default = fallback
        logger.debug(f"Model deleted: {model_id}", extra={"model_id": str(model_id)})
        return True

    def delete_all_models(self) -> None:
        self._models = []
        self._active = None
        self._default = None

    # ─── Selection ───────────────────────────────────────────────

    @property
    def active_model(self) -> Model | None:
        return self._active

    def set_active_model(self, model_id: ModelId) -> Model | None:
        """Select the active model. An unknown id clears the selection."""
        self._active = self.get_model(model_id)
        return self._active

    @property
    def default_model(self) -> Model | None:
        return self._default

    def toggle_default_model(self, model_id: ModelId) -> Model | None:
        """Make model_id the default, or clear it if it already is."""
        if self._default is not None and self._default.id == model_id:
            self._default = None
        else:
            self._default = self.get_model(model_id)
        return self._default

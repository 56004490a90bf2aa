"""Route Dependencies: FastAPI providers for per-application context.

Invariants:
    - The ModelRegistry lives on app.state, created once by the lifespan
    - Routes never import a registry instance directly

Design Decisions:
    - Depends(get_registry) over a module-level singleton: tests swap the registry
      through app.state without monkeypatching imports
"""

from fastapi import Request

from primer.core.registry import ModelRegistry


def get_registry(request: Request) -> ModelRegistry:
    """Return the registry owned by the running application."""
    return request.app.state.registry

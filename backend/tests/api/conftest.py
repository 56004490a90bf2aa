"""API test fixtures: FastAPI app with a fresh registry per test.

Invariants:
    - Every test gets its own ModelRegistry on app.state
    - httpx ASGITransport does not run the lifespan, so the fixture installs the registry

Design Decisions:
    - Shared module-level app instead of create_app() per test: routes and handlers
      are exercised exactly as deployed
"""

import pytest
from httpx import ASGITransport, AsyncClient

from primer.core.registry import ModelRegistry
from primer.main import app


@pytest.fixture
def registry():
    return ModelRegistry()


@pytest.fixture
async def client(registry):
    """FastAPI test client bound to the test registry."""
    original = getattr(app.state, "registry", None)
    app.state.registry = registry

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.registry = original

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.core.rate_limit import limiter
from app.main import app
from app.services.conversion_rates import ConversionRateResolver
from app.services.funnel_projection import FunnelProjectionService
from app.services.projection_service import ProjectionService


@pytest.fixture(autouse=True)
def reset_rate_limits() -> None:
    """Start every test with empty slowapi counters."""
    limiter.reset()


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Yield an ``httpx.AsyncClient`` wired to the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def resolver() -> ConversionRateResolver:
    """Resolver over the static rate table."""
    return ConversionRateResolver()


@pytest.fixture
def funnel_service(resolver: ConversionRateResolver) -> FunnelProjectionService:
    return FunnelProjectionService(resolver)


@pytest.fixture
def projection_service(
    resolver: ConversionRateResolver, funnel_service: FunnelProjectionService
) -> ProjectionService:
    return ProjectionService(resolver=resolver, funnel_service=funnel_service)

"""
GrubDash test fixtures — one isolated app (no seed data, no metrics) per test.
"""
import pytest
import pytest_asyncio
import httpx

from grubdash.core.config import Settings
from grubdash.main import create_app


@pytest.fixture
def settings():
    return Settings(SEED_DATA=False, METRICS_ENABLED=False, LOG_LEVEL="WARNING")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def dish_payload():
    return {
        "name": "Falafel and tahini bagel",
        "description": "A warm bagel filled with falafel and tahini",
        "price": 6,
        "image_url": "https://example.com/bagel.jpg",
    }


@pytest.fixture
def order_payload():
    return {
        "deliverTo": "308 Negra Arroyo Lane, Albuquerque, NM",
        "mobileNumber": "(505) 143-3369",
        "dishes": [{"dishId": "90c3d873684bf381dfab29034b5bba73", "quantity": 2}],
    }

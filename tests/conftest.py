"""Shared fixtures."""
import random

import pytest
from httpx import AsyncClient, ASGITransport

from deckserver.game.card_service import CardService
from deckserver.game.deck_service import DeckService, DeckValidator, create_deck_service
from deckserver.main import app, get_deck_service
from deckserver.state.deck_store import DeckStore


@pytest.fixture
def card_service():
    """Default card service."""
    return CardService()


@pytest.fixture
def store():
    """Empty in-memory deck store."""
    return DeckStore()


@pytest.fixture
def validator(store, card_service):
    """Deck validator with a seeded shuffle source."""
    return DeckValidator(store, card_service, random.Random(1234))


@pytest.fixture
def service(validator):
    """Deck service over a fresh store."""
    return DeckService(validator)


@pytest.fixture
def api_service():
    """Deck service used by the HTTP app during a test."""
    service = create_deck_service()
    app.dependency_overrides[get_deck_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


@pytest.fixture
async def client(api_service):
    """HTTP client bound to the ASGI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

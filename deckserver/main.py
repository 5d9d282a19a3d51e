"""Main FastAPI server exposing the deck resource."""
import json
import random
from typing import Any, Optional, Type, TypeVar
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from deckserver.config import config
from deckserver.game.deck import Deck
from deckserver.game.deck_service import DeckService, create_deck_service
from deckserver.game.errors import DeckError, NotFound
from deckserver.protocol.messages import (
    CardResponse,
    CreateDeckRequest,
    CreateDeckResponse,
    DeckResponse,
    DrawRequest,
)
from deckserver.utils.logger import get_logger

logger = get_logger(__name__)

UNEXPECTED_ERROR = "Unexpected Error"
DECK_NOT_FOUND = "Deck not found"

Body = TypeVar("Body", bound=BaseModel)


class RequestError(Exception):
    """Short-circuits a route with a JSON string error body."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


# Global service instance
deck_service = create_deck_service(rng=random.Random(config.shuffle_seed))


def get_deck_service() -> DeckService:
    """Dependency returning the process-wide deck service."""
    return deck_service


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(
        "Deck server starting "
        f"(shuffle seed: {config.shuffle_seed if config.shuffle_seed is not None else 'random'})"
    )
    yield
    logger.info("Deck server shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Deck Server",
    description="Deck of playing cards over HTTP",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(RequestError)
async def request_error_handler(request: Request, exc: RequestError):
    return json_error(exc.message, exc.status_code)


def json_error(message: str, status_code: int) -> JSONResponse:
    """Error response whose body is a bare JSON string."""
    return JSONResponse(content=message, status_code=status_code)


async def decode_body(request: Request, model: Type[Body]) -> Body:
    """Parse an optional JSON body into ``model``.

    An empty body yields the model defaults; anything that fails to decode
    is rejected with 400 and the decoder's message.
    """
    raw = await request.body()
    if not raw.strip():
        return model()
    try:
        data: Any = json.loads(raw)
        return model.model_validate(data if data is not None else {})
    except (json.JSONDecodeError, ValidationError) as e:
        logger.warning(f"Rejected {request.method} {request.url.path} body: {e}")
        raise RequestError(str(e), 400)


def deck_by_id(service: DeckService, deck_id: str) -> Deck:
    """Look a deck up for a route, mapping failures to responses."""
    try:
        return service.by_id(deck_id)
    except NotFound:
        raise RequestError(DECK_NOT_FOUND, 404)
    except DeckError as e:
        logger.warning(f"Lookup of deck {deck_id!r} failed: {e}")
        raise RequestError(UNEXPECTED_ERROR, 500)


# Health check
@app.get("/health")
async def health_check(service: DeckService = Depends(get_deck_service)):
    """Health check endpoint."""
    return {"status": "healthy", "decks": service.validator.store.count()}


@app.post("/deck", status_code=201, response_model=CreateDeckResponse)
async def create_deck(
    request: Request,
    cards: Optional[str] = None,
    service: DeckService = Depends(get_deck_service),
):
    """Create a deck, optionally shuffled and limited to the given codes."""
    body = await decode_body(request, CreateDeckRequest)
    deck = Deck(shuffled=body.shuffled, card_codes=cards or "")
    try:
        service.create(deck)
    except Exception as e:
        logger.error(f"Failed to create deck: {e}")
        return json_error(UNEXPECTED_ERROR, 500)
    return CreateDeckResponse.from_deck(deck)


@app.put("/deck/{deck_id}/open", response_model=DeckResponse)
async def open_deck(deck_id: str, service: DeckService = Depends(get_deck_service)):
    """Open a deck and return it with its remaining cards."""
    async with service.lock(deck_id):
        deck = deck_by_id(service, deck_id)
        try:
            service.open(deck)
        except Exception as e:
            logger.error(f"Failed to open deck {deck_id}: {e}")
            return json_error(UNEXPECTED_ERROR, 500)
    return DeckResponse.from_deck(deck)


@app.post("/deck/{deck_id}/draw", response_model=list[CardResponse])
async def draw_cards(
    deck_id: str,
    request: Request,
    service: DeckService = Depends(get_deck_service),
):
    """Draw cards off the top of a deck.

    Draw failures answer 500 with the raw error text, unlike create and
    open which hide the message.
    """
    body = await decode_body(request, DrawRequest)
    async with service.lock(deck_id):
        deck = deck_by_id(service, deck_id)
        try:
            drawn = service.draw(deck, body.count)
        except Exception as e:
            logger.warning(f"Draw of {body.count} from deck {deck_id} failed: {e}")
            return json_error(str(e), 500)
    return [CardResponse.from_card(card) for card in drawn]


# Entry point
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "deckserver.main:app",
        host=config.host,
        port=config.port,
    )

"""HTTP protocol schemas."""
from .messages import (
    CardResponse,
    CreateDeckRequest,
    CreateDeckResponse,
    DeckResponse,
    DrawRequest,
)

__all__ = [
    "CardResponse",
    "CreateDeckRequest",
    "CreateDeckResponse",
    "DeckResponse",
    "DrawRequest",
]

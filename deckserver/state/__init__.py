"""State management module."""
from .deck_store import DeckStore

__all__ = ["DeckStore"]

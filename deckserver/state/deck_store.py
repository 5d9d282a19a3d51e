"""In-memory deck persistence."""
import threading

from deckserver.game.deck import Deck
from deckserver.game.errors import NotFound
from deckserver.utils.logger import get_logger

logger = get_logger(__name__)


class DeckStore:
    """Keeps deck snapshots in process memory, keyed by deck id.

    Stored and returned decks are copies, so callers mutating a deck never
    touch the stored record until they store it again.
    """

    def __init__(self):
        self._decks: dict[str, Deck] = {}
        self._lock = threading.Lock()

    def store(self, deck: Deck) -> None:
        """Insert or overwrite a deck.

        Args:
            deck: Deck to save; keyed by its ``deck_id``.
        """
        with self._lock:
            self._decks[deck.deck_id] = deck.copy()
        logger.debug(f"Stored deck {deck.deck_id} ({deck.remaining} cards)")

    def fetch_by_id(self, deck_id: str) -> Deck:
        """Get a deck by id.

        Args:
            deck_id: Deck identifier.

        Returns:
            A copy of the stored deck.

        Raises:
            NotFound: If no deck has that id.
        """
        with self._lock:
            deck = self._decks.get(deck_id)
            if deck is None:
                raise NotFound()
            return deck.copy()

    def update(self, deck: Deck) -> None:
        """Overwrite a deck; behaves exactly like :meth:`store`."""
        self.store(deck)

    def count(self) -> int:
        """Number of stored decks."""
        with self._lock:
            return len(self._decks)

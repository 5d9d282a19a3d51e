"""Card lookup by code, with validation."""
from typing import Callable, Iterable, Optional

from deckserver.game.cards import (
    Card,
    LETTER_VALUE_CODES,
    NUMERIC_VALUE,
    SUIT_CODES,
    all_cards,
    make_card,
)
from deckserver.game.errors import InvalidRankCode, InvalidSuitCode


class StaticCardStorage:
    """Builds cards straight from their codes; knows nothing about validity."""

    def by_code(self, code: str) -> Card:
        """Build the card a normalized code describes.

        Raises:
            InvalidRankCode: If the code is empty.
        """
        if not code:
            raise InvalidRankCode()
        suit = SUIT_CODES[code[-1]]
        value = LETTER_VALUE_CODES.get(code[0])
        if value is None:
            value = code[:-1]
        return make_card(value, suit)

    def all(self) -> list[Card]:
        return all_cards()


class CardValidator:
    """Normalizes and checks card codes before handing them to storage."""

    def __init__(self, storage: StaticCardStorage):
        self.storage = storage

    @staticmethod
    def normalize_code(code: str) -> str:
        return code.strip().upper()

    @staticmethod
    def check_code_value(code: str) -> None:
        if not code or code[0] in LETTER_VALUE_CODES:
            return
        rank = code[:-1]
        if not NUMERIC_VALUE.fullmatch(rank):
            raise InvalidRankCode()
        number = int(rank)
        if number < 1 or number > 10:
            raise InvalidRankCode()

    @staticmethod
    def check_code_suit(code: str) -> None:
        if code and code[-1] not in SUIT_CODES:
            raise InvalidSuitCode()

    def by_code(self, code: str) -> Card:
        """Get a card by code.

        The code is normalized before any check runs. The value part is
        checked before the suit part.

        Raises:
            InvalidRankCode: If the value part is not a card value.
            InvalidSuitCode: If the suit part is not a card suit.
        """
        code = self.normalize_code(code)
        checks: tuple[Callable[[str], None], ...] = (
            self.check_code_value,
            self.check_code_suit,
        )
        for check in checks:
            check(code)
        return self.storage.by_code(code)

    def all(self) -> list[Card]:
        return self.storage.all()


class CardService:
    """Resolves card codes and code lists into cards."""

    def __init__(self, validator: Optional[CardValidator] = None):
        self.validator = validator or CardValidator(StaticCardStorage())

    def by_code(self, code: str) -> Card:
        return self.validator.by_code(code)

    def by_codes(self, codes: Iterable[str]) -> list[Card]:
        """Resolve codes in order; the first invalid code aborts the call."""
        return [self.validator.by_code(code) for code in codes]

    def by_codes_text(self, text: str) -> list[Card]:
        """Resolve a comma separated code list such as ``"AS, 10d"``."""
        return self.by_codes(text.strip().split(","))

    def all(self) -> list[Card]:
        """All 52 cards in canonical order."""
        return self.validator.all()

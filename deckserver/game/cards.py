"""Playing card primitives."""
import re
from enum import Enum
from dataclasses import dataclass


class Suit(str, Enum):
    """Card suits."""
    CLUBS = "CLUBS"
    DIAMONDS = "DIAMONDS"
    HEARTS = "HEARTS"
    SPADES = "SPADES"

    def __str__(self) -> str:
        return self.value

    def code(self) -> str:
        """First letter of the suit name."""
        return self.value[0]


class Value(str, Enum):
    """Card values, stored as the text used on the wire."""
    ACE = "ACE"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "JACK"
    QUEEN = "QUEEN"
    KING = "KING"

    def __str__(self) -> str:
        return self.value

    def code(self) -> str:
        return encode_value_code(self.value)


# Canonical construction order
SUIT_ORDER = (Suit.SPADES, Suit.DIAMONDS, Suit.CLUBS, Suit.HEARTS)
VALUE_ORDER = tuple(Value)

# Signed integer text, as accepted by the code validator
NUMERIC_VALUE = re.compile(r"[+-]?[0-9]+")

SUIT_CODES = {suit.code(): suit for suit in Suit}
LETTER_VALUE_CODES = {
    "A": Value.ACE,
    "J": Value.JACK,
    "Q": Value.QUEEN,
    "K": Value.KING,
}


def encode_value_code(value: str) -> str:
    """Code for a card value.

    Numeric values are their own code ("10" stays "10"); named values
    are reduced to their first letter.
    """
    value = str(value)
    if NUMERIC_VALUE.fullmatch(value):
        return value
    return value[0]


def encode_suit_code(suit: str) -> str:
    """Code for a suit: the first letter of its name."""
    return str(suit)[0]


@dataclass(frozen=True)
class Card:
    """A playing card.

    ``value`` is usually a :class:`Value` member, but cards parsed from a
    numeric code keep the literal numeral text (e.g. ``"1"``).
    """
    value: str
    suit: Suit
    code: str

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Card({self.code})"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"value": str(self.value), "suit": str(self.suit), "code": self.code}

    @classmethod
    def from_dict(cls, data: dict) -> "Card":
        """Create from dictionary."""
        return make_card(data["value"], Suit(data["suit"]))


def make_card(value: str, suit: Suit) -> Card:
    """Build a card, deriving its code from value and suit."""
    if isinstance(value, str) and not isinstance(value, Value):
        try:
            value = Value(value)
        except ValueError:
            pass
    return Card(
        value=value,
        suit=suit,
        code=encode_value_code(value) + encode_suit_code(suit),
    )


def all_cards() -> list[Card]:
    """The canonical 52 cards, suit-major and value-minor."""
    return [
        make_card(value, suit)
        for suit in SUIT_ORDER
        for value in VALUE_ORDER
    ]

"""Tests for card code resolution."""
import pytest

from deckserver.game.card_service import CardService, CardValidator, StaticCardStorage
from deckserver.game.cards import Suit, Value, all_cards, make_card
from deckserver.game.errors import InvalidCardCode, InvalidRankCode, InvalidSuitCode


class TestByCode:
    """Test resolving a single code."""

    @pytest.mark.parametrize("code,expected", [
        ("AS", make_card(Value.ACE, Suit.SPADES)),
        (" as ", make_card(Value.ACE, Suit.SPADES)),
        ("10d", make_card(Value.TEN, Suit.DIAMONDS)),
        ("kh", make_card(Value.KING, Suit.HEARTS)),
        ("2C", make_card(Value.TWO, Suit.CLUBS)),
    ])
    def test_valid_codes(self, card_service, code, expected):
        """Test codes are normalized and resolved."""
        assert card_service.by_code(code) == expected

    def test_inverse_of_canonical_codes(self, card_service):
        """Test every canonical code resolves back to its card."""
        for card in all_cards():
            assert card_service.by_code(card.code) == card

    @pytest.mark.parametrize("code", ["X1S", "11S", "0H", "ZZ", "1.5D", "1_0S", "S"])
    def test_invalid_rank(self, card_service, code):
        """Test malformed or out of range values are rejected."""
        with pytest.raises(InvalidRankCode) as exc_info:
            card_service.by_code(code)

        assert str(exc_info.value) == "card code value is invalid"

    @pytest.mark.parametrize("code", ["AX", "10Z", "KA", "A"])
    def test_invalid_suit(self, card_service, code):
        """Test unknown suit letters are rejected."""
        with pytest.raises(InvalidSuitCode) as exc_info:
            card_service.by_code(code)

        assert str(exc_info.value) == "card code suit is invalid"

    def test_rank_checked_before_suit(self, card_service):
        """Test a code bad in both parts reports the value error."""
        with pytest.raises(InvalidRankCode):
            card_service.by_code("XX")

    def test_letter_rank_skips_numeric_parse(self, card_service):
        """Test a letter value is accepted without numeric parsing."""
        card = card_service.by_code("QS")

        assert card.value == Value.QUEEN

    def test_numeric_rank_used_literally(self, card_service):
        """Test the numeric part becomes the card value as written."""
        card = card_service.by_code("1H")

        assert card.value == "1"
        assert card.code == "1H"

    def test_signed_rank_keeps_code(self, card_service):
        """Test a signed numeral survives into the card code."""
        card = card_service.by_code("+5H")

        assert card.value == "+5"
        assert card.code == "+5H"
        assert card_service.by_code(card.code) == card

    def test_empty_code(self, card_service):
        """Test an empty code passes the checks but cannot be built."""
        CardValidator.check_code_value("")
        CardValidator.check_code_suit("")

        with pytest.raises(InvalidCardCode):
            card_service.by_code("   ")


class TestByCodes:
    """Test resolving code lists."""

    def test_keeps_input_order(self, card_service):
        """Test cards come back in the order of the codes."""
        cards = card_service.by_codes(["KH", "AS", "10D"])

        assert [card.code for card in cards] == ["KH", "AS", "10D"]

    def test_first_failure_aborts(self, card_service):
        """Test one bad code fails the whole list."""
        with pytest.raises(InvalidRankCode):
            card_service.by_codes(["AS", "X1S"])

    def test_reports_first_error(self, card_service):
        """Test the earliest invalid code decides the error."""
        with pytest.raises(InvalidSuitCode):
            card_service.by_codes(["AS", "AX", "X1S"])

    def test_duplicates_allowed(self, card_service):
        """Test repeated codes resolve to repeated cards."""
        cards = card_service.by_codes(["AS", "AS"])

        assert len(cards) == 2
        assert cards[0] == cards[1]

    def test_codes_text(self, card_service):
        """Test comma separated text is split and resolved."""
        cards = card_service.by_codes_text(" AS, 10d,kh ")

        assert cards == [
            make_card(Value.ACE, Suit.SPADES),
            make_card(Value.TEN, Suit.DIAMONDS),
            make_card(Value.KING, Suit.HEARTS),
        ]

    def test_codes_text_empty_entry(self, card_service):
        """Test an empty entry in the list is rejected."""
        with pytest.raises(InvalidCardCode):
            card_service.by_codes_text("AS,,KD")


class TestAll:
    """Test listing all cards."""

    def test_all_matches_canonical(self, card_service):
        """Test the service lists the canonical 52 cards."""
        assert card_service.all() == all_cards()

    def test_default_composition(self):
        """Test the default service wraps a validator over static storage."""
        service = CardService()

        assert isinstance(service.validator, CardValidator)
        assert isinstance(service.validator.storage, StaticCardStorage)

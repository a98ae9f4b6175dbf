from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, List, Sequence

from .errors import InvalidCardNotation


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def token(self) -> str:
        return FACE_TOKENS.get(self, str(self.value))


class Suit(Enum):
    SPADE = "♠"
    CLUB = "♣"
    HEART = "♥"
    DIAMOND = "♦"

    @property
    def glyph(self) -> str:
        return self.value

    @property
    def letter(self) -> str:
        return self.name[0].lower()


FACE_TOKENS = {Rank.JACK: "J", Rank.QUEEN: "Q", Rank.KING: "K", Rank.ACE: "A"}

RANK_TOKENS = {rank.token: rank for rank in Rank}
RANK_TOKENS["T"] = Rank.TEN

SUIT_SYMBOLS = {suit.glyph: suit for suit in Suit}
SUIT_SYMBOLS.update({suit.letter: suit for suit in Suit})

# Emoji presentation selector (U+FE0F) that some keyboards append to suit glyphs.
VARIATION_SELECTOR = "\ufe0f"


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Invalid rank: {self.rank!r}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"Invalid suit: {self.suit!r}")

    # Cards order by rank alone; two cards of equal rank are neither
    # smaller nor larger than each other.
    def __lt__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.label

    @property
    def label(self) -> str:
        return format_card(self)


def format_card(card: Card, unicode_suits: bool = True) -> str:
    """Render a card as rank token plus suit, e.g. '10♦' or '10d'."""

    suit = card.suit.glyph if unicode_suits else card.suit.letter
    return f"{card.rank.token}{suit}"


def cards_to_labels(cards: Iterable[Card], unicode_suits: bool = True) -> List[str]:
    return [format_card(card, unicode_suits) for card in cards]


def parse_card(label: str) -> Card:
    """Decode notation such as '10♦', 'A♥', 'Qs' or 'Th' into a Card."""

    if not isinstance(label, str):
        raise InvalidCardNotation(repr(label), "expected a string")
    text = label.strip().replace(VARIATION_SELECTOR, "")
    if len(text) < 2:
        raise InvalidCardNotation(label, "expected a rank followed by a suit")

    rank_token, suit_token = text[:-1], text[-1]
    rank = RANK_TOKENS.get(rank_token.upper())
    if rank is None:
        raise InvalidCardNotation(label, f"unrecognized rank {rank_token!r}")
    suit = SUIT_SYMBOLS.get(suit_token.lower())
    if suit is None:
        raise InvalidCardNotation(label, f"unrecognized suit {suit_token!r}")
    return Card(rank, suit)


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_card(label) for label in labels]

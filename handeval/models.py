from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Dict, List, Tuple

from .cards import Card, cards_to_labels


@total_ordering
class HandCategory(Enum):
    # Declared strongest first; declaration order is the hand ranking.
    ROYAL_FLUSH = "Royal Flush"
    STRAIGHT_FLUSH = "Straight Flush"
    FOUR_OF_A_KIND = "Four Of A Kind"
    FULL_HOUSE = "Full House"
    FLUSH = "Flush"
    STRAIGHT = "Straight"
    THREE_OF_A_KIND = "Three Of A Kind"
    TWO_PAIR = "Two Pair"
    ONE_PAIR = "One Pair"
    HIGH_CARD = "High Card"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def strength(self) -> int:
        """0 for High Card up to 9 for Royal Flush."""
        members = list(HandCategory)
        return len(members) - 1 - members.index(self)

    def __lt__(self, other: HandCategory) -> bool:
        if not isinstance(other, HandCategory):
            return NotImplemented
        return self.strength < other.strength


@dataclass(frozen=True)
class EvaluationResult:
    cards: Tuple[Card, ...]
    category: HandCategory

    @property
    def name(self) -> str:
        return self.category.display_name

    def labels(self, unicode_suits: bool = True) -> List[str]:
        return cards_to_labels(self.cards, unicode_suits)

    def to_dict(self, unicode_suits: bool = True) -> Dict[str, object]:
        return {"hand": self.labels(unicode_suits), "category": self.name}


@dataclass
class OutputConfig:
    unicode_suits: bool = True
    as_json: bool = False


def format_result(result: EvaluationResult, unicode_suits: bool = True) -> Tuple[List[str], str]:
    """Return the printable card strings and the category name of a result."""

    return result.labels(unicode_suits), result.name

from __future__ import annotations

import itertools
import random
from collections import Counter
from typing import Iterator, List

from handeval.cards import Card, Rank, Suit, parse_cards
from handeval.models import HandCategory

FULL_DECK = [Card(rank, suit) for rank, suit in itertools.product(Rank, Suit)]


def cards(text: str) -> List[Card]:
    """Build cards from a space separated string such as '8♦ 3♠ 5♦'."""
    return parse_cards(text.split())


def random_hands(seed: int, count: int) -> Iterator[List[Card]]:
    """Yield `count` random 7-card hands drawn without replacement from a full deck."""
    rng = random.Random(seed)
    for _ in range(count):
        yield rng.sample(FULL_DECK, 7)


def classify_five(hand: List[Card]) -> HandCategory:
    """Straightforward five-card classifier used to cross-check the evaluator."""
    ranks = sorted((card.rank for card in hand), reverse=True)
    counts = sorted(Counter(ranks).values(), reverse=True)
    is_flush = len({card.suit for card in hand}) == 1
    is_straight = len(set(ranks)) == 5 and ranks[0] - ranks[-1] == 4

    if is_straight and is_flush:
        return HandCategory.ROYAL_FLUSH if ranks[-1] == Rank.TEN else HandCategory.STRAIGHT_FLUSH
    if counts[0] == 4:
        return HandCategory.FOUR_OF_A_KIND
    if counts[:2] == [3, 2]:
        return HandCategory.FULL_HOUSE
    if is_flush:
        return HandCategory.FLUSH
    if is_straight:
        return HandCategory.STRAIGHT
    if counts[0] == 3:
        return HandCategory.THREE_OF_A_KIND
    if counts[:2] == [2, 2]:
        return HandCategory.TWO_PAIR
    if counts[0] == 2:
        return HandCategory.ONE_PAIR
    return HandCategory.HIGH_CARD


def strongest_category(hand: List[Card]) -> HandCategory:
    return max(classify_five(list(combo)) for combo in itertools.combinations(hand, 5))

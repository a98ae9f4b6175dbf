from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .cards import Card, Rank, Suit, cards_to_labels, parse_cards
from .errors import InvalidInput
from .models import EvaluationResult, HandCategory

LOGGER = logging.getLogger("handeval")

INPUT_SIZE = 7
HAND_SIZE = 5

# Every detector below is a pure function of the 7 input cards and/or their
# rank and suit groupings. Detectors return the winning cards or None and know
# nothing about priority; evaluate() walks them strongest first.


def evaluate(cards: Sequence[Card]) -> EvaluationResult:
    """Return the best 5-card hand that can be made from exactly 7 cards.

    Raises InvalidInput when the input is not 7 distinct Card values.
    """
    hand = _validate(cards)
    category, best = _detect(hand, group_by_rank(hand), group_by_suit(hand))
    LOGGER.debug("%s -> %s %s", cards_to_labels(hand), category.display_name, cards_to_labels(best))
    return EvaluationResult(cards=tuple(best), category=category)


def evaluate_labels(labels: Sequence[str]) -> EvaluationResult:
    """Parse card notation strings and evaluate them."""
    return evaluate(parse_cards(labels))


def _validate(cards: Sequence[Card]) -> List[Card]:
    try:
        hand = list(cards)
    except TypeError as exc:
        raise InvalidInput(f"Expected a sequence of cards, got {cards!r}") from exc
    if len(hand) != INPUT_SIZE:
        raise InvalidInput(f"Expected {INPUT_SIZE} cards, got {len(hand)}")

    seen = set()
    for card in hand:
        if not isinstance(card, Card):
            raise InvalidInput(f"Not a card: {card!r}")
        if card in seen:
            raise InvalidInput(f"Duplicate card: {card.label}")
        seen.add(card)
    return hand


def _detect(
    cards: List[Card],
    by_rank: Dict[Rank, List[Card]],
    by_suit: Dict[Suit, List[Card]],
) -> Tuple[HandCategory, List[Card]]:
    run = straight_flush(by_suit)
    if run is not None:
        if run[-1].rank == Rank.TEN:
            return HandCategory.ROYAL_FLUSH, run
        return HandCategory.STRAIGHT_FLUSH, run

    best = four_of_a_kind(cards, by_rank)
    if best is not None:
        return HandCategory.FOUR_OF_A_KIND, best
    best = full_house(by_rank)
    if best is not None:
        return HandCategory.FULL_HOUSE, best
    best = flush(by_suit)
    if best is not None:
        return HandCategory.FLUSH, best
    best = straight(by_rank, by_suit)
    if best is not None:
        return HandCategory.STRAIGHT, best
    best = three_of_a_kind(cards, by_rank)
    if best is not None:
        return HandCategory.THREE_OF_A_KIND, best
    best = two_pair(cards, by_rank)
    if best is not None:
        return HandCategory.TWO_PAIR, best
    best = one_pair(cards, by_rank)
    if best is not None:
        return HandCategory.ONE_PAIR, best
    return HandCategory.HIGH_CARD, high_card(cards)


# Groupings and selection helpers ---------------------------------------


def group_by_rank(cards: Iterable[Card]) -> Dict[Rank, List[Card]]:
    """Map each rank to its cards, in input order."""
    groups: Dict[Rank, List[Card]] = {}
    for card in cards:
        groups.setdefault(card.rank, []).append(card)
    return groups


def group_by_suit(cards: Iterable[Card]) -> Dict[Suit, List[Card]]:
    groups: Dict[Suit, List[Card]] = {}
    for card in cards:
        groups.setdefault(card.suit, []).append(card)
    return groups


def descending(cards: Iterable[Card]) -> List[Card]:
    # sorted() is stable, so equal ranks keep their input order.
    return sorted(cards, key=lambda card: card.rank, reverse=True)


def ranks_with_count(by_rank: Dict[Rank, List[Card]], count: int) -> List[Rank]:
    """Ranks held exactly `count` times, highest first."""
    return sorted((rank for rank, group in by_rank.items() if len(group) == count), reverse=True)


def fill_kickers(cards: Iterable[Card], chosen: Sequence[Card]) -> List[Card]:
    """Top up `chosen` to five cards with the highest cards not already in it."""
    hand = list(chosen)
    for card in descending(card for card in cards if card not in chosen):
        if len(hand) >= HAND_SIZE:
            break
        hand.append(card)
    return hand


def flush_suit(by_suit: Dict[Suit, List[Card]]) -> Optional[Suit]:
    candidates = [suit for suit, group in by_suit.items() if len(group) >= HAND_SIZE]
    if not candidates:
        return None
    # Only one suit can reach five of seven cards; the key still settles a tie.
    return max(candidates, key=lambda suit: (len(by_suit[suit]), max(card.rank for card in by_suit[suit])))


def find_run(ranks: Iterable[Rank]) -> Optional[List[Rank]]:
    """Return the five highest ranks of the highest run of consecutive ranks.

    Aces only play high: A-2-3-4-5 is not a run.
    """
    present = sorted(set(ranks), reverse=True)
    for idx in range(len(present) - HAND_SIZE + 1):
        window = present[idx : idx + HAND_SIZE]
        if window[0] - window[-1] == HAND_SIZE - 1:
            return window
    return None


# Category detectors ----------------------------------------------------


def straight_flush(by_suit: Dict[Suit, List[Card]]) -> Optional[List[Card]]:
    suit = flush_suit(by_suit)
    if suit is None:
        return None
    suited = {card.rank: card for card in by_suit[suit]}
    run = find_run(suited)
    if run is None:
        return None
    return [suited[rank] for rank in run]


def four_of_a_kind(cards: List[Card], by_rank: Dict[Rank, List[Card]]) -> Optional[List[Card]]:
    quads = ranks_with_count(by_rank, 4)
    if not quads:
        return None
    return fill_kickers(cards, by_rank[quads[0]])


def full_house(by_rank: Dict[Rank, List[Card]]) -> Optional[List[Card]]:
    trips = ranks_with_count(by_rank, 3)
    if not trips:
        return None
    triple = trips[0]
    # A second set of trips can supply the pair.
    pairs = sorted((rank for rank, group in by_rank.items() if rank != triple and len(group) >= 2), reverse=True)
    if not pairs:
        return None
    return by_rank[triple] + by_rank[pairs[0]][:2]


def flush(by_suit: Dict[Suit, List[Card]]) -> Optional[List[Card]]:
    suit = flush_suit(by_suit)
    if suit is None:
        return None
    return descending(by_suit[suit])[:HAND_SIZE]


def straight(by_rank: Dict[Rank, List[Card]], by_suit: Dict[Suit, List[Card]]) -> Optional[List[Card]]:
    run = find_run(by_rank)
    if run is None:
        return None
    # Where a rank is held twice, prefer the card in the most common suit
    # (first seen on a tie), otherwise the first card of that rank.
    preferred = max(by_suit, key=lambda suit: len(by_suit[suit]))
    hand = []
    for rank in run:
        group = by_rank[rank]
        hand.append(next((card for card in group if card.suit == preferred), group[0]))
    return hand


def three_of_a_kind(cards: List[Card], by_rank: Dict[Rank, List[Card]]) -> Optional[List[Card]]:
    trips = ranks_with_count(by_rank, 3)
    if not trips:
        return None
    return fill_kickers(cards, by_rank[trips[0]])


def two_pair(cards: List[Card], by_rank: Dict[Rank, List[Card]]) -> Optional[List[Card]]:
    pairs = ranks_with_count(by_rank, 2)
    if len(pairs) < 2:
        return None
    return fill_kickers(cards, by_rank[pairs[0]] + by_rank[pairs[1]])


def one_pair(cards: List[Card], by_rank: Dict[Rank, List[Card]]) -> Optional[List[Card]]:
    pairs = ranks_with_count(by_rank, 2)
    if not pairs:
        return None
    return fill_kickers(cards, by_rank[pairs[0]])


def high_card(cards: List[Card]) -> List[Card]:
    return descending(cards)[:HAND_SIZE]

"""Best-five-of-seven poker hand evaluation."""

from .cards import Card, Rank, Suit, cards_to_labels, format_card, parse_card, parse_cards
from .errors import HandEvalError, InvalidCardNotation, InvalidInput
from .evaluator import evaluate, evaluate_labels
from .models import EvaluationResult, HandCategory, OutputConfig, format_result

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "cards_to_labels",
    "format_card",
    "parse_card",
    "parse_cards",
    "HandEvalError",
    "InvalidCardNotation",
    "InvalidInput",
    "evaluate",
    "evaluate_labels",
    "EvaluationResult",
    "HandCategory",
    "OutputConfig",
    "format_result",
]

from __future__ import annotations


class HandEvalError(ValueError):
    """Base class for every error raised by the hand evaluator."""


class InvalidCardNotation(HandEvalError):
    """A card string could not be decoded into a rank and a suit."""

    def __init__(self, label: str, reason: str) -> None:
        super().__init__(f"Invalid card {label!r}: {reason}")
        self.label = label
        self.reason = reason


class InvalidInput(HandEvalError):
    """The evaluator was handed something other than 7 distinct cards."""

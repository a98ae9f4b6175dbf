import pytest

from handeval.cards import parse_card
from handeval.errors import HandEvalError, InvalidCardNotation, InvalidInput
from handeval.evaluator import evaluate, evaluate_labels

from .helpers import cards


def test_evaluate_rejects_too_few_cards():
    with pytest.raises(InvalidInput, match="Expected 7 cards, got 6"):
        evaluate(cards("8♦ 3♠ 5♦ 8♣ J♦ 3♦"))


def test_evaluate_rejects_too_many_cards():
    with pytest.raises(InvalidInput, match="Expected 7 cards, got 8"):
        evaluate(cards("8♦ 3♠ 5♦ 8♣ J♦ 3♦ 2♦ A♠"))


def test_evaluate_rejects_duplicate_cards():
    with pytest.raises(InvalidInput, match="Duplicate card: 8♦"):
        evaluate(cards("8♦ 3♠ 5♦ 8♣ J♦ 3♦ 8♦"))


def test_evaluate_rejects_non_card_values():
    with pytest.raises(InvalidInput, match="Not a card"):
        evaluate(cards("8♦ 3♠ 5♦ 8♣ J♦ 3♦") + ["2♦"])  # type: ignore[operator]
    with pytest.raises(InvalidInput, match="Expected a sequence"):
        evaluate(None)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "label, message",
    [
        ("1♦", "unrecognized rank '1'"),
        ("11♠", "unrecognized rank '11'"),
        ("B♥", "unrecognized rank 'B'"),
        ("A?", "unrecognized suit '\\?'"),
        ("10x", "unrecognized suit 'x'"),
        ("A", "expected a rank followed by a suit"),
        ("", "expected a rank followed by a suit"),
    ],
)
def test_parse_card_rejects_bad_notation(label, message):
    with pytest.raises(InvalidCardNotation, match=message) as excinfo:
        parse_card(label)
    assert excinfo.value.label == label


def test_parse_card_rejects_non_strings():
    with pytest.raises(InvalidCardNotation, match="expected a string"):
        parse_card(10)  # type: ignore[arg-type]


def test_bad_label_aborts_whole_evaluation():
    with pytest.raises(InvalidCardNotation, match="Invalid card '0♦'"):
        evaluate_labels(["8♦", "3♠", "5♦", "0♦", "J♦", "3♦", "2♦"])


def test_errors_share_a_value_error_base():
    assert issubclass(InvalidCardNotation, HandEvalError)
    assert issubclass(InvalidInput, HandEvalError)
    with pytest.raises(ValueError):
        evaluate([])

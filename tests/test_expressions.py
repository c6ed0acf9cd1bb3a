import pytest

from algokit.expressions import (
    evaluate_postfix,
    infix_to_postfix,
    is_balanced,
    is_operand,
    precedence,
)


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("((a+b)*(c-d))", True),
        ("(((a+b)*(c-d))", False),
        ("((a+b)*(c-d)))", False),
        ("", True),
        (")(", False),
        ("a+b", True),
    ],
)
def test_is_balanced(expr, expected):
    assert is_balanced(expr) is expected


@pytest.mark.parametrize(
    "op, expected",
    [("+", 1), ("-", 1), ("*", 2), ("/", 2), ("#", 0), ("a", 0)],
)
def test_precedence(op, expected):
    assert precedence(op) == expected


@pytest.mark.parametrize("ch", ["+", "-", "*", "/"])
def test_operators_are_not_operands(ch):
    assert is_operand(ch) is False


@pytest.mark.parametrize("ch", ["a", "7", "#", "("])
def test_other_characters_are_operands(ch):
    assert is_operand(ch) is True


def test_infix_to_postfix_worked_example():
    assert infix_to_postfix("a+b*c-d/e") == "abc*+de/-"


@pytest.mark.parametrize("infix", ["a+b*c-d/e", "a*b+c", "a-b-c", "x", "a/b*c+d-e"])
def test_infix_to_postfix_preserves_operands_and_operators(infix):
    postfix = infix_to_postfix(infix)
    assert len(postfix) == len(infix)
    assert [c for c in postfix if is_operand(c)] == [c for c in infix if is_operand(c)]
    assert sorted(c for c in postfix if not is_operand(c)) == sorted(
        c for c in infix if not is_operand(c)
    )


def test_infix_to_postfix_empty():
    assert infix_to_postfix("") == ""


def test_evaluate_postfix_worked_example():
    assert evaluate_postfix("234*+82/-") == 10


def test_evaluate_converted_infix():
    assert evaluate_postfix(infix_to_postfix("2+3*4")) == 14


def test_evaluate_division_truncates_toward_zero():
    assert evaluate_postfix("27-3/") == -1


def test_evaluate_single_digit():
    assert evaluate_postfix("7") == 7


def test_evaluate_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("50/")


@pytest.mark.parametrize("postfix", ["2+", "+", ""])
def test_evaluate_malformed(postfix):
    with pytest.raises(ValueError):
        evaluate_postfix(postfix)


def test_evaluate_rejects_non_digit_operand():
    with pytest.raises(ValueError):
        evaluate_postfix("a2+")
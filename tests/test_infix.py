import pytest

from dsakit.infix import infix_to_postfix, is_operand, main, precedence


def test_worked_example():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_left_associative_operators():
    assert infix_to_postfix("a-b-c") == "ab-c-"


def test_higher_precedence_first():
    assert infix_to_postfix("a*b+c") == "ab*c+"


def test_precedence_ordering():
    assert precedence("*") == precedence("/")
    assert precedence("+") == precedence("-")
    assert precedence("*") > precedence("+")
    assert precedence("a") == 0


@pytest.mark.parametrize("character", ["+", "-", "*", "/"])
def test_operators_are_not_operands(character):
    assert is_operand(character) is False


@pytest.mark.parametrize("character", ["a", "Z", "7", "("])
def test_other_characters_are_operands(character):
    assert is_operand(character) is True


@pytest.mark.parametrize(
    "expression", ["a+b*c", "a*b-c/d", "x/y/z+w", "p-q*r+s/t", "m"]
)
def test_postfix_preserves_symbols_and_operand_order(expression):
    result = infix_to_postfix(expression)
    assert sorted(result) == sorted(expression)
    operands_in = [c for c in expression if is_operand(c)]
    operands_out = [c for c in result if is_operand(c)]
    assert operands_out == operands_in


def test_single_operand_and_empty():
    assert infix_to_postfix("q") == "q"
    assert infix_to_postfix("") == ""


def test_main_prints_default(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "Postfix: " + infix_to_postfix("a+b*c")


def test_main_uses_argument(capsys):
    assert main(["x*y-z"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "Postfix: " + infix_to_postfix("x*y-z")
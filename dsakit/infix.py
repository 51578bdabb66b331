"""Conversion of infix expressions to postfix notation."""

from __future__ import annotations

_OPERATORS = frozenset("+-*/")


def precedence(symbol: str) -> int:
    """Return the binding strength of an operator, 0 for anything else."""
    if symbol in ("+", "-"):
        return 1
    if symbol in ("*", "/"):
        return 2
    return 0


def is_operand(character: str) -> bool:
    """Return whether ``character`` is not one of the four operators."""
    return character not in _OPERATORS


def infix_to_postfix(infix: str) -> str:
    """Convert an expression of single-character operands to postfix."""
    output: list[str] = []
    operators: list[str] = []
    for character in infix:
        if is_operand(character):
            output.append(character)
            continue
        while operators and precedence(character) <= precedence(operators[-1]):
            output.append(operators.pop())
        operators.append(character)
    output.extend(reversed(operators))
    return "".join(output)


def main(argv: list[str] | None = None) -> int:
    """Print the postfix form of an expression, by default ``a+b*c``."""
    expression = argv[0] if argv else "a+b*c"
    print(f"Postfix: {infix_to_postfix(expression)}")
    return 0


if __name__ == "__main__":
    import sys

    raise SystemExit(main(sys.argv[1:]))
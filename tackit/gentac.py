"""Three-address code for a few fixed example constructs."""

from __future__ import annotations

import sys

_ARITHMETIC = {
    "(a + b) * (c - d)": (
        "t1 = a + b",
        "t2 = c - d",
        "x = t1 * t2",
    ),
}

_IF_ELSE = {
    "x > y": (
        "if x > y goto L1",
        "t2 = x - y",
        "z = t2",
        "goto L2",
        "L1: t1 = x + y",
        "z = t1",
        "L2:",
    ),
}

_WHILE = {
    "x < y": (
        "L1: if x >= y goto L2",
        "t1 = x + 1",
        "x = t1",
        "goto L1",
        "L2:",
    ),
}


def arithmetic_tac(expression: str) -> list[str]:
    """Return TAC for a known arithmetic expression, or an empty list."""
    return list(_ARITHMETIC.get(expression, ()))


def if_else_tac(condition: str) -> list[str]:
    """Return TAC for an if-else on a known condition, or an empty list."""
    return list(_IF_ELSE.get(condition, ()))


def while_tac(condition: str) -> list[str]:
    """Return TAC for a while loop on a known condition, or an empty list."""
    return list(_WHILE.get(condition, ()))


def main(argv: list[str] | None = None) -> int:
    """Print TAC for the three built-in examples."""
    sections = (
        ("Arithmetic Expression", arithmetic_tac("(a + b) * (c - d)")),
        ("If-Else Statement", if_else_tac("x > y")),
        ("While Loop", while_tac("x < y")),
    )
    blocks = [
        "\n".join([f"Generating TAC for {title}:", *lines])
        for title, lines in sections
    ]
    print("\n\n".join(blocks))
    return 0


if __name__ == "__main__":
    sys.exit(main())
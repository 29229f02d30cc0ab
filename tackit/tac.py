"""Three-address code instructions and two simple optimisation passes."""

from __future__ import annotations

import sys
from collections.abc import Collection, Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Instruction:
    """A single three-address instruction: ``result = arg1 op arg2``."""

    result: str
    op: str
    arg1: str
    arg2: str = ""

    def format(self) -> str:
        """Render the instruction as ``result = arg1 op arg2``."""
        return f"{self.result} = {self.arg1} {self.op} {self.arg2}"


def eliminate_dead_code(
    instructions: Iterable[Instruction], used: Collection[str] = ()
) -> list[str]:
    """Report each instruction, flagging those whose result is not in ``used``."""
    lines = []
    for instruction in instructions:
        if instruction.result in used:
            lines.append(instruction.format())
        else:
            lines.append(f"Dead code found: {instruction.format()}")
    return lines


def eliminate_common_subexpressions(instructions: Iterable[Instruction]) -> list[str]:
    """Rewrite instructions, reusing operands already recorded as expressions."""
    seen: list[str] = []
    lines = []
    for instruction in instructions:
        match = next(
            (
                expr
                for expr in seen
                if expr == instruction.arg1 and expr == instruction.arg2
            ),
            None,
        )
        if match is not None:
            lines.append(
                f"{instruction.result} = {match} {instruction.op} {instruction.arg2}"
            )
        else:
            seen.append(instruction.arg1)
            lines.append(instruction.format())
    return lines


_SAMPLE = (
    Instruction("t1", "+", "a", "b"),
    Instruction("t2", "+", "c", "d"),
    Instruction("t3", "*", "t1", "t2"),
    Instruction("t4", "+", "t1", "t2"),
    Instruction("x", "=", "t3", ""),
)


def main(argv: list[str] | None = None) -> int:
    """Run both passes over a built-in sample program and print the results."""
    del argv
    print("Dead Code Elimination:")
    for line in eliminate_dead_code(_SAMPLE):
        print(line)
    print("\nCommon Subexpression Elimination:")
    for line in eliminate_common_subexpressions(_SAMPLE):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
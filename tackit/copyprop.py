"""Copy propagation over three-address code."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import replace

from tackit.tac import Instruction


def is_copy(instruction: Instruction) -> bool:
    """Return True for a plain copy ``result = arg1``."""
    return instruction.op == "=" and not instruction.arg2


def format_instruction(instruction: Instruction) -> str:
    """Render a binary instruction as ``r = a op b`` and a copy as ``r = a``."""
    if instruction.arg2:
        return (
            f"{instruction.result} = {instruction.arg1} "
            f"{instruction.op} {instruction.arg2}"
        )
    return f"{instruction.result} = {instruction.arg1}"


def propagate_copies(instructions: Iterable[Instruction]) -> list[Instruction]:
    """Replace later uses of each copy's target with the value it copies."""
    copies: list[tuple[str, str]] = []
    rewritten: list[Instruction] = []
    for instruction in instructions:
        arg1, arg2 = instruction.arg1, instruction.arg2
        for target, source in copies:
            if arg1 == target:
                arg1 = source
            if arg2 == target:
                arg2 = source
        updated = replace(instruction, arg1=arg1, arg2=arg2)
        rewritten.append(updated)
        if is_copy(updated):
            copies.append((updated.result, updated.arg1))
    return rewritten


def remove_dead_copies(instructions: Sequence[Instruction]) -> list[Instruction]:
    """Drop copy statements whose result no later instruction reads."""
    kept: list[Instruction] = []
    for position, instruction in enumerate(instructions):
        if is_copy(instruction):
            later = instructions[position + 1 :]
            if not any(
                instruction.result in (other.arg1, other.arg2) for other in later
            ):
                continue
        kept.append(instruction)
    return kept


def optimise(instructions: Iterable[Instruction]) -> list[Instruction]:
    """Propagate copies, then remove the copies left unused."""
    return remove_dead_copies(propagate_copies(instructions))


_SAMPLE = (
    Instruction("t1", "=", "a", ""),
    Instruction("t2", "=", "t1", ""),
    Instruction("t3", "+", "t2", "b"),
    Instruction("t4", "*", "t3", "c"),
)


def main(argv: list[str] | None = None) -> int:
    """Show a built-in sample program before and after copy propagation."""
    del argv
    print("Original TAC:")
    for instruction in _SAMPLE:
        print(format_instruction(instruction))
    print("\nOptimized TAC after Copy Propagation:")
    for instruction in optimise(_SAMPLE):
        print(format_instruction(instruction))
    return 0


if __name__ == "__main__":
    sys.exit(main())
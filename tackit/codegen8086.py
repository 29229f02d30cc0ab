"""8086 assembly for simple binary three-address instructions."""

from __future__ import annotations

import sys
from collections.abc import Iterable

DEFAULT_REGISTERS = ("AX", "BX", "CX", "DX")


class CodegenError(Exception):
    """Raised when assembly cannot be produced for an instruction."""


class RegisterAllocator:
    """Hands out registers from a fixed pool, never reusing one."""

    def __init__(self, registers: Iterable[str] = DEFAULT_REGISTERS) -> None:
        self._free = iter(tuple(registers))

    def allocate(self) -> str:
        """Return the next free register."""
        try:
            return next(self._free)
        except StopIteration:
            raise CodegenError("Error: Not enough registers!") from None


def parse_instruction(text: str) -> tuple[str, str, str, str]:
    """Split ``result = arg1 op arg2`` into (result, arg1, op, arg2)."""
    tokens = text.split()
    if len(tokens) < 5 or tokens[1] != "=":
        raise CodegenError(f"Malformed instruction: {text!r}")
    result, _, arg1, op, arg2 = tokens[:5]
    return result, arg1, op, arg2


def generate_assembly(text: str, allocator: RegisterAllocator) -> list[str]:
    """Return the assembly lines for one instruction."""
    _, arg1, op, arg2 = parse_instruction(text)
    reg1 = allocator.allocate()
    reg2 = allocator.allocate()
    reg_result = allocator.allocate()

    if op == "+":
        return [
            f"MOV {reg1}, {arg1}",
            f"ADD {reg1}, {arg2}",
            f"MOV {reg_result}, {reg1}",
        ]
    if op == "-":
        return [
            f"MOV {reg1}, {arg1}",
            f"SUB {reg1}, {arg2}",
            f"MOV {reg_result}, {reg1}",
        ]
    if op == "*":
        return [
            f"MOV {reg1}, {arg1}",
            f"MOV {reg2}, {arg2}",
            f"IMUL {reg2}",
            f"MOV {reg_result}, AX",
        ]
    if op == "/":
        return [
            f"MOV {reg1}, {arg1}",
            f"MOV {reg2}, {arg2}",
            f"DIV {reg2}",
            f"MOV {reg_result}, AX",
        ]
    raise CodegenError(f"Unsupported operation: {op}")


_SAMPLE = (
    "t0 = t1 + t2",
    "t1 = t3 - t4",
    "t2 = t5 * t6",
    "t3 = t7 / t8",
)


def main(argv: list[str] | None = None) -> int:
    """Generate assembly for the built-in sample instructions."""
    del argv
    print("Generating 8086 Assembly Code:\n")
    allocator = RegisterAllocator()
    try:
        for text in _SAMPLE:
            for line in generate_assembly(text, allocator):
                print(line)
    except CodegenError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
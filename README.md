# tackit

Small compiler-construction tools built around three-address code (TAC):

- `tackit.gentac` – TAC for a few fixed example constructs,
- `tackit.tac` – the `Instruction` type and dead-code / common-subexpression passes,
- `tackit.copyprop` – copy propagation and removal of unused copies,
- `tackit.codegen8086` – 8086 assembly for simple binary TAC instructions,
- `tackit.strings` – string utilities with an interactive front end.

No third-party libraries are needed.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Commands

| Command                     | What it does |
|-----------------------------|--------------|
| `tackit-gentac`             | Prints TAC for `(a + b) * (c - d)`, an if-else on `x > y` and a while loop on `x < y` |
| `tackit-optimise`           | Runs the dead-code and common-subexpression passes over a built-in sample program |
| `tackit-copyprop`           | Prints a built-in sample program before and after copy propagation |
| `tackit-8086`               | Emits 8086 assembly for built-in sample instructions |
| `tackit-strings COMMAND`    | Runs one interactive string operation, reading from standard input |

`tackit-strings` takes one of: `compare`, `concat`, `find`, `freq`,
`nospace`, `replace`, `upper`. It prompts for its input, prints the result
and exits with status 1 (message on standard error) if `replace` is not
given a character.

`tackit-8086` uses a single `RegisterAllocator` over `AX`, `BX`, `CX`, `DX`.
Each instruction takes three registers and none are ever released, so the
run prints the code for the first instruction, then
`Error: Not enough registers!` and exits with status 1.

## Library use

```python
from tackit.codegen8086 import CodegenError, RegisterAllocator, generate_assembly
from tackit.copyprop import format_instruction, optimise
from tackit.gentac import arithmetic_tac
from tackit.strings import find_substring, to_upper
from tackit.tac import Instruction

print(to_upper("hello"))                   # HELLO
print(find_substring("compiler", "pile"))  # 3
print("\n".join(arithmetic_tac("(a + b) * (c - d)")))

program = [
    Instruction("t1", "=", "a"),
    Instruction("t2", "=", "t1"),
    Instruction("t3", "+", "t2", "b"),
]
for instruction in optimise(program):
    print(format_instruction(instruction))  # t3 = a + b

allocator = RegisterAllocator()
print("\n".join(generate_assembly("t0 = t1 + t2", allocator)))
```

### `tackit.strings`

`to_upper` (ASCII letters only), `find_substring` (index or `None`),
`strings_equal`, `remove_spaces`, `char_frequencies` (counts ordered by
code point, newlines ignored), `concatenate`, and `replace_char`, which
raises `ValueError` unless `old` and `new` are single characters.

### `tackit.tac`

`Instruction(result, op, arg1, arg2="")` is a frozen dataclass;
`Instruction.format()` renders `result = arg1 op arg2`.

- `eliminate_dead_code(instructions, used=())` returns one line per
  instruction, prefixed `Dead code found: ` when its result is not in
  `used`. With the default, every instruction is reported as dead.
- `eliminate_common_subexpressions(instructions)` records each
  instruction's first operand and rewrites an instruction only when both
  of its operands equal an operand already recorded.

### `tackit.copyprop`

`is_copy`, `format_instruction`, `propagate_copies` (later uses of a copy's
target are replaced by its source), `remove_dead_copies` (copies no later
instruction reads are dropped) and `optimise`, which applies both.

### `tackit.codegen8086`

`parse_instruction` splits `result = arg1 op arg2`; `generate_assembly`
supports `+`, `-`, `*` and `/`. A malformed instruction, an unsupported
operator or an exhausted `RegisterAllocator` raises `CodegenError`.

## What it does not do

- `tackit.gentac` has no expression parser: it only knows the three
  example inputs above and returns an empty list for anything else.
- There is no lexer or parser for source programs; every pass works on
  `Instruction` values or TAC strings supplied by the caller.
- The 8086 emitter does no real register allocation: registers are handed
  out once and never reused.
"""Small string utilities and an interactive front end for them."""

from __future__ import annotations

import argparse
import string
import sys
from collections import Counter
from collections.abc import Callable

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def to_upper(text: str) -> str:
    """Return ``text`` with ASCII letters converted to upper case."""
    return text.translate(_ASCII_UPPER)


def find_substring(text: str, substring: str) -> int | None:
    """Return the index of the first occurrence of ``substring``, or None."""
    index = text.find(substring)
    return None if index < 0 else index


def strings_equal(first: str, second: str) -> bool:
    """Return True when both strings are identical."""
    return first == second


def remove_spaces(text: str) -> str:
    """Return ``text`` with every space character removed."""
    return text.replace(" ", "")


def char_frequencies(text: str) -> dict[str, int]:
    """Count each character, ignoring newlines, ordered by code point."""
    counts = Counter(ch for ch in text if ch != "\n")
    return {ch: counts[ch] for ch in sorted(counts, key=ord)}


def concatenate(first: str, second: str) -> str:
    """Return ``second`` appended to ``first``."""
    return first + second


def replace_char(text: str, old: str, new: str) -> str:
    """Replace every occurrence of the character ``old`` with ``new``."""
    if len(old) != 1 or len(new) != 1:
        raise ValueError("old and new must be single characters")
    return text.replace(old, new)


def _read_line(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""


def _read_char(prompt: str) -> str:
    line = _read_line(prompt).lstrip()
    if not line:
        raise ValueError("expected a character")
    return line[0]


def _run_upper() -> None:
    text = _read_line("Enter a string: ")
    print(f"Uppercase: {to_upper(text)}")


def _run_find() -> None:
    text = _read_line("Enter the main string: ")
    substring = _read_line("Enter the substring to search: ")
    index = find_substring(text, substring)
    if index is None:
        print("Substring not found.")
    else:
        print(f"Substring found at index {index}")


def _run_compare() -> None:
    first = _read_line("Enter the first string: ")
    second = _read_line("Enter the second string: ")
    if strings_equal(first, second):
        print("The strings are the same.")
    else:
        print("The strings are different.")


def _run_nospace() -> None:
    text = _read_line("Enter a string: ")
    print(f"String without spaces: {remove_spaces(text)}")


def _run_freq() -> None:
    text = _read_line("Enter a string: ")
    print("Character frequencies:")
    for ch, count in char_frequencies(text).items():
        print(f"'{ch}' = {count}")


def _run_concat() -> None:
    first = _read_line("Enter the first string: ")
    second = _read_line("Enter the second string: ")
    print(f"Concatenated string: {concatenate(first, second)}")


def _run_replace() -> None:
    text = _read_line("Enter a string: ")
    old = _read_char("Enter the character to replace: ")
    new = _read_char("Enter the new character: ")
    print(f"Modified string: {replace_char(text, old, new)}")


_COMMANDS: dict[str, Callable[[], None]] = {
    "upper": _run_upper,
    "find": _run_find,
    "compare": _run_compare,
    "nospace": _run_nospace,
    "freq": _run_freq,
    "concat": _run_concat,
    "replace": _run_replace,
}


def main(argv: list[str] | None = None) -> int:
    """Run one interactive string operation chosen on the command line."""
    parser = argparse.ArgumentParser(
        prog="tackit-strings", description="Interactive string operations."
    )
    parser.add_argument("command", choices=sorted(_COMMANDS))
    args = parser.parse_args(argv)
    try:
        _COMMANDS[args.command]()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
import io

import pytest

from tackit.strings import (
    char_frequencies,
    concatenate,
    find_substring,
    main,
    remove_spaces,
    replace_char,
    strings_equal,
    to_upper,
)


def _run(monkeypatch, capsys, argv, stdin_text):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
    code = main(argv)
    return code, capsys.readouterr()


def test_to_upper_ascii_matches_upper():
    text = "Hello, World 123!"
    assert to_upper(text) == text.upper()


def test_to_upper_leaves_non_ascii_alone():
    assert to_upper("é") == "é"


def test_to_upper_is_idempotent():
    once = to_upper("mixed Case text")
    assert to_upper(once) == once


@pytest.mark.parametrize(
    "text,sub",
    [("hello world", "world"), ("abcabc", "cab"), ("aaaa", "aa"), ("xyz", "x")],
)
def test_find_substring_locates_first_occurrence(text, sub):
    index = find_substring(text, sub)
    assert text[index:index + len(sub)] == sub
    assert sub not in text[: index + len(sub) - 1]


def test_find_substring_missing_returns_none():
    assert find_substring("hello", "world") is None


def test_find_substring_longer_than_text():
    assert find_substring("ab", "abc") is None


def test_find_substring_empty_needle_is_at_start():
    assert find_substring("abc", "") == 0


def test_strings_equal():
    assert strings_equal("same", "same") is True
    assert strings_equal("same", "Same") is False


def test_remove_spaces_invariants():
    text = " a b  c d "
    result = remove_spaces(text)
    assert " " not in result
    assert len(result) == len(text) - text.count(" ")


def test_remove_spaces_keeps_tabs():
    assert remove_spaces("a\tb") == "a\tb"


def test_char_frequencies_totals_and_order():
    text = "banana split\n"
    freq = char_frequencies(text)
    assert "\n" not in freq
    assert sum(freq.values()) == len(text) - 1
    assert list(freq) == sorted(freq, key=ord)
    assert freq["a"] == text.count("a")


def test_char_frequencies_empty():
    assert char_frequencies("") == {}


def test_concatenate_parts():
    result = concatenate("foo", "bar")
    assert result.startswith("foo")
    assert result.endswith("bar")
    assert len(result) == 6


def test_replace_char_replaces_all():
    text = "a-b-c-d"
    result = replace_char(text, "-", "+")
    assert "-" not in result
    assert result.count("+") == text.count("-")
    assert len(result) == len(text)


def test_replace_char_rejects_multichar():
    with pytest.raises(ValueError):
        replace_char("abc", "ab", "x")


def test_main_find_reports_index(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["find"], "hello world\nworld\n")
    assert code == 0
    assert "Substring found at index 6" in out.out


def test_main_find_not_found(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["find"], "hello\nxyz\n")
    assert "Substring not found." in out.out


def test_main_compare(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, ["compare"], "abc\nabc\n")
    assert "The strings are the same." in out.out
    _, out = _run(monkeypatch, capsys, ["compare"], "abc\nabd\n")
    assert "The strings are different." in out.out


def test_main_upper(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, ["upper"], "shout\n")
    assert "Uppercase: SHOUT" in out.out


def test_main_replace_missing_char_fails(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["replace"], "abc\n\n")
    assert code == 1
    assert "error" in out.err


def test_main_freq_lists_characters(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, ["freq"], "aab\n")
    assert "Character frequencies:" in out.out
    assert "'a' = 2" in out.out
    assert "'b' = 1" in out.out
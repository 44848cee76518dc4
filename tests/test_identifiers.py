import random

import pytest

from labtasks.identifiers import (
    NoIdentifiersError,
    average_identifier_length,
    generate_identifier_file,
)


def _write(tmp_path, text, name="input.txt"):
    path = tmp_path / name
    path.write_text(text, encoding="ascii")
    return path


def test_empty_file_has_no_identifiers(tmp_path):
    path = _write(tmp_path, "")
    with pytest.raises(NoIdentifiersError):
        average_identifier_length(path)


def test_only_digits_and_punctuation_has_no_identifiers(tmp_path):
    path = _write(tmp_path, "123 456, +-*/ 7")
    with pytest.raises(NoIdentifiersError):
        average_identifier_length(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        average_identifier_length(tmp_path / "nonexistent.txt")


def test_single_identifier(tmp_path):
    path = _write(tmp_path, "test123")
    assert average_identifier_length(path) == 7.0


def test_multiple_identifiers(tmp_path):
    path = _write(tmp_path, "test123 abc def456")
    assert average_identifier_length(path) == pytest.approx(5.333333, abs=1e-6)


def test_leading_digits_are_not_part_of_identifier(tmp_path):
    path = _write(tmp_path, "12ab")
    assert average_identifier_length(path) == 2.0


def test_separator_kind_does_not_matter(tmp_path):
    spaced = _write(tmp_path, "alpha beta gamma", "a.txt")
    mixed = _write(tmp_path, "alpha+beta;\ngamma", "b.txt")
    assert average_identifier_length(spaced) == average_identifier_length(mixed)


def test_generated_file_round_trip(tmp_path):
    path = tmp_path / "generated.txt"
    generate_identifier_file(path, 10, 5, random.Random(42))
    text = path.read_text(encoding="ascii")
    tokens = text.split()
    assert len(tokens) == 10
    assert text.endswith(" ")
    for token in tokens:
        assert token[0].isalpha()
        assert token.isalnum()
        assert 1 <= len(token) <= 5
    expected = sum(map(len, tokens)) / len(tokens)
    assert average_identifier_length(path) == pytest.approx(expected)


def test_generation_is_reproducible_with_seed(tmp_path):
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    generate_identifier_file(first, 20, 8, random.Random(7))
    generate_identifier_file(second, 20, 8, random.Random(7))
    assert first.read_text() == second.read_text()


def test_zero_identifiers_gives_empty_file(tmp_path):
    path = tmp_path / "none.txt"
    generate_identifier_file(path, 0, 5, random.Random(1))
    assert path.read_text() == ""


def test_invalid_max_length_raises(tmp_path):
    with pytest.raises(ValueError):
        generate_identifier_file(tmp_path / "bad.txt", 3, 0, random.Random(1))
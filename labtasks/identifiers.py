"""Average identifier length of a text file, and random identifier files."""

from __future__ import annotations

import os
import random
import re
from pathlib import Path

_IDENTIFIER = re.compile(rb"[A-Za-z][A-Za-z0-9]*")
_DIGITS = "0123456789"
_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_CHARSET = _DIGITS + _LETTERS

PathLike = str | os.PathLike


class NoIdentifiersError(ValueError):
    """Raised when a file holds no identifiers at all."""


def average_identifier_length(path: PathLike) -> float:
    """Return the mean length of the identifiers found in the file at *path*.

    An identifier starts with an ASCII letter and runs on through ASCII
    letters and digits.  Raises ``OSError`` if the file cannot be read and
    ``NoIdentifiersError`` if it holds no identifiers.
    """
    data = Path(path).read_bytes()
    lengths = [len(match) for match in _IDENTIFIER.findall(data)]
    if not lengths:
        raise NoIdentifiersError(f"no identifiers in {os.fspath(path)!r}")
    return sum(lengths) / len(lengths)


def generate_identifier_file(
    path: PathLike,
    count: int,
    max_length: int,
    rng: random.Random | None = None,
) -> None:
    """Write *count* random identifiers, each followed by a space, to *path*.

    Every identifier is 1 to *max_length* characters long and starts with a
    letter.  Raises ``ValueError`` if *max_length* is below 1.
    """
    if max_length < 1:
        raise ValueError("max_length must be at least 1")
    rng = rng or random.Random()
    last = len(_CHARSET) - 1
    with open(path, "w", encoding="ascii", newline="") as out:
        for _ in range(count):
            length = rng.randint(1, max_length)
            first = _LETTERS[rng.randint(0, last) % len(_LETTERS)]
            rest = "".join(_CHARSET[rng.randint(0, last)] for _ in range(length - 1))
            out.write(f"{first}{rest} ")
"""Polynomial derivative from a coefficient file, and random coefficient files."""

from __future__ import annotations

import os
import random
import re
from pathlib import Path

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

PathLike = str | os.PathLike


class EmptyPolynomialError(ValueError):
    """Raised when a coefficient file holds no coefficients."""


def _read_coefficients(text: str) -> list[float]:
    """Read leading whitespace-separated numbers, stopping at the first non-number."""
    coefficients = []
    position = 0
    while match := _NUMBER.match(text, position):
        coefficients.append(float(match.group(1)))
        position = match.end()
    return coefficients


def polynomial_derivative(path: PathLike, x: float) -> float:
    """Return the derivative at *x* of the polynomial whose coefficients are in *path*.

    Coefficients are listed from the highest power down.  Raises ``OSError``
    if the file cannot be read and ``EmptyPolynomialError`` if it holds no
    coefficients.
    """
    coefficients = _read_coefficients(Path(path).read_text())
    if not coefficients:
        raise EmptyPolynomialError(f"no coefficients in {os.fspath(path)!r}")
    degree = len(coefficients) - 1
    x = float(x)
    return sum(
        (
            (degree - index) * coefficient * x ** (degree - index - 1)
            for index, coefficient in enumerate(coefficients[:-1])
        ),
        0.0,
    )


def generate_polynomial_file(
    path: PathLike,
    degree: int,
    min_coeff: float,
    max_coeff: float,
    rng: random.Random | None = None,
) -> None:
    """Write ``degree + 1`` random coefficients from [min_coeff, max_coeff] to *path*."""
    rng = rng or random.Random()
    with open(path, "w", encoding="ascii", newline="") as out:
        for _ in range(degree + 1):
            out.write(f"{rng.uniform(min_coeff, max_coeff):g} ")
"""Interactive generator of input files for the identifier and polynomial tasks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import Callable, TypeVar

from labtasks.identifiers import generate_identifier_file
from labtasks.polynomial import generate_polynomial_file

T = TypeVar("T")


class _InputError(Exception):
    """Raised when console input ends early or cannot be parsed."""


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str, convert: Callable[[str], T]) -> T:
    print(prompt, end="", flush=True)
    try:
        return convert(next(tokens))
    except (StopIteration, ValueError) as exc:
        raise _InputError from exc


def main(argv: list[str] | None = None) -> int:
    """Ask which file to generate, where, and with what parameters, then write it."""
    argparse.ArgumentParser(
        description="Generate input files for the identifier and polynomial tasks."
    ).parse_args(argv)

    print("Генератор тестовых данных")
    print("1. Сгенерировать файл с идентификаторами (вариант 10)")
    print("2. Сгенерировать файл с коэффициентами многочлена (вариант 11)")

    tokens = _tokens(sys.stdin)
    try:
        choice = _ask(tokens, "Выберите действие: ", int)
        file_path = _ask(tokens, "Введите путь для сохранения файла: ", str)

        if choice == 1:
            count = _ask(tokens, "Введите количество идентификаторов: ", int)
            max_length = _ask(tokens, "Введите максимальную длину идентификатора: ", int)
            generate = lambda: generate_identifier_file(file_path, count, max_length)
        elif choice == 2:
            degree = _ask(tokens, "Введите степень многочлена: ", int)
            min_coeff = _ask(tokens, "Введите минимальный коэффициент: ", float)
            max_coeff = _ask(tokens, "Введите максимальный коэффициент: ", float)
            generate = lambda: generate_polynomial_file(
                file_path, degree, min_coeff, max_coeff
            )
        else:
            print("Неверный выбор!", file=sys.stderr)
            return 0
    except _InputError:
        print()
        print("Неверный ввод!", file=sys.stderr)
        return 1

    try:
        generate()
    except (OSError, ValueError):
        print("Ошибка при создании файла!", file=sys.stderr)
    else:
        print("Файл успешно создан!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
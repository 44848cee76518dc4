"""Self-checks and an interactive check for the polynomial-derivative task."""

from __future__ import annotations

import argparse
import sys
import tempfile
from pathlib import Path
from typing import Callable

from labtasks.polynomial import (
    EmptyPolynomialError,
    generate_polynomial_file,
    polynomial_derivative,
)
from labtasks.runner import CheckResult, SuiteRunner


def _prompt_line(prompt: str) -> str:
    print(prompt, end="", flush=True)
    return sys.stdin.readline().rstrip("\r\n")


def _prompt_number(prompt: str) -> float:
    """Read the next whitespace-separated token as a number; 0.0 if there is none."""
    print(prompt, end="", flush=True)
    for line in sys.stdin:
        tokens = line.split()
        if tokens:
            try:
                return float(tokens[0])
            except ValueError:
                return 0.0
    return 0.0


def _derivative_of(directory: Path, name: str, content: str, x: float) -> float | None:
    path = directory / name
    path.write_text(content)
    try:
        return polynomial_derivative(path, x)
    except (OSError, EmptyPolynomialError):
        return None
    finally:
        path.unlink()


def _check_empty_file(directory: Path) -> bool:
    path = directory / "test_empty.txt"
    path.write_text("")
    try:
        polynomial_derivative(path, 1.0)
    except EmptyPolynomialError:
        return True
    except OSError:
        return False
    finally:
        path.unlink()
    return False


def _check_nonexistent_file(directory: Path) -> bool:
    try:
        polynomial_derivative(directory / "nonexistent.txt", 1.0)
    except OSError:
        return True
    except EmptyPolynomialError:
        return False
    return False


def _check_constant(directory: Path) -> bool:
    return _derivative_of(directory, "test_constant.txt", "5.0", 1.0) == 0.0


def _check_linear(directory: Path) -> bool:
    return _derivative_of(directory, "test_linear.txt", "2.0 1.0", 1.0) == 2.0


def _check_quadratic(directory: Path) -> bool:
    return _derivative_of(directory, "test_quadratic.txt", "1.0 2.0 1.0", 2.0) == 6.0


def _check_generator(directory: Path) -> bool:
    path = directory / "test_generated.txt"
    try:
        generate_polynomial_file(path, 3, -10.0, 10.0)
        polynomial_derivative(path, 1.0)
    except (OSError, ValueError):
        return False
    return True


_BASIC_CHECKS: list[tuple[str, Callable[[Path], bool]]] = [
    ("Тест пустого файла", _check_empty_file),
    ("Тест несуществующего файла", _check_nonexistent_file),
    ("Тест константного многочлена", _check_constant),
    ("Тест линейного многочлена", _check_linear),
    ("Тест квадратичного многочлена", _check_quadratic),
]


def run_builtin_checks(runner: SuiteRunner) -> list[CheckResult]:
    """Run the fixed checks of the polynomial task and return their results."""
    with tempfile.TemporaryDirectory() as scratch:
        directory = Path(scratch)
        results = [
            runner.run_test(name, lambda check=check: check(directory))
            for name, check in _BASIC_CHECKS
        ]
        results.append(
            runner.run_test_with_time(
                "Тест генератора", lambda: _check_generator(directory)
            )
        )
    return results


def main(argv: list[str] | None = None) -> int:
    """Run the built-in checks, then one check on a file and point given at the prompt."""
    parser = argparse.ArgumentParser(description="Check the polynomial-derivative task.")
    parser.add_argument("output_file", nargs="?", help="report file to append to")
    args = parser.parse_args(argv)

    if args.output_file is not None:
        output_file, append = args.output_file, True
    else:
        output_file = _prompt_line("Введите имя файла для результатов тестирования: ")
        append = False

    try:
        with SuiteRunner(output_file, append) as runner:
            run_builtin_checks(runner)

            input_file = _prompt_line("Введите путь к файлу с коэффициентами: ")
            x = _prompt_number("Введите точку x: ")
            error = None
            value = 0.0
            try:
                value = polynomial_derivative(input_file, x)
            except EmptyPolynomialError:
                error = "файл пуст"
            except OSError:
                error = "файл не открыт"

            def interactive() -> bool:
                if error is None:
                    print(f"Значение производной в точке {x:g}: {value:g}")
                    return True
                print(f"Ошибка: {error}", file=sys.stderr)
                return False

            runner.run_test("Интерактивный тест", interactive)
            runner.write_results()
    except Exception as exc:
        print(f"Ошибка: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Self-checks and an interactive check for the identifier-length task."""

from __future__ import annotations

import argparse
import sys
import tempfile
from pathlib import Path
from typing import Callable

from labtasks.identifiers import (
    NoIdentifiersError,
    average_identifier_length,
    generate_identifier_file,
)
from labtasks.runner import CheckResult, SuiteRunner


def _prompt_line(prompt: str) -> str:
    print(prompt, end="", flush=True)
    return sys.stdin.readline().rstrip("\r\n")


def _check_empty_file(directory: Path) -> bool:
    path = directory / "test_empty.txt"
    path.write_text("")
    try:
        average_identifier_length(path)
    except NoIdentifiersError:
        return True
    except OSError:
        return False
    return False


def _check_nonexistent_file(directory: Path) -> bool:
    try:
        average_identifier_length(directory / "nonexistent.txt")
    except OSError:
        return True
    except NoIdentifiersError:
        return False
    return False


def _average_of(directory: Path, name: str, content: str) -> float | None:
    path = directory / name
    path.write_text(content)
    try:
        return average_identifier_length(path)
    except (OSError, NoIdentifiersError):
        return None
    finally:
        path.unlink()


def _check_single_identifier(directory: Path) -> bool:
    return _average_of(directory, "test_single.txt", "test123") == 7.0


def _check_multiple_identifiers(directory: Path) -> bool:
    result = _average_of(directory, "test_multiple.txt", "test123 abc def456")
    return result is not None and abs(result - 5.333333) < 1e-6


def _check_generator(directory: Path) -> bool:
    path = directory / "test_generated.txt"
    try:
        generate_identifier_file(path, 10, 5)
        average_identifier_length(path)
    except (OSError, ValueError):
        return False
    return True


_BASIC_CHECKS: list[tuple[str, Callable[[Path], bool]]] = [
    ("Тест пустого файла", _check_empty_file),
    ("Тест несуществующего файла", _check_nonexistent_file),
    ("Тест одного идентификатора", _check_single_identifier),
    ("Тест нескольких идентификаторов", _check_multiple_identifiers),
]


def run_builtin_checks(runner: SuiteRunner) -> list[CheckResult]:
    """Run the fixed checks of the identifier task and return their results."""
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
    """Run the built-in checks, then one check on a file named at the prompt."""
    parser = argparse.ArgumentParser(description="Check the identifier-length task.")
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

            input_file = _prompt_line("Введите путь к файлу для тестирования: ")
            error = None
            average = 0.0
            try:
                average = average_identifier_length(input_file)
            except NoIdentifiersError:
                error = "нет идентификаторов"
            except OSError:
                error = "файл не открыт"

            def interactive() -> bool:
                if error is None:
                    print(f"Средняя длина идентификатора: {average:g}")
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
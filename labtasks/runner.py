"""Run named checks and write a summary report to a text file."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Callable

PathLike = str | os.PathLike


@dataclass
class CheckResult:
    """Outcome of one named check."""

    name: str
    success: bool
    message: str = ""
    execution_time: float = 0.0


class SuiteRunner:
    """Collects check results and writes them to a report file.

    The report file is opened (truncated, or appended to when *append* is
    true) as soon as the runner is created, and a dated header is written.
    Raises ``OSError`` if the file cannot be opened.
    """

    def __init__(self, output_file: PathLike, append: bool = False) -> None:
        self.output_file = output_file
        self.results: list[CheckResult] = []
        self._out = open(output_file, "a" if append else "w", encoding="utf-8")
        self._out.write(f"=== Результаты тестирования от {time.ctime()}\n===\n\n")

    def run_test(self, name: str, func: Callable[[], bool]) -> CheckResult:
        """Run *func* and record whether it returned a true value."""
        result = CheckResult(name=name, success=bool(func()))
        self.results.append(result)
        return result

    def run_test_with_time(self, name: str, func: Callable[[], bool]) -> CheckResult:
        """Run *func*, recording its outcome and how long it took in seconds."""
        start = time.perf_counter()
        success = bool(func())
        elapsed = time.perf_counter() - start
        result = CheckResult(name=name, success=success, execution_time=elapsed)
        self.results.append(result)
        return result

    def write_results(self) -> None:
        """Write every recorded result and the overall statistics to the report."""
        lines = ["Итоги тестирования:", "==================", ""]
        fixed = False
        for result in self.results:
            lines.append(f"Тест: {result.name}")
            lines.append(f"Результат: {'ПРОЙДЕН' if result.success else 'НЕ ПРОЙДЕН'}")
            if result.execution_time > 0:
                fixed = True
                lines.append(f"Время выполнения: {result.execution_time:.6f} сек")
            lines.append("-------------------")

        total = len(self.results)
        passed = sum(result.success for result in self.results)
        percent = passed * 100.0 / total if total else 0.0
        # Once a time has been written the report switches to fixed notation.
        shown = f"{percent:.6f}" if fixed else f"{percent:g}"

        lines += [
            "",
            "Общая статистика:",
            f"Всего тестов: {total}",
            f"Пройдено: {passed}",
            f"Не пройдено: {total - passed}",
            f"Процент успешных: {shown}%",
        ]
        self._out.write("\n".join(lines) + "\n")
        self._out.flush()

    def close(self) -> None:
        """Close the report file."""
        self._out.close()

    def __enter__(self) -> SuiteRunner:
        return self

    def __exit__(self, *args) -> None:
        self.close()
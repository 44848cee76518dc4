import time

import pytest

from labtasks.runner import CheckResult, SuiteRunner

HEADER = "=== Результаты тестирования от "


def test_header_written_on_open(tmp_path):
    report = tmp_path / "report.txt"
    with SuiteRunner(report):
        pass
    text = report.read_text(encoding="utf-8")
    assert text.startswith(HEADER)
    assert "\n===\n\n" in text


def test_overwrite_mode_truncates(tmp_path):
    report = tmp_path / "report.txt"
    report.write_text("old content\n", encoding="utf-8")
    with SuiteRunner(report, False):
        pass
    text = report.read_text(encoding="utf-8")
    assert "old content" not in text
    assert text.count(HEADER) == 1


def test_append_mode_keeps_previous(tmp_path):
    report = tmp_path / "report.txt"
    with SuiteRunner(report):
        pass
    with SuiteRunner(report, True):
        pass
    assert report.read_text(encoding="utf-8").count(HEADER) == 2


def test_unopenable_file_raises(tmp_path):
    with pytest.raises(OSError):
        SuiteRunner(tmp_path / "missing" / "report.txt")


def test_run_test_records_result(tmp_path):
    with SuiteRunner(tmp_path / "r.txt") as runner:
        passed = runner.run_test("a", lambda: True)
        failed = runner.run_test("b", lambda: False)
    assert passed == CheckResult(name="a", success=True)
    assert failed.success is False
    assert failed.execution_time == 0.0
    assert runner.results == [passed, failed]


def test_run_test_with_time_measures(tmp_path):
    def slow():
        time.sleep(0.01)
        return True

    with SuiteRunner(tmp_path / "r.txt") as runner:
        result = runner.run_test_with_time("slow", slow)
    assert result.success is True
    assert result.execution_time > 0


def test_write_results_summary(tmp_path):
    report = tmp_path / "r.txt"
    with SuiteRunner(report) as runner:
        runner.run_test("first", lambda: True)
        runner.run_test("second", lambda: False)
        runner.write_results()
    lines = report.read_text(encoding="utf-8").splitlines()
    assert "Итоги тестирования:" in lines
    assert "Тест: first" in lines
    assert lines[lines.index("Тест: first") + 1] == "Результат: ПРОЙДЕН"
    assert lines[lines.index("Тест: second") + 1] == "Результат: НЕ ПРОЙДЕН"
    assert "Всего тестов: 2" in lines
    assert "Пройдено: 1" in lines
    assert "Не пройдено: 1" in lines
    assert "Процент успешных: 50%" in lines
    assert not any(line.startswith("Время выполнения:") for line in lines)


def test_timed_result_switches_to_fixed_notation(tmp_path):
    def timed():
        time.sleep(0.001)
        return True

    report = tmp_path / "r.txt"
    with SuiteRunner(report) as runner:
        result = runner.run_test_with_time("timed", timed)
        runner.write_results()
    assert result.success is True
    assert result.execution_time > 0
    lines = report.read_text(encoding="utf-8").splitlines()
    assert f"Время выполнения: {result.execution_time:.6f} сек" in lines
    assert "Процент успешных: 100.000000%" in lines


def test_empty_report_statistics(tmp_path):
    report = tmp_path / "r.txt"
    with SuiteRunner(report) as runner:
        runner.write_results()
    lines = report.read_text(encoding="utf-8").splitlines()
    assert "Всего тестов: 0" in lines
    assert "Процент успешных: 0%" in lines
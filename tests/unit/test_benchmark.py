"""
Тесты для Benchmark harness и CLI

Проверяет:
1. Отчёт и вывод run_benchmark
2. Отсутствие расхождений стратегий на опорной серии
3. InvalidArgument для слишком короткой серии
4. Коды возврата CLI
"""

import io
import logging

import pytest

from src.benchmark import BenchmarkConfig, BenchmarkReport, run_benchmark
from src.benchmark.__main__ import main
from src.core.math.special_values import InvalidArgument


class TestRunBenchmark:
    """Тесты run_benchmark."""

    def test_reference_run_consistent(self):
        """Опорная серия: стратегии совпадают на всех целях."""
        stream = io.StringIO()
        report = run_benchmark(200, stream=stream)

        assert isinstance(report, BenchmarkReport)
        assert report.count == 200
        assert report.series_length == 200
        assert report.mismatches == 0
        assert report.is_consistent() is True

    def test_output_lines(self):
        """Три строки: A, B и количество расхождений."""
        stream = io.StringIO()
        run_benchmark(50, stream=stream)

        lines = stream.getvalue().splitlines()
        assert len(lines) == 3
        assert lines[0].startswith("A: Took ")
        assert lines[1].startswith("B: Took ")
        assert lines[2] == "Number of mismatching records: 0/50"

    def test_default_stream_is_stdout(self, capsys):
        run_benchmark(20)
        captured = capsys.readouterr()
        assert "Number of mismatching records: 0/20" in captured.out

    def test_short_series_raises(self):
        """Серия короче 3 элементов → InvalidArgument."""
        with pytest.raises(InvalidArgument):
            run_benchmark(2, stream=io.StringIO())

    def test_degenerate_config_raises(self):
        """Вырожденная генерация (y = 0) → InvalidArgument."""
        with pytest.raises(InvalidArgument):
            run_benchmark(100, BenchmarkConfig(x=1.0, y=0.0), stream=io.StringIO())

    def test_short_series_reports_mismatches(self, caplog):
        """Короткая серия: окно closed-form выходит за диапазон, расхождения логируются."""
        with caplog.at_level(logging.WARNING, logger="src.benchmark.harness"):
            report = run_benchmark(5, stream=io.StringIO())

        assert report.mismatches > 0
        assert "Strategies disagree" in caplog.text

    def test_default_config(self):
        config = BenchmarkConfig()
        assert config.x == 1.0
        assert config.y == 5062.5


class TestCli:
    """Тесты точки входа python -m src.benchmark."""

    def test_success(self, capsys):
        assert main(["--count", "30"]) == 0
        assert "Number of mismatching records: 0/30" in capsys.readouterr().out

    def test_invalid_argument_exit_code(self):
        assert main(["--count", "2"]) == 2

    def test_degenerate_parameters_exit_code(self):
        """y = 0 даёт серию из одного элемента."""
        assert main(["--count", "10", "--x", "1.0", "--y", "0.0"]) == 2

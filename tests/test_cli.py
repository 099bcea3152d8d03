"""
Tests for CLI Simulator
"""

import csv

import pytest

from montyhall_core.config import SimulationConfig
from montyhall_core.simulation import SimulationEngine
from cli_simulator.main import main, parse_args
from cli_simulator.config_builder import build_config, format_config_summary
from cli_simulator.runner import format_progress_bar, run_simulation
from cli_simulator.reporter import (
    format_proportion_table,
    export_to_csv,
    export_detailed_csv,
)


@pytest.fixture
def config() -> SimulationConfig:
    return SimulationConfig(n_games=20, random_seed=42)


class TestConfigBuilder:
    """引数から設定への変換"""

    def test_defaults(self) -> None:
        config = build_config(parse_args([]))
        assert config.n_games == 100
        assert config.random_seed is None
        assert config.n_workers == 1

    def test_options(self) -> None:
        args = parse_args(["-n", "500", "--seed", "7", "-w", "2", "-d", "3"])
        config = build_config(args)
        assert config == SimulationConfig(
            n_games=500, random_seed=7, n_workers=2, decimals=3
        )

    def test_format_summary(self) -> None:
        text = format_config_summary(SimulationConfig(n_games=1000, random_seed=3))
        assert "Games: 1,000 (2,000 round results)" in text
        assert "Random Seed: 3" in text


class TestRunner:
    """実行と進捗表示"""

    def test_progress_bar(self) -> None:
        assert format_progress_bar(15, 30).endswith(" 50.0% (15/30)")
        assert "[" + "=" * 30 + "]" in format_progress_bar(30, 30)

    def test_run_simulation(self, config: SimulationConfig, capsys) -> None:
        results = run_simulation(config, show_progress=True, verbose=True)
        out = capsys.readouterr().out

        assert len(results.records) == 40
        assert "(20/20)" in out
        assert "stay win rate" in out
        assert "switch win rate" in out


class TestReporter:
    """レポート出力"""

    def test_proportion_table(self, config: SimulationConfig) -> None:
        results = SimulationEngine(config).run()
        table = format_proportion_table(results, decimals=2)
        lines = table.splitlines()

        assert lines[0].split() == ["strategy", "|", "WIN", "|", "LOSE", "|"]
        assert lines[2].startswith("stay")
        assert lines[3].startswith("switch")

    def test_export_to_csv(self, config: SimulationConfig, tmp_path) -> None:
        results = SimulationEngine(config).run()
        path = tmp_path / "summary.csv"
        export_to_csv(results, str(path))

        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 4
        stay_total = sum(int(r["count"]) for r in rows if r["strategy"] == "stay")
        assert stay_total == 20

    def test_export_detailed_csv(self, config: SimulationConfig, tmp_path) -> None:
        results = SimulationEngine(config).run()
        detailed = export_detailed_csv(results, str(tmp_path / "out.csv"))

        assert detailed.name == "out_detailed.csv"
        with open(detailed, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 40
        assert {r["strategy"] for r in rows} == {"stay", "switch"}


class TestMain:
    """エントリーポイント"""

    def test_main_success(self, tmp_path, capsys) -> None:
        output = tmp_path / "results.csv"
        code = main([
            "-n", "200", "--seed", "1", "--no-progress", "-o", str(output)
        ])
        out = capsys.readouterr().out

        assert code == 0
        assert "Outcome proportions by strategy" in out
        assert "Best Strategy:" in out
        assert output.exists()
        assert (tmp_path / "results_detailed.csv").exists()

    def test_main_invalid_games(self, capsys) -> None:
        code = main(["-n", "0", "--no-progress"])
        out = capsys.readouterr().out

        assert code == 1
        assert "Configuration error" in out

"""
Tests for result aggregation
"""

import pytest
import numpy as np
import pandas as pd

from montyhall_core.config import Strategy, Outcome
from montyhall_core.game import Arrangement
from montyhall_core.results import RoundResult, GameResult, TrialRecordSet


def make_game(round_id: int, first_pick: int, car_door: int) -> GameResult:
    """最初の選択とcarの位置からGameResultを組み立てる"""
    contents = ["goat", "goat", "goat"]
    contents[car_door - 1] = "car"
    arrangement = Arrangement(tuple(contents))
    opened = next(d for d in (1, 2, 3) if d != first_pick and d != car_door)
    stay_win = first_pick == car_door
    return GameResult(
        round_id=round_id,
        arrangement=arrangement,
        first_pick=first_pick,
        opened_door=opened,
        stay=RoundResult(
            round_id, Strategy.STAY, Outcome.WIN if stay_win else Outcome.LOSE
        ),
        switch=RoundResult(
            round_id, Strategy.SWITCH, Outcome.LOSE if stay_win else Outcome.WIN
        ),
    )


@pytest.fixture
def results() -> TrialRecordSet:
    """stay 1勝3敗 / switch 3勝1敗 の4ラウンド"""
    games = [
        make_game(0, first_pick=1, car_door=1),
        make_game(1, first_pick=1, car_door=2),
        make_game(2, first_pick=2, car_door=3),
        make_game(3, first_pick=3, car_door=1),
    ]
    return TrialRecordSet.from_games(games, config_summary={"random_seed": 42})


class TestTrialRecordSet:
    """TrialRecordSetのテスト"""

    def test_from_games_order(self, results: TrialRecordSet) -> None:
        """ラウンドごとにstay, switchの順で展開されること"""
        assert len(results) == 8
        assert results.n_games == 4
        assert results.records[0] == RoundResult(0, Strategy.STAY, Outcome.WIN)
        assert results.records[1] == RoundResult(0, Strategy.SWITCH, Outcome.LOSE)

    def test_count_outcomes(self, results: TrialRecordSet) -> None:
        """戦略×勝敗の件数"""
        counts = results.count_outcomes()
        assert counts[Strategy.STAY] == {Outcome.WIN: 1, Outcome.LOSE: 3}
        assert counts[Strategy.SWITCH] == {Outcome.WIN: 3, Outcome.LOSE: 1}

    def test_compute_proportions(self, results: TrialRecordSet) -> None:
        """行方向の割合"""
        props = results.compute_proportions()
        assert props == {
            "stay": {"WIN": 0.25, "LOSE": 0.75},
            "switch": {"WIN": 0.75, "LOSE": 0.25},
        }

    def test_compute_proportions_rounding(self) -> None:
        """指定桁数で丸められること"""
        games = [make_game(i, 1, car) for i, car in enumerate([1, 2, 3])]
        props = TrialRecordSet.from_games(games).compute_proportions(decimals=2)
        assert props["stay"]["WIN"] == 0.33
        assert props["switch"]["WIN"] == 0.67

        raw = TrialRecordSet.from_games(games).compute_proportions(decimals=None)
        assert raw["stay"]["WIN"] == pytest.approx(1 / 3)

    def test_empty_proportions(self) -> None:
        """結果が空でもゼロ除算しないこと"""
        props = TrialRecordSet(records=[]).compute_proportions()
        assert props["stay"] == {"WIN": 0.0, "LOSE": 0.0}

    def test_win_rate_and_best(self, results: TrialRecordSet) -> None:
        assert results.win_rate(Strategy.STAY) == 0.25
        assert results.win_rate(Strategy.SWITCH) == 0.75
        assert results.best_strategy() is Strategy.SWITCH

    def test_running_win_rate(self, results: TrialRecordSet) -> None:
        """累積勝率"""
        running = results.running_win_rate(Strategy.STAY)
        np.testing.assert_allclose(running, [1.0, 0.5, 1 / 3, 0.25])

    def test_to_dataframe(self, results: TrialRecordSet) -> None:
        """DataFrameに変換"""
        df = results.to_dataframe()
        assert list(df.columns) == ["round_id", "strategy", "outcome"]
        assert len(df) == 8
        assert (df["strategy"] == "stay").sum() == 4

    def test_games_dataframe(self, results: TrialRecordSet) -> None:
        """ラウンド詳細のDataFrame"""
        df = results.games_dataframe()
        assert len(df) == 4
        assert df.loc[1, "arrangement"] == "goat/car/goat"
        assert df.loc[1, "car_door"] == 2
        assert df.loc[1, "switch_outcome"] == "WIN"

    def test_crosstab(self, results: TrialRecordSet) -> None:
        """割合表（行=戦略, 列=勝敗）"""
        table = results.crosstab()
        assert list(table.index) == ["stay", "switch"]
        assert list(table.columns) == ["WIN", "LOSE"]
        assert table.loc["stay", "WIN"] == 0.25
        assert table.loc["switch", "LOSE"] == 0.25

    def test_crosstab_missing_outcome(self) -> None:
        """一方の勝敗が出ていなくても列がそろうこと"""
        games = [make_game(0, 1, 1)]
        table = TrialRecordSet.from_games(games).crosstab()
        assert table.loc["stay", "WIN"] == 1.0
        assert table.loc["stay", "LOSE"] == 0.0

    def test_to_csv(self, results: TrialRecordSet, tmp_path) -> None:
        """CSV出力"""
        path = tmp_path / "results.csv"
        results.to_csv(str(path))
        df = pd.read_csv(path)
        assert len(df) == 8
        assert set(df["outcome"]) == {"WIN", "LOSE"}

    def test_summary_text(self, results: TrialRecordSet) -> None:
        """サマリテキスト"""
        text = results.get_summary_text()
        assert "Games: 4" in text
        assert "Seed: 42" in text
        assert "stay: WIN 0.25 (1), LOSE 0.75 (3)" in text
        assert "switch: WIN 0.75 (3), LOSE 0.25 (1)" in text

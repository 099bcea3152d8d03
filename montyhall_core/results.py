"""
Result data structures for Monty Hall Simulator

ラウンド結果と全ラウンドの集約
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Tuple
import numpy as np
from numpy.typing import NDArray
import pandas as pd

from .config import Strategy, Outcome
from .game import Arrangement


@dataclass(frozen=True)
class RoundResult:
    """1ラウンド・1戦略の結果"""

    round_id: int                  # ラウンドID（0始まり）
    strategy: Strategy             # 戦略
    outcome: Outcome               # 勝敗

    @property
    def is_win(self) -> bool:
        return self.outcome is Outcome.WIN

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式に変換"""
        return {
            "round_id": self.round_id,
            "strategy": self.strategy.value,
            "outcome": self.outcome.value,
        }


@dataclass(frozen=True)
class GameResult:
    """1ラウンドの結果（同じ配置・選択に対するstay/switchの対）"""

    round_id: int
    arrangement: Arrangement       # ゲーム配置
    first_pick: int                # 最初の選択
    opened_door: int               # 司会者が開けたドア
    stay: RoundResult
    switch: RoundResult

    @property
    def results(self) -> Tuple[RoundResult, RoundResult]:
        """(stay, switch) の順のラウンド結果"""
        return (self.stay, self.switch)

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式に変換"""
        return {
            "round_id": self.round_id,
            "arrangement": "/".join(self.arrangement.contents),
            "car_door": self.arrangement.car_door,
            "first_pick": self.first_pick,
            "opened_door": self.opened_door,
            "stay_outcome": self.stay.outcome.value,
            "switch_outcome": self.switch.outcome.value,
        }


@dataclass
class TrialRecordSet:
    """全ラウンドの結果を集約（生成順を保持）"""

    records: List[RoundResult]
    config_summary: Dict[str, Any] = field(default_factory=dict)
    games: List[GameResult] = field(default_factory=list)

    @classmethod
    def from_games(
        cls,
        games: List[GameResult],
        config_summary: Dict[str, Any] | None = None
    ) -> "TrialRecordSet":
        """ラウンド結果のリストから構築"""
        records = [r for game in games for r in game.results]
        return cls(
            records=records,
            config_summary=dict(config_summary or {}),
            games=list(games),
        )

    def __len__(self) -> int:
        return len(self.records)

    @property
    def n_games(self) -> int:
        """ラウンド数"""
        return len(self.records) // len(Strategy)

    def for_strategy(self, strategy: Strategy) -> List[RoundResult]:
        """指定した戦略の結果のみ（生成順）"""
        return [r for r in self.records if r.strategy is strategy]

    def count_outcomes(self) -> Dict[Strategy, Dict[Outcome, int]]:
        """
        戦略×勝敗の件数を集計

        Returns:
            {Strategy.STAY: {Outcome.WIN: n, Outcome.LOSE: n}, ...}
        """
        counts = {s: {o: 0 for o in Outcome} for s in Strategy}
        for r in self.records:
            counts[r.strategy][r.outcome] += 1
        return counts

    def compute_proportions(
        self,
        decimals: int | None = 2
    ) -> Dict[str, Dict[str, float]]:
        """
        戦略ごとの勝敗割合（行方向の割合）を計算

        Args:
            decimals: 丸め桁数（Noneなら丸めない）

        Returns:
            {"stay": {"WIN": p, "LOSE": p}, "switch": {...}} 形式の辞書
        """
        proportions: Dict[str, Dict[str, float]] = {}
        for strategy, row in self.count_outcomes().items():
            total = sum(row.values())
            proportions[strategy.value] = {}
            for outcome, count in row.items():
                p = count / total if total > 0 else 0.0
                if decimals is not None:
                    p = round(p, decimals)
                proportions[strategy.value][outcome.value] = p
        return proportions

    def win_rate(self, strategy: Strategy) -> float:
        """指定した戦略の勝率（丸めなし）"""
        return self.compute_proportions(decimals=None)[strategy.value][
            Outcome.WIN.value
        ]

    def best_strategy(self) -> Strategy:
        """勝率が最も高い戦略（同率ならSTAY）"""
        return max(Strategy, key=self.win_rate)

    def running_win_rate(self, strategy: Strategy) -> NDArray[np.float64]:
        """
        ラウンド経過に伴う累積勝率

        Returns:
            i番目の要素が最初のi+1ラウンドでの勝率となる配列
        """
        wins = np.array(
            [r.is_win for r in self.for_strategy(strategy)], dtype=np.float64
        )
        if len(wins) == 0:
            return wins
        return np.cumsum(wins) / np.arange(1, len(wins) + 1)

    def to_dataframe(self) -> pd.DataFrame:
        """
        結果をDataFrameに変換

        Returns:
            round_id, strategy, outcome 列を持つDataFrame
        """
        records = [r.to_dict() for r in self.records]
        return pd.DataFrame(records, columns=["round_id", "strategy", "outcome"])

    def games_dataframe(self) -> pd.DataFrame:
        """ラウンド詳細（配置・選択・開示ドア）をDataFrameに変換"""
        return pd.DataFrame([g.to_dict() for g in self.games])

    def crosstab(self, decimals: int = 2) -> pd.DataFrame:
        """
        戦略×勝敗の割合表（表示用）

        Returns:
            行=strategy, 列=outcome の行方向割合DataFrame
        """
        df = self.to_dataframe()
        table = pd.crosstab(df["strategy"], df["outcome"], normalize="index")
        table = table.reindex(
            index=[s.value for s in Strategy],
            columns=[o.value for o in Outcome],
            fill_value=0.0,
        )
        return table.round(decimals)

    def to_csv(self, path: str, index: bool = False) -> None:
        """
        結果をCSVに出力

        Args:
            path: 出力ファイルパス
            index: インデックスを出力するか
        """
        self.to_dataframe().to_csv(path, index=index)

    def get_summary_text(self, decimals: int = 2) -> str:
        """
        結果のサマリテキストを生成

        Returns:
            人間可読なサマリ文字列
        """
        props = self.compute_proportions(decimals=decimals)
        counts = self.count_outcomes()

        lines = [
            "=== Simulation Results ===",
            f"Games: {self.n_games}",
            f"Seed: {self.config_summary.get('random_seed', 'N/A')}",
            "",
        ]
        for strategy in Strategy:
            row = props[strategy.value]
            lines.append(
                f"{strategy.value}: WIN {row['WIN']:.{decimals}f} "
                f"({counts[strategy][Outcome.WIN]}), "
                f"LOSE {row['LOSE']:.{decimals}f} "
                f"({counts[strategy][Outcome.LOSE]})"
            )

        return "\n".join(lines)

"""
Configuration classes for Monty Hall Simulator
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple
import numpy as np

from .exceptions import ConfigurationError


DOORS: Tuple[int, ...] = (1, 2, 3)
GOAT = "goat"
CAR = "car"
DOOR_CONTENTS: Tuple[str, ...] = (GOAT, GOAT, CAR)

DEFAULT_N_GAMES = 100


def is_integer(value: object) -> bool:
    """intまたはnumpyの整数か（boolは除く）"""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


class Strategy(Enum):
    """参加者の戦略"""
    STAY = "stay"
    SWITCH = "switch"


class Outcome(Enum):
    """1ラウンドの勝敗"""
    WIN = "WIN"
    LOSE = "LOSE"


@dataclass(frozen=True)
class SimulationConfig:
    """シミュレーション全体の設定（イミュータブル）"""

    n_games: int = DEFAULT_N_GAMES      # ラウンド数（1〜1,000,000）
    random_seed: int | None = None      # 再現性用シード（オプション）
    n_workers: int = 1                  # 並列ワーカー数（1〜64）
    decimals: int = 2                   # 割合表示の小数桁数（0〜6）

    def __post_init__(self) -> None:
        """バリデーション"""
        # 整数チェック（numpyの整数はintに揃える）
        for name in ("n_games", "n_workers", "decimals"):
            value = getattr(self, name)
            if not is_integer(value):
                raise ConfigurationError(
                    f"{name}は整数である必要があります: {value!r}"
                )
            object.__setattr__(self, name, int(value))

        # ラウンド数チェック
        if not (1 <= self.n_games <= 1_000_000):
            raise ConfigurationError(
                f"ラウンド数は1〜1,000,000である必要があります: {self.n_games}"
            )

        # ワーカー数チェック
        if not (1 <= self.n_workers <= 64):
            raise ConfigurationError(
                f"ワーカー数は1〜64である必要があります: {self.n_workers}"
            )

        # 表示桁数チェック
        if not (0 <= self.decimals <= 6):
            raise ConfigurationError(
                f"小数桁数は0〜6である必要があります: {self.decimals}"
            )

        # シードチェック
        if self.random_seed is not None:
            if not is_integer(self.random_seed) or self.random_seed < 0:
                raise ConfigurationError(
                    f"シードは0以上の整数である必要があります: {self.random_seed!r}"
                )
            object.__setattr__(self, "random_seed", int(self.random_seed))

    @property
    def n_results(self) -> int:
        """生成されるラウンド結果の総数（戦略ごとに1件）"""
        return self.n_games * len(Strategy)

    def to_dict(self) -> dict:
        """設定を辞書形式に変換"""
        return {
            "n_games": self.n_games,
            "random_seed": self.random_seed,
            "n_workers": self.n_workers,
            "decimals": self.decimals,
        }

"""
Single-round building blocks for Monty Hall Simulator

ゲーム配置の生成、最初の選択、司会者のドア開示、戦略による最終選択、勝敗判定
"""

from dataclasses import dataclass
from typing import Sequence, Tuple
import numpy as np

from .config import DOORS, GOAT, CAR, DOOR_CONTENTS, Strategy, Outcome
from .exceptions import (
    InvalidArgumentError,
    InvalidArrangementError,
    InvalidDoorError,
)


@dataclass(frozen=True)
class Arrangement:
    """3つのドアの中身（ドア番号1〜3でアクセス）"""

    contents: Tuple[str, ...]

    def __post_init__(self) -> None:
        """バリデーション"""
        contents = tuple(self.contents)
        if (
            len(contents) != len(DOORS)
            or contents.count(CAR) != 1
            or contents.count(GOAT) != 2
        ):
            raise InvalidArrangementError(contents)
        contents = tuple(str(c) for c in contents)
        object.__setattr__(self, "contents", contents)

    def __getitem__(self, position: int) -> str:
        return self.contents[validate_door(position) - 1]

    def __iter__(self):
        return iter(self.contents)

    def __len__(self) -> int:
        return len(self.contents)

    @property
    def car_door(self) -> int:
        """carが置かれたドア番号"""
        return self.contents.index(CAR) + 1

    @property
    def goat_doors(self) -> Tuple[int, ...]:
        """goatが置かれたドア番号のタプル"""
        return tuple(d for d in DOORS if self[d] == GOAT)


def validate_door(position: object) -> int:
    """
    ドア番号を検証してintで返す

    Args:
        position: ドア番号（1〜3）

    Returns:
        検証済みのドア番号

    Raises:
        InvalidDoorError: 1〜3の整数でない場合
    """
    if isinstance(position, (bool, np.bool_)) or not isinstance(
        position, (int, np.integer)
    ):
        raise InvalidDoorError(position)
    if int(position) not in DOORS:
        raise InvalidDoorError(position)
    return int(position)


def as_arrangement(game: Arrangement | Sequence[str]) -> Arrangement:
    """シーケンスをArrangementに変換（検証込み）"""
    if isinstance(game, Arrangement):
        return game
    if isinstance(game, str):
        raise InvalidArrangementError((game,))
    return Arrangement(tuple(game))


def as_strategy(strategy: Strategy | str) -> Strategy:
    """文字列（"stay" / "switch"）もStrategyとして受け付ける"""
    if isinstance(strategy, Strategy):
        return strategy
    try:
        return Strategy(strategy)
    except ValueError:
        raise InvalidArgumentError(
            f"戦略は'stay'または'switch'である必要があります: {strategy!r}"
        ) from None


def _default_rng(rng: np.random.Generator | None) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def create_game(rng: np.random.Generator | None = None) -> Arrangement:
    """
    新しいゲーム配置を生成

    goat 2つとcar 1つを一様ランダムに並べ替える。

    Args:
        rng: 乱数生成器（省略時はシードなしの新規生成器）

    Returns:
        ゲーム配置
    """
    rng = _default_rng(rng)
    shuffled = rng.permutation(DOOR_CONTENTS)
    return Arrangement(tuple(str(c) for c in shuffled))


def select_door(rng: np.random.Generator | None = None) -> int:
    """
    参加者の最初の選択（1〜3の一様ランダム）

    Args:
        rng: 乱数生成器

    Returns:
        選択したドア番号
    """
    rng = _default_rng(rng)
    return int(rng.choice(DOORS))


def open_goat_door(
    arrangement: Arrangement | Sequence[str],
    pick: int,
    rng: np.random.Generator | None = None
) -> int:
    """
    司会者がgoatのドアを開ける

    Args:
        arrangement: ゲーム配置
        pick: 参加者が選択したドア番号
        rng: 乱数生成器（参加者がcarを選んでいる場合のみ使用）

    Returns:
        開けたドア番号（必ずgoat、かつ参加者の選択とは異なる）

    Note:
        参加者がcarを選んでいれば残り2つはどちらもgoatなのでランダムに選ぶ。
        goatを選んでいれば開けられるドアは1つに決まる。
    """
    game = as_arrangement(arrangement)
    pick = validate_door(pick)

    if game[pick] == CAR:
        goat_doors = game.goat_doors
        return int(_default_rng(rng).choice(goat_doors))

    return next(d for d in DOORS if d != pick and game[d] != CAR)


def change_door(strategy: Strategy | str, opened: int, pick: int) -> int:
    """
    戦略に従って最終選択を決める

    Args:
        strategy: STAYなら最初の選択のまま、SWITCHなら残りのドアへ変更
        opened: 司会者が開けたドア番号
        pick: 最初の選択

    Returns:
        最終的に選択したドア番号
    """
    strategy = as_strategy(strategy)
    opened = validate_door(opened)
    pick = validate_door(pick)

    if strategy is Strategy.STAY:
        return pick

    if opened == pick:
        raise InvalidDoorError(
            opened,
            f"開けたドアと選択したドアが同じです: opened={opened}, pick={pick}",
        )
    return next(d for d in DOORS if d != opened and d != pick)


def determine_winner(
    final_pick: int,
    arrangement: Arrangement | Sequence[str]
) -> Outcome:
    """
    勝敗を判定

    Args:
        final_pick: 最終選択のドア番号
        arrangement: ゲーム配置

    Returns:
        carならWIN、goatならLOSE
    """
    game = as_arrangement(arrangement)
    if game[final_pick] == CAR:
        return Outcome.WIN
    return Outcome.LOSE

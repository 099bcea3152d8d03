"""
Simulation engine for Monty Hall Simulator

1ラウンドの実行と、複数ラウンドの集約
"""

from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, List, Tuple
import numpy as np

from .config import DEFAULT_N_GAMES, SimulationConfig, Strategy, is_integer
from .exceptions import ConfigurationError
from .game import (
    create_game,
    select_door,
    open_goat_door,
    change_door,
    determine_winner,
)
from .results import RoundResult, GameResult, TrialRecordSet


def play_game(
    rng: np.random.Generator | None = None,
    round_id: int = 0
) -> GameResult:
    """
    1ラウンドを実行し、stay/switch両戦略の結果を返す

    Args:
        rng: 乱数生成器
        round_id: ラウンドID

    Returns:
        同じ配置・最初の選択・開示ドアに対する両戦略の結果

    Note:
        両戦略を同じ配置で評価するので、戦略の違いだけが比較される
    """
    if rng is None:
        rng = np.random.default_rng()

    arrangement = create_game(rng)
    first_pick = select_door(rng)
    opened_door = open_goat_door(arrangement, first_pick, rng)

    final_pick_stay = change_door(Strategy.STAY, opened_door, first_pick)
    final_pick_switch = change_door(Strategy.SWITCH, opened_door, first_pick)

    outcome_stay = determine_winner(final_pick_stay, arrangement)
    outcome_switch = determine_winner(final_pick_switch, arrangement)

    return GameResult(
        round_id=round_id,
        arrangement=arrangement,
        first_pick=first_pick,
        opened_door=opened_door,
        stay=RoundResult(round_id, Strategy.STAY, outcome_stay),
        switch=RoundResult(round_id, Strategy.SWITCH, outcome_switch),
    )


def play_n_games(
    n: int = DEFAULT_N_GAMES,
    rng: np.random.Generator | None = None
) -> TrialRecordSet:
    """
    n ラウンドを実行して結果を集約

    Args:
        n: ラウンド数（1以上）
        rng: 乱数生成器

    Returns:
        2n件のラウンド結果（生成順）

    Raises:
        ConfigurationError: nが1未満または整数でない場合
    """
    if not is_integer(n):
        raise ConfigurationError(f"ラウンド数は整数である必要があります: {n!r}")
    if n < 1:
        raise ConfigurationError(f"ラウンド数は1以上である必要があります: {n}")
    if rng is None:
        rng = np.random.default_rng()

    games = [play_game(rng, round_id) for round_id in range(int(n))]
    return TrialRecordSet.from_games(games, config_summary={"n_games": int(n)})


def play_rounds(
    start: int,
    stop: int,
    seed_sequence: np.random.SeedSequence
) -> List[GameResult]:
    """
    ラウンドID [start, stop) を1つの生成器で順に実行

    ワーカープロセスで呼ばれるのでモジュール直下に置く。
    """
    rng = np.random.default_rng(seed_sequence)
    return [play_game(rng, round_id) for round_id in range(start, stop)]


class SimulationEngine:
    """シミュレーション実行エンジン"""

    def __init__(
        self,
        config: SimulationConfig,
        progress_callback: Callable[[int, int], None] | None = None
    ) -> None:
        """
        Args:
            config: シミュレーション設定
            progress_callback: 進捗コールバック (current, total) -> None
        """
        self.config = config
        self.progress_callback = progress_callback

        # 乱数シード系列（並列時はここから子系列を分岐）
        self.seed_sequence = np.random.SeedSequence(config.random_seed)

    def run(self) -> TrialRecordSet:
        """
        全ラウンドを実行

        Returns:
            シミュレーション結果
        """
        n_games = self.config.n_games

        if self.progress_callback:
            self.progress_callback(0, n_games)

        if self.config.n_workers == 1:
            games = self._run_sequential(n_games)
        else:
            games = self._run_parallel(n_games)

        if self.progress_callback:
            self.progress_callback(n_games, n_games)

        return TrialRecordSet.from_games(
            games, config_summary=self.config.to_dict()
        )

    def _run_sequential(self, n_games: int) -> List[GameResult]:
        rng = np.random.default_rng(self.seed_sequence)
        games: List[GameResult] = []

        for round_id in range(n_games):
            games.append(play_game(rng, round_id))
            if self.progress_callback and round_id + 1 < n_games:
                self.progress_callback(round_id + 1, n_games)

        return games

    def _run_parallel(self, n_games: int) -> List[GameResult]:
        """
        ラウンドを連続したチャンクに分割し、ワーカープロセスで並列実行

        Note:
            各チャンクには子SeedSequenceを渡し、生成器はワーカー側で作る。
            結果はラウンド順に連結する。
        """
        chunks = self._split_rounds(n_games, self.config.n_workers)
        children = self.seed_sequence.spawn(len(chunks))

        chunk_results: List[List[GameResult]] = [[] for _ in chunks]
        completed = 0

        with ProcessPoolExecutor(max_workers=len(chunks)) as executor:
            futures = {
                executor.submit(play_rounds, start, stop, child): i
                for i, ((start, stop), child) in enumerate(zip(chunks, children))
            }
            for future in as_completed(futures):
                i = futures[future]
                chunk_results[i] = future.result()
                completed += len(chunk_results[i])
                if self.progress_callback and completed < n_games:
                    self.progress_callback(completed, n_games)

        return [game for chunk in chunk_results for game in chunk]

    @staticmethod
    def _split_rounds(n_games: int, n_workers: int) -> List[Tuple[int, int]]:
        """
        ラウンドを連続した [start, stop) 区間に分割

        Note:
            ラウンド数がワーカー数より少ない場合、空の区間は作らない
        """
        n_chunks = min(n_games, n_workers)
        base, extra = divmod(n_games, n_chunks)
        bounds: List[Tuple[int, int]] = []
        start = 0
        for i in range(n_chunks):
            stop = start + base + (1 if i < extra else 0)
            bounds.append((start, stop))
            start = stop
        return bounds

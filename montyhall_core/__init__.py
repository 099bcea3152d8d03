"""
Monty Hall Simulator Core Package

3ドアのモンティ・ホール問題を繰り返しシミュレーションし、stay/switch戦略を比較するコアモジュール
"""

from .config import (
    SimulationConfig,
    Strategy,
    Outcome,
    DOORS,
    GOAT,
    CAR,
    DEFAULT_N_GAMES,
)
from .game import (
    Arrangement,
    create_game,
    select_door,
    open_goat_door,
    change_door,
    determine_winner,
)
from .results import RoundResult, GameResult, TrialRecordSet
from .simulation import SimulationEngine, play_game, play_n_games
from .exceptions import (
    MontyHallSimulatorError,
    InvalidArgumentError,
    InvalidDoorError,
    InvalidArrangementError,
    ConfigurationError,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "SimulationConfig",
    "Strategy",
    "Outcome",
    "DOORS",
    "GOAT",
    "CAR",
    "DEFAULT_N_GAMES",
    # Round
    "Arrangement",
    "create_game",
    "select_door",
    "open_goat_door",
    "change_door",
    "determine_winner",
    # Simulation
    "RoundResult",
    "GameResult",
    "TrialRecordSet",
    "SimulationEngine",
    "play_game",
    "play_n_games",
    # Exceptions
    "MontyHallSimulatorError",
    "InvalidArgumentError",
    "InvalidDoorError",
    "InvalidArrangementError",
    "ConfigurationError",
]

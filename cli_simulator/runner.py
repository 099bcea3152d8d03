"""
Runner for executing the simulation with console progress output.
"""

from montyhall_core.config import SimulationConfig, Strategy
from montyhall_core.simulation import SimulationEngine
from montyhall_core.results import TrialRecordSet


BAR_LENGTH = 30


def format_progress_bar(current: int, total: int) -> str:
    """Format a one-line progress bar."""
    pct = current / total * 100 if total > 0 else 100.0
    filled = int(BAR_LENGTH * current / total) if total > 0 else BAR_LENGTH
    bar = "=" * filled + "-" * (BAR_LENGTH - filled)
    return f"  Progress: [{bar}] {pct:5.1f}% ({current}/{total})"


def run_simulation(
    config: SimulationConfig,
    show_progress: bool = True,
    verbose: bool = False,
) -> TrialRecordSet:
    """
    Run all games for the given configuration.

    Args:
        config: Simulation configuration
        show_progress: Whether to show a progress bar
        verbose: Whether to show per-strategy win rates after the run

    Returns:
        Collected round results
    """
    # Redraw at most ~100 times regardless of n_games
    step = max(1, config.n_games // 100)

    def game_progress(current: int, total: int) -> None:
        if current == total or current % step == 0:
            print(f"\r{format_progress_bar(current, total)}", end="", flush=True)

    engine = SimulationEngine(
        config,
        progress_callback=game_progress if show_progress else None,
    )
    results = engine.run()

    if show_progress:
        print()  # New line after progress bar

    if verbose:
        for strategy in Strategy:
            print(f"  -> {strategy.value} win rate: {results.win_rate(strategy):.4f}")

    return results

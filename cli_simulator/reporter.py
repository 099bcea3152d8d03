"""
Reporter for displaying and exporting simulation results.
"""

import csv
from pathlib import Path

from montyhall_core.config import SimulationConfig, Strategy, Outcome
from montyhall_core.results import TrialRecordSet
from .config_builder import format_config_summary


SEPARATOR = "=" * 60
THIN_SEPARATOR = "-" * 60


def print_header() -> None:
    """Print report header."""
    print(SEPARATOR)
    print("           Monty Hall Simulator - Strategy Comparison")
    print(SEPARATOR)


def print_configuration(config: SimulationConfig) -> None:
    """Print configuration summary."""
    print("Configuration:")
    print(format_config_summary(config))
    print(THIN_SEPARATOR)


def format_table_row(strategy_name: str, win: float, lose: float, decimals: int) -> str:
    """Format a single table row."""
    return f"{strategy_name:<10} | {win:>8.{decimals}f} | {lose:>8.{decimals}f} |"


def format_proportion_table(results: TrialRecordSet, decimals: int = 2) -> str:
    """
    Format the strategy x outcome proportion table.

    Rows are strategies, columns are outcomes; each row sums to 1.
    """
    props = results.compute_proportions(decimals=decimals)
    lines = [
        f"{'strategy':<10} | {Outcome.WIN.value:>8} | {Outcome.LOSE.value:>8} |",
        THIN_SEPARATOR,
    ]
    for strategy in Strategy:
        row = props[strategy.value]
        lines.append(
            format_table_row(
                strategy.value,
                row[Outcome.WIN.value],
                row[Outcome.LOSE.value],
                decimals,
            )
        )
    return "\n".join(lines)


def print_proportion_table(results: TrialRecordSet, decimals: int = 2) -> None:
    """Print the strategy x outcome proportion table."""
    print(f"\nOutcome proportions by strategy ({results.n_games:,} games):")
    print(THIN_SEPARATOR)
    print(format_proportion_table(results, decimals))
    print(THIN_SEPARATOR)


def print_best_strategy(results: TrialRecordSet) -> None:
    """Print the strategy with the highest win rate."""
    best = results.best_strategy()
    print(f"\nBest Strategy: {best.value} (Win rate: {results.win_rate(best):.4f})")
    print(SEPARATOR)


def print_full_report(results: TrialRecordSet, config: SimulationConfig) -> None:
    """Print the full comparison report."""
    print_header()
    print_configuration(config)
    print_proportion_table(results, config.decimals)
    print_best_strategy(results)


def export_to_csv(results: TrialRecordSet, output_path: str) -> None:
    """
    Export summary counts and proportions to CSV file.

    Args:
        results: Collected round results
        output_path: Path to output CSV file
    """
    path = Path(output_path)
    counts = results.count_outcomes()
    props = results.compute_proportions(decimals=None)

    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)

        # Header
        writer.writerow(['strategy', 'outcome', 'count', 'proportion'])

        # Data rows
        for strategy in Strategy:
            for outcome in Outcome:
                writer.writerow([
                    strategy.value,
                    outcome.value,
                    counts[strategy][outcome],
                    f"{props[strategy.value][outcome.value]:.4f}",
                ])

    print(f"\nResults exported to: {path.absolute()}")


def export_detailed_csv(results: TrialRecordSet, output_path: str) -> Path:
    """
    Export round-level results to CSV.

    Args:
        results: Collected round results
        output_path: Path of the summary CSV; the detailed file is written
            next to it with a ``_detailed`` suffix

    Returns:
        Path of the detailed CSV file
    """
    path = Path(output_path)
    detailed_path = path.parent / f"{path.stem}_detailed{path.suffix}"

    with open(detailed_path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)

        # Header
        writer.writerow([
            'round_id', 'arrangement', 'first_pick', 'opened_door',
            'strategy', 'outcome'
        ])

        # Data rows
        for game in results.games:
            for r in game.results:
                writer.writerow([
                    game.round_id,
                    "/".join(game.arrangement.contents),
                    game.first_pick,
                    game.opened_door,
                    r.strategy.value,
                    r.outcome.value,
                ])

    print(f"Detailed results exported to: {detailed_path.absolute()}")
    return detailed_path

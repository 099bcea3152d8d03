"""
Configuration builder for CLI Simulator.

Converts command-line arguments to SimulationConfig.
"""

from argparse import Namespace

from montyhall_core.config import SimulationConfig


def build_config(args: Namespace) -> SimulationConfig:
    """
    Build a SimulationConfig from command-line arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        SimulationConfig with all parameters set

    Raises:
        ConfigurationError: If any argument is out of range
    """
    return SimulationConfig(
        n_games=args.games,
        random_seed=args.seed,
        n_workers=getattr(args, "workers", 1),
        decimals=getattr(args, "decimals", 2),
    )


def format_config_summary(config: SimulationConfig) -> str:
    """
    Format configuration summary for display.

    Args:
        config: SimulationConfig to summarize

    Returns:
        Formatted string summary
    """
    lines = [
        f"  Games: {config.n_games:,} ({config.n_results:,} round results)",
        f"  Workers: {config.n_workers}",
        f"  Decimals: {config.decimals}",
    ]

    if config.random_seed is not None:
        lines.append(f"  Random Seed: {config.random_seed}")

    return "\n".join(lines)

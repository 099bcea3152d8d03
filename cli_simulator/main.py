"""
Main entry point for CLI Simulator.

Usage:
    python -m cli_simulator [options]

Example:
    python -m cli_simulator --games 10000 --seed 42 --output results.csv
"""

import argparse
import sys
from typing import List

from .config_builder import build_config, format_config_summary
from .runner import run_simulation
from .reporter import print_full_report, export_to_csv, export_detailed_csv


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="cli_simulator",
        description="Monty Hall Simulator - Compare stay and switch strategies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m cli_simulator
  python -m cli_simulator --games 10000 --seed 42
  python -m cli_simulator --games 100000 --workers 4 --output results.csv
        """
    )

    parser.add_argument(
        "-n", "--games",
        type=int,
        default=100,
        help="Number of games to play (default: 100)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility"
    )
    parser.add_argument(
        "-w", "--workers",
        type=int,
        default=1,
        help="Number of worker processes (default: 1)"
    )
    parser.add_argument(
        "-d", "--decimals",
        type=int,
        default=2,
        help="Decimal digits for proportions (default: 2)"
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output CSV file path"
    )

    # Output control
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed output"
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide progress bar"
    )

    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        # Build configuration
        config = build_config(args)

        # Print configuration
        print("\n" + "=" * 60)
        print("Monty Hall Simulator")
        print("=" * 60)
        print("\nConfiguration:")
        print(format_config_summary(config))
        print(f"\nPlaying {config.n_games:,} games...")

        results = run_simulation(
            config,
            show_progress=not args.no_progress,
            verbose=args.verbose,
        )

        # Print results
        print("\n")
        print_full_report(results, config)

        # Export to CSV if requested
        if args.output:
            export_to_csv(results, args.output)
            export_detailed_csv(results, args.output)

        return 0

    except ValueError as e:
        print(f"Configuration error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.")
        return 130
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""Generate a sample portfolio export for manual validation.

Writes an export document with random loans and savings accounts and
prints the dashboard figures, per-loan analysis and a combined projection.
"""

import argparse
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from emi_tracker.clock import FixedClock, SystemClock
from emi_tracker.config import TrackerConfig
from emi_tracker.engine import analyze_loans, project_portfolio
from emi_tracker.generators import generate_portfolio
from emi_tracker.logging import get_logger, setup_logging
from emi_tracker.storage import JsonFileStore

logger = get_logger(__name__)


def print_summary(store, config: TrackerConfig) -> None:
    """Print dashboard figures and suggestions."""
    summary = store.dashboard(config.advisor)
    print("\nDashboard")
    print("=" * 60)
    print(f"  Outstanding debt: {summary.total_outstanding_debt:,.2f}")
    print(f"  Total savings:    {summary.total_savings:,.2f}")
    print(f"  Monthly EMI:      {summary.monthly_emi:,.2f}")
    print(f"  Next EMI date:    {summary.next_emi_date.isoformat()}")
    for suggestion in summary.suggestions:
        print(f"  [{suggestion.priority.value}] {suggestion.title}")


def print_analysis(store, config: TrackerConfig) -> None:
    """Print per-loan analysis, highest rate first."""
    print("\nLoans")
    print("=" * 60)
    for analysis in analyze_loans(store.get_loans(), store.clock.today(), config.advisor):
        details = analysis.details
        print(
            f"  {analysis.loan.name}: {float(analysis.loan.interest_rate):g}% "
            f"outstanding {details.remaining_principal:,.2f}, "
            f"{details.remaining_emis} EMIs of {details.emi_amount:,.2f} "
            f"({analysis.efficiency.value}: {analysis.recommendation})"
        )


def print_projection(store, months: int) -> None:
    """Print the first months of the combined projection."""
    print("\nProjection")
    print("=" * 60)
    for entry in project_portfolio(store.get_loans(), store.clock.today())[:months]:
        print(
            f"  Month {entry.month:>2}: principal {entry.total_principal_payment:>12,.2f} "
            f"interest {entry.total_interest_payment:>12,.2f} "
            f"balance {entry.total_remaining_principal:>14,.2f}"
        )


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Generate a sample loan portfolio export")
    parser.add_argument(
        "--loans",
        type=int,
        default=4,
        help="Number of loans to generate (default: 4)",
    )
    parser.add_argument(
        "--savings",
        type=int,
        default=3,
        help="Number of savings accounts to generate (default: 3)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="Reference date as YYYY-MM-DD (default: system date)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Export file path (default: EMI_TRACKER_DATA_FILE or output/portfolio.json)",
    )
    parser.add_argument(
        "--projection-months",
        type=int,
        default=12,
        help="Months of combined projection to print (default: 12)",
    )
    args = parser.parse_args()

    config = TrackerConfig.from_env()
    setup_logging(config.log_level, config.log_format)

    clock = FixedClock(args.today) if args.today else SystemClock()
    store = generate_portfolio(clock, num_loans=args.loans, num_savings=args.savings, seed=args.seed)
    store.refresh_if_due()
    logger.info("Generated %s", store.summary())

    output = args.output or config.storage.data_file
    path = JsonFileStore(output, pretty=config.storage.pretty_json).save(store)
    print(f"Export written to: {path}")

    print_summary(store, config)
    print_analysis(store, config)
    print_projection(store, args.projection_months)


if __name__ == "__main__":
    main()

"""
Command-line entry point: nutrition-seed / python -m nutrition_seed.

Examples:
    # Six months of history into ./nutrition_seed.db (schema created if needed)
    nutrition-seed --init-schema

    # Reproducible three-month run with edge cases, no network
    nutrition-seed --months 3 --edge-cases --seed 42 --no-photos

    # Options from YAML, PostgreSQL target
    nutrition-seed --config seed.yaml --database postgresql://localhost/nutrition

    # Just wipe generated data
    nutrition-seed --clear-only
"""

import argparse
import sys

from .clear import clear_all_data
from .options import DATABASE_URL_ENV, SeedOptions, database_url_from_env, load_options, resolve_options
from .reporting import ConsoleListener, SeedProgress, SeedReporter
from .schema import install_schema
from .seeder import seed_database
from .storage import StorageError, open_storage


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="nutrition-seed",
        description="Seed a nutrition tracking database with realistic synthetic history.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1],
    )

    parser.add_argument(
        "--database",
        default=None,
        metavar="URL",
        help=f"Database URL (default: ${DATABASE_URL_ENV} or sqlite:///nutrition_seed.db)",
    )
    parser.add_argument(
        "--config",
        default=None,
        metavar="FILE",
        help="YAML file with seed options; flags override it",
    )
    parser.add_argument(
        "--months",
        type=int,
        default=None,
        metavar="N",
        help="Months of history to generate (default: 6)",
    )
    parser.add_argument(
        "--edge-cases",
        action="store_true",
        default=None,
        help="Inject unicode/emoji/extreme-value rows",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Keep existing data (rows are upserted by id)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--no-photos",
        action="store_true",
        help="Store remote photo URLs instead of downloading images",
    )
    parser.add_argument(
        "--photo-dir",
        default=None,
        metavar="DIR",
        help="Directory downloaded progress photos are written to",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=None,
        help="Print every inserted batch and warning",
    )
    parser.add_argument(
        "--init-schema",
        action="store_true",
        help="Create tables, defaults and the bundled catalog before seeding",
    )
    parser.add_argument(
        "--clear-only",
        action="store_true",
        help="Clear generated data and exit without seeding",
    )

    return parser.parse_args(argv)


def build_options(args: argparse.Namespace) -> SeedOptions:
    """YAML options (if any) with command-line flags layered on top."""
    base = load_options(args.config) if args.config else SeedOptions()
    overrides = {
        "months_of_history": args.months,
        "include_edge_cases": args.edge_cases,
        "verbose_logging": args.verbose,
        "seed": args.seed,
        "photo_dir": args.photo_dir,
        "clear_existing": False if args.no_clear else None,
        "download_photos": False if args.no_photos else None,
    }
    return resolve_options(overrides, base=base)


def print_progress(progress: SeedProgress) -> None:
    if progress.phase == "Complete":
        return
    if progress.total_count:
        print(f"  {progress.current_entity:<24} ({progress.current_count:,}/{progress.total_count:,} rows)")
    else:
        print(f"  {progress.current_entity}")


def main(argv: list[str] | None = None) -> int:
    """
    Seed the database from the command line.

    Returns:
        0 on success, 1 if any step failed or the database could not be opened
    """
    args = parse_args(argv)
    try:
        options = build_options(args)
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1
    url = args.database or database_url_from_env()

    print("=" * 60)
    print("Nutrition Seed Data Generation")
    print("=" * 60)
    print(f"Database: {url}")
    print(f"History: {options.months_of_history} months ({options.total_days} days)")
    print(f"Seed: {options.seed if options.seed is not None else 'random'}")
    print(f"Edge cases: {'on' if options.include_edge_cases else 'off'}")
    print()

    try:
        storage = open_storage(url)
    except (StorageError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    reporter = SeedReporter()
    reporter.subscribe(ConsoleListener(options.verbose_logging))

    try:
        if args.init_schema:
            print("Installing schema...")
            install_schema(storage)

        if args.clear_only:
            warnings = clear_all_data(storage, reporter=reporter)
            print(f"\nCleared generated data ({len(warnings)} warnings).")
            return 0

        result = seed_database(storage, options, on_progress=print_progress, reporter=reporter)
    except StorageError as e:
        print(f"ERROR: {e}")
        return 1
    finally:
        storage.close()

    print()
    print("=" * 60)
    print("Seed Summary")
    print("=" * 60)
    for name, count in result.counts.items():
        print(f"  {name:<24} {count:8,}")
    print(f"Total rows: {result.total_rows:,}")
    print(f"Total time: {result.duration / 1000:.2f}s")

    if result.warnings:
        print()
        print(f"Warnings: {len(result.warnings)}")
        for warning in result.warnings[:10]:
            print(f"  - {warning}")

    if result.errors:
        print()
        print("Errors:")
        for error in result.errors:
            print(f"  - {error}")
        print("\nSeeding finished with errors. Review output above.")
        return 1

    print("\nSuccess!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

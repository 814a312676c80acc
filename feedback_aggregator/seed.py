"""
Offline seed script.

Prints SQL INSERT statements for the demo dataset so they can be applied to
the store out-of-band, or reseeds the configured database directly.

Usage:
    feedback-seed > seed.sql
    sqlite3 feedback.db < seed.sql

    feedback-seed --seed 42 --output seed.sql
    feedback-seed --apply
"""

import argparse
import logging
import random
import sys

from feedback_aggregator.seed_generator import generate_feedback_items, render_insert_statements

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate mock feedback for the dashboard")
    parser.add_argument("--output", "-o", help="Write the SQL script to this file instead of stdout")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible dataset")
    parser.add_argument(
        "--apply",
        action="store_true",
        help="Replace the rows of the configured database instead of printing SQL",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, stream=sys.stderr)
    items = generate_feedback_items(rng=random.Random(args.seed))

    if args.apply:
        from feedback_aggregator.database.core.funcs import reseed_feedback
        from feedback_aggregator.database.create_tables import create_tables

        create_tables()
        result = reseed_feedback(items=items)
        logger.info("Inserted %s feedback records", result.inserted)
        return 0

    lines = render_insert_statements(items)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as handle:
            for line in lines:
                handle.write(line + "\n")
        logger.info("Wrote %s insert statements to %s", len(items), args.output)
    else:
        for line in lines:
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Command line entry point: builds one round of a division's standings sheet."""

import argparse
import logging
import sys
from typing import List, Optional

from standings_sheets.services.sheets.updater import update_round

# --- Logging Setup ---
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO
)
# Set higher logging level for noisy libraries
logging.getLogger("urllib3").setLevel(logging.WARNING)
logging.getLogger("google.auth").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a round of a division's scores and standings sheet.")
    parser.add_argument("division", help="Division name from the division config file")
    parser.add_argument("round", type=int, help="Round number, starting at 1")
    parser.add_argument("--scrimmage", action="store_true",
                        help="Games this round don't count toward the standings")
    parser.add_argument("--team-name-width", type=int, default=None,
                        help="Also resize every column, using this pixel width for team name columns")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logger.info(f"Building round {args.round} for division '{args.division}'{' (scrimmage)' if args.scrimmage else ''}")
    ok = update_round(args.division, args.round,
                      round_counts_for_standings=not args.scrimmage,
                      team_name_column_width=args.team_name_width)
    if not ok:
        logger.error(f"Failed to build round {args.round} for division '{args.division}'")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

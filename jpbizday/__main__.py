"""Main entry point for jpbizday."""

import sys
from datetime import date

from jpbizday.calculator import previous_business_day
from jpbizday.config import Config
from jpbizday.errors import InvalidDateArgumentError, JpBizdayError


def parse_reference_date(argv: list[str]) -> date:
    """Get the reference date from the command line, defaulting to today."""
    if not argv:
        return date.today()
    if len(argv) > 1:
        msg = f"Expected at most one date argument, got {len(argv)}"
        raise InvalidDateArgumentError(msg)
    try:
        return date.fromisoformat(argv[0])
    except ValueError as e:
        msg = f"Invalid date {argv[0]!r}, expected YYYY-MM-DD"
        raise InvalidDateArgumentError(msg) from e


def run(argv: list[str], config: Config | None = None) -> int:
    """Print the previous business day and return the exit status."""
    try:
        if config is None:
            config = Config.resolve()
        reference_date = parse_reference_date(argv)
        result = previous_business_day(
            reference_date, per_candidate_year=config.per_candidate_year
        )
    except JpBizdayError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1

    sys.stdout.write(f"前営業日: {result.isoformat()}\n")
    return 0


def main() -> None:
    """Main entry point."""
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()

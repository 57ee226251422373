#!/usr/bin/env python3
"""
Election administration.

Usage:
    python manage.py status              # Phase, window and turnout
    python manage.py import voters.csv   # Register voters from CSV (all or none)
    python manage.py add-candidate NAME [PARTY]
    python manage.py start START END     # Open the voting window (unix seconds)
    python manage.py end                 # Close voting after the window
    python manage.py declare             # Declare and print results
    python manage.py results             # Declared results
    python manage.py events              # Event log
    python manage.py --validate          # Check tallies against vote records
"""

import sys
from pathlib import Path

from loguru import logger

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container  # noqa: E402
from app.errors import ElectionError, ValidationError  # noqa: E402
from app.repositories.db import close_db, get_db  # noqa: E402
from etl import import_voters, load_voters, validate_election  # noqa: E402
from settings import ADMIN  # noqa: E402
from settings.logging import setup_logging  # noqa: E402
from web.api.election import get_results, get_status  # noqa: E402
from web.api.errors import error_response  # noqa: E402


def run_validation() -> bool:
    """Print integrity report for the election database."""
    with container.transactions.snapshot() as conn:
        result = validate_election(conn)

    print("\n" + "=" * 60)
    print("ELECTION INTEGRITY REPORT")
    print("=" * 60)
    stats = result["stats"]
    print(f"  Voters: {stats['voters']:,} ({stats['voted']:,} voted)")
    print(f"  Candidates: {stats['candidates']}")
    print(f"  Tally total: {stats['tally_total']:,}")
    print(f"  Vote records: {stats['vote_records']:,}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")

    print("\n" + "=" * 60)
    print("✅ Election data consistent!" if result["valid"] else "❌ Inconsistencies found.")
    print("=" * 60 + "\n")
    return result["valid"]


def show_status() -> None:
    status = get_status()
    print(f"\n{status.name} [{status.phase}]")
    if status.start_time is not None:
        print(f"  Window: {status.start_time} .. {status.end_time}")
    print(f"  Candidates: {status.candidates}")
    print(f"  Turnout: {status.voted}/{status.registered}\n")


def show_results() -> None:
    results = get_results()
    print(f"\n{results.name} - results")
    for item in results.items:
        print(f"  #{item.candidate_id} {item.name} ({item.party}): {item.votes:,}")
    print(f"  Total: {results.total_votes:,}\n")


def show_events() -> None:
    for event in container.event_log.all():
        print(f"{event['seq']:>6}  {event['name']:<20} {event['payload']}")


def _parse_time(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValidationError(f"Time must be an integer, got {text!r}") from None


def run_command(args: list[str]) -> int:
    """Dispatch one command against the wired container; returns the exit code."""
    election = container.election
    try:
        if "--validate" in args or args == ["validate"]:
            return 0 if run_validation() else 1
        elif args[:1] == ["import"] and len(args) == 2:
            count = import_voters(container.registry, load_voters(args[1]), caller=ADMIN)
            logger.info("Imported {} voters", count)
        elif args[:1] == ["add-candidate"] and len(args) in (2, 3):
            party = args[2] if len(args) == 3 else ""
            candidate = election.add_candidate(args[1], party, caller=ADMIN)
            print(f"Candidate #{candidate.candidate_id}: {candidate.name}")
        elif args[:1] == ["start"] and len(args) == 3:
            election.start_election(_parse_time(args[1]), _parse_time(args[2]), caller=ADMIN)
            show_status()
        elif args == ["end"]:
            election.end_election(caller=ADMIN)
            show_status()
        elif args == ["declare"]:
            election.declare_results(caller=ADMIN)
            show_results()
        elif args == ["results"]:
            show_results()
        elif args == ["events"]:
            show_events()
        elif not args or args == ["status"]:
            show_status()
        else:
            print(__doc__)
            return 1
    except ElectionError as e:
        body = error_response(e)
        logger.error("{} ({}): {}", body.error, body.status, body.message)
        return 2
    return 0


def main():
    setup_logging(to_file=True)
    container.init(conn=get_db())
    try:
        code = run_command(sys.argv[1:])
    finally:
        close_db()
    sys.exit(code)


if __name__ == "__main__":
    main()

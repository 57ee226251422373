"""ETL package - voter import and election integrity checks."""

from etl.validation import validate_election
from etl.voters import import_voters, load_voters

__all__ = [
    "import_voters",
    "load_voters",
    "validate_election",
]

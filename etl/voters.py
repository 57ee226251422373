"""Bulk voter import from CSV."""

from pathlib import Path

import polars as pl
from loguru import logger

from app.errors import ValidationError
from app.services.registry import VoterRegistry

VOTER_COLUMNS = ["voter_hash", "holder_address"]


def load_voters(path: str | Path) -> pl.DataFrame:
    """Read a voter CSV with voter_hash and holder_address columns."""
    df = pl.read_csv(path, infer_schema_length=0)
    missing = [c for c in VOTER_COLUMNS if c not in df.columns]
    if missing:
        raise ValidationError(f"Voter file {path} is missing columns: {', '.join(missing)}")

    df = df.select(VOTER_COLUMNS).with_columns(
        pl.col("voter_hash").str.strip_chars().str.to_lowercase(),
        pl.col("holder_address").str.strip_chars(),
    )
    logger.info("Loaded {} voters from {}", df.height, path)
    return df


def import_voters(registry: VoterRegistry, df: pl.DataFrame, caller: str) -> int:
    """Register every row in one transaction; any bad row rejects the whole file."""
    if df.is_empty():
        logger.warning("No voters to import")
        return 0

    dupes = (
        df.filter(pl.col("voter_hash").is_duplicated() & pl.col("voter_hash").is_not_null())
        .get_column("voter_hash")
        .unique()
        .sort()
        .to_list()
    )
    if dupes:
        raise ValidationError(f"Duplicate voter hashes in file: {', '.join(dupes[:5])}")

    return registry.register_many(df.iter_rows(), caller=caller)

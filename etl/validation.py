"""Election integrity checks."""

import duckdb


def validate_election(conn: duckdb.DuckDBPyConnection) -> dict:
    """Check tallies, vote records and voter flags agree."""
    issues = []
    stats = {}

    voters = conn.execute(
        """
        SELECT COUNT(*), COUNT(*) FILTER (WHERE has_voted)
        FROM voter
        """
    ).fetchone()
    stats["voters"] = voters[0]
    stats["voted"] = voters[1]

    stats["candidates"] = conn.execute("SELECT COUNT(*) FROM candidate").fetchone()[0]
    stats["tally_total"] = int(conn.execute("SELECT COALESCE(SUM(vote_count), 0) FROM candidate").fetchone()[0])
    stats["vote_records"] = conn.execute("SELECT COUNT(*) FROM vote_record").fetchone()[0]

    if stats["tally_total"] != stats["voted"]:
        issues.append(f"Tally total {stats['tally_total']} != voters marked voted {stats['voted']}")
    if stats["vote_records"] != stats["voted"]:
        issues.append(f"Vote records {stats['vote_records']} != voters marked voted {stats['voted']}")

    mismatched = conn.execute(
        """
        SELECT c.candidate_id, c.vote_count, COUNT(r.voter_hash) AS records
        FROM candidate c
        LEFT JOIN vote_record r ON r.candidate_id = c.candidate_id
        GROUP BY c.candidate_id, c.vote_count
        HAVING c.vote_count != COUNT(r.voter_hash)
        ORDER BY c.candidate_id
        """
    ).fetchall()
    for candidate_id, vote_count, records in mismatched:
        issues.append(f"Candidate #{candidate_id}: tally {vote_count} != {records} vote records")

    orphans = conn.execute(
        """
        SELECT COUNT(*) FROM vote_record r
        LEFT JOIN voter v ON v.voter_hash = r.voter_hash
        WHERE v.voter_hash IS NULL OR NOT v.has_voted
        """
    ).fetchone()[0]
    stats["orphan_records"] = orphans
    if orphans > 0:
        issues.append(f"{orphans} vote records without a voter marked voted")

    bad_refs = conn.execute(
        """
        SELECT COUNT(*) FROM vote_record r
        LEFT JOIN candidate c ON c.candidate_id = r.candidate_id
        WHERE c.candidate_id IS NULL
        """
    ).fetchone()[0]
    if bad_refs > 0:
        issues.append(f"{bad_refs} vote records point at unknown candidates")

    ids = conn.execute("SELECT COALESCE(MIN(candidate_id), 0), COALESCE(MAX(candidate_id), -1) FROM candidate").fetchone()
    if stats["candidates"] and (ids[0] != 0 or ids[1] != stats["candidates"] - 1):
        issues.append(f"Candidate ids are not dense from 0 (min {ids[0]}, max {ids[1]})")

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }

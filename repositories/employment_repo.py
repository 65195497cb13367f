"""
repositories/employment_repo.py
--------------------------------
Data access layer for employment records.
All SQL queries related to the `employments` table live here.
"""

import psycopg2

from db.connection import Database
from models.employment import Employment
from repositories.errors import DataAccessError
from utils.logger import get_logger

logger = get_logger(__name__)


class EmploymentRepository:
    """Read-only access to the employments table."""

    def __init__(self, db: Database):
        self.db = db

    def fetch_all_employments(self) -> list[Employment]:
        """
        Fetch every employment in a single query.

        Children are loaded in one batch and joined to their users in memory,
        rather than queried once per user.

        Returns:
            List of Employment objects in the order the database returned them.

        Raises:
            DataAccessError: If the query fails or a row is malformed.
        """
        sql = "SELECT id, employmentnumber, user_id FROM employments;"
        with self.db.connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(sql)
                    rows = cur.fetchall()
            except psycopg2.Error as e:
                logger.error(f"Failed to fetch employments: {e}")
                raise DataAccessError("failed to fetch employments") from e
        employments = [self._row_to_employment(r) for r in rows]
        logger.debug(f"Fetched {len(employments)} employments")
        return employments

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_employment(row: tuple) -> Employment:
        """Convert a database row tuple to an Employment domain object."""
        if len(row) != 3 or not all(isinstance(v, int) for v in row):
            logger.error(f"Malformed employments row: {row!r}")
            raise DataAccessError(f"malformed employments row: {row!r}")
        return Employment(id=row[0], employment_number=row[1], user_id=row[2])

"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

import psycopg2

from db.connection import Database
from models.user import User
from repositories.errors import DataAccessError
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Read-only access to the users table."""

    def __init__(self, db: Database):
        self.db = db

    def fetch_all_users(self) -> list[User]:
        """
        Fetch every user.

        No ordering is requested; rows come back in the engine's scan order.

        Returns:
            List of User objects.

        Raises:
            DataAccessError: If the query fails or a row is malformed.
        """
        sql = "SELECT id, name FROM users;"
        with self.db.connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(sql)
                    rows = cur.fetchall()
            except psycopg2.Error as e:
                logger.error(f"Failed to fetch users: {e}")
                raise DataAccessError("failed to fetch users") from e
        users = [self._row_to_user(r) for r in rows]
        logger.debug(f"Fetched {len(users)} users")
        return users

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_user(row: tuple) -> User:
        """Convert a database row tuple to a User domain object."""
        if len(row) != 2 or not isinstance(row[0], int) or not isinstance(row[1], str):
            logger.error(f"Malformed users row: {row!r}")
            raise DataAccessError(f"malformed users row: {row!r}")
        return User(id=row[0], name=row[1])

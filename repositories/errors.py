"""
repositories/errors.py
----------------------
Errors surfaced by the repositories. Defined in the db layer so the pool
can raise them too.
"""

from db.errors import DataAccessError

__all__ = ["DataAccessError"]

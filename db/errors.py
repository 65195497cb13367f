"""
db/errors.py
------------
Exceptions raised when reading from the database.
"""


class DataAccessError(Exception):
    """
    A read against the database failed.

    Covers lost connections, timeouts, pool exhaustion and rows that do not
    have the expected shape. The driver exception, when there is one, is
    chained as ``__cause__``.
    """

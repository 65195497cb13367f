"""
models/employment.py
--------------------
Domain model for an employment record owned by a user.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Employment:
    """
    A row of the `employments` table.

    Attributes:
        id: Database primary key.
        employment_number: The `employmentnumber` column.
        user_id: Foreign key to `users.id`. May point at a user that is not
            part of the current result set (an orphan).
    """
    id: int
    employment_number: int
    user_id: int

    def __str__(self) -> str:
        return f"#{self.id} employment {self.employment_number} (user {self.user_id})"

"""
models/user.py
--------------
Domain model for a person record.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """
    A row of the `users` table.

    Attributes:
        id: Database primary key.
        name: Display name.
    """
    id: int
    name: str

    def __str__(self) -> str:
        return f"#{self.id} {self.name}"

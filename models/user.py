"""
models/user.py
--------------
Domain model for registered users.
"""

from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass
class User:
    """
    A guest or property owner.

    Attributes:
        id: Database primary key (None for new records).
        name: Display name.
        email: Login email, unique across users.
        password: Password hash, never the plain text.
    """
    name: str
    email: str
    password: str
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> "User":
        """
        Build a User from a plain record such as a parsed form body.

        Missing fields become None and are left for the table's NOT NULL
        constraints to reject.
        """
        return cls(
            name=data.get("name"),
            email=data.get("email"),
            password=data.get("password"),
            id=data.get("id"),
        )

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"

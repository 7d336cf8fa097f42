"""
Repositories for FoodShare

Row-level access to the ``users``, ``recipients`` and ``foods`` tables.
Each method is a single parameterized statement against the
persistence gateway; nothing here spans a transaction.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .database import Database


@dataclass
class StoredUser:
    """Data class for user rows."""

    id: int
    username: str
    email: str
    password: str

    @classmethod
    def from_row(cls, row: dict) -> "StoredUser":
        return cls(
            id=row["id"],
            username=row["username"],
            email=row["email"],
            password=row["password"],
        )


@dataclass
class StoredRecipient:
    """Data class for recipient rows."""

    id: int
    name: str
    email: str
    phone: str
    address: str
    capacity: Optional[Union[int, float]] = None

    @classmethod
    def from_row(cls, row: dict) -> "StoredRecipient":
        return cls(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            phone=row["phone"],
            address=row["address"],
            capacity=row.get("capacity"),
        )


@dataclass
class StoredFood:
    """Data class for food rows."""

    id: int
    name: str
    quantity: Optional[Union[int, float]] = None
    urgency: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict) -> "StoredFood":
        return cls(
            id=row["id"],
            name=row["name"],
            quantity=row.get("quantity"),
            urgency=row.get("urgency"),
        )


class UserRepository:
    """Access to the users table."""

    def __init__(self, database: Database):
        self.database = database

    async def create(self, username: str, email: str, password_hash: str) -> None:
        await self.database.execute(
            "INSERT INTO users (username, email, password) "
            "VALUES (:username, :email, :password)",
            {"username": username, "email": email, "password": password_hash},
        )

    async def get_by_email(self, email: str) -> Optional[StoredUser]:
        """Return the first user registered with ``email``, if any."""
        rows = await self.database.query(
            "SELECT id, username, email, password FROM users WHERE email = :email",
            {"email": email},
        )
        if not rows:
            return None
        return StoredUser.from_row(rows[0])


class RecipientRepository:
    """Access to the recipients table."""

    def __init__(self, database: Database):
        self.database = database

    async def create(
        self,
        name: str,
        email: str,
        phone: str,
        address: str,
        capacity: Optional[Union[int, float]] = None,
    ) -> None:
        await self.database.execute(
            "INSERT INTO recipients (name, email, phone, address, capacity) "
            "VALUES (:name, :email, :phone, :address, :capacity)",
            {
                "name": name,
                "email": email,
                "phone": phone,
                "address": address,
                "capacity": capacity,
            },
        )

    async def list_all(self) -> list[StoredRecipient]:
        rows = await self.database.query(
            "SELECT id, name, email, phone, address, capacity FROM recipients ORDER BY id"
        )
        return [StoredRecipient.from_row(row) for row in rows]


class FoodRepository:
    """Read access to the foods table."""

    def __init__(self, database: Database):
        self.database = database

    async def list_all(self) -> list[StoredFood]:
        rows = await self.database.query(
            "SELECT id, name, quantity, urgency FROM foods ORDER BY id"
        )
        return [StoredFood.from_row(row) for row in rows]

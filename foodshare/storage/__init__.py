"""
Storage Module for FoodShare

Relational persistence for users, recipients and food items:
- Pooled async SQLAlchemy engine (PostgreSQL/CockroachDB in production)
- SQLite for development/testing
- Parameterized statements only
"""

from foodshare.storage.database import Database
from foodshare.storage.models import Base, User, Recipient, Food
from foodshare.storage.repositories import (
    UserRepository,
    RecipientRepository,
    FoodRepository,
    StoredUser,
    StoredRecipient,
    StoredFood,
)

__all__ = [
    # Gateway
    "Database",
    # Models
    "Base",
    "User",
    "Recipient",
    "Food",
    # Repositories
    "UserRepository",
    "RecipientRepository",
    "FoodRepository",
    "StoredUser",
    "StoredRecipient",
    "StoredFood",
]

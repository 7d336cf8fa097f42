"""
Unit tests for the persistence gateway and repositories.
"""

import pytest

from foodshare.exceptions import DatabaseError
from foodshare.storage.repositories import (
    FoodRepository,
    RecipientRepository,
    StoredFood,
    UserRepository,
)

pytestmark = pytest.mark.asyncio


class TestDatabase:
    """Tests for Database.query / execute."""

    async def test_query_returns_dict_rows(self, database):
        rows = await database.query("SELECT 1 AS one, 'x' AS letter")

        assert rows == [{"one": 1, "letter": "x"}]

    async def test_parameters_are_bound_not_interpolated(self, database):
        hostile = "Robert'); DROP TABLE foods;--"

        await database.execute(
            "INSERT INTO foods (name) VALUES (:name)",
            {"name": hostile},
        )
        rows = await database.query("SELECT name FROM foods")

        assert rows == [{"name": hostile}]

    async def test_execute_returns_rowcount(self, database):
        count = await database.execute(
            "INSERT INTO foods (name, quantity) VALUES (:name, :quantity)",
            {"name": "Milk", "quantity": 3},
        )

        assert count == 1

    async def test_failure_raises_database_error(self, database):
        with pytest.raises(DatabaseError) as exc_info:
            await database.query("SELECT * FROM no_such_table")

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Database error"

    async def test_ping(self, database):
        assert await database.ping() is True


class TestRepositories:
    """Tests for the table repositories."""

    async def test_user_roundtrip(self, database):
        users = UserRepository(database)

        await users.create("amina", "amina@example.com", "$2b$digest")
        user = await users.get_by_email("amina@example.com")

        assert user.username == "amina"
        assert user.password == "$2b$digest"

    async def test_unknown_email_returns_none(self, database):
        assert await UserRepository(database).get_by_email("nobody@example.com") is None

    async def test_duplicate_email_is_rejected(self, database):
        users = UserRepository(database)
        await users.create("amina", "amina@example.com", "x")

        with pytest.raises(DatabaseError):
            await users.create("amina2", "amina@example.com", "y")

    async def test_recipients_listed_in_insert_order(self, database):
        repo = RecipientRepository(database)
        await repo.create("First", "a@x.org", "1", "Addr 1")
        await repo.create("Second", "b@x.org", "2", "Addr 2", capacity=10)

        recipients = await repo.list_all()

        assert [r.name for r in recipients] == ["First", "Second"]
        assert recipients[0].capacity is None
        assert recipients[1].capacity == 10

    async def test_foods_listed(self, database, seed):
        await seed(foods=[{"name": "Bread", "quantity": 4, "urgency": "high"}, {"name": "Rice"}])

        foods = await FoodRepository(database).list_all()

        assert foods == [
            StoredFood(id=1, name="Bread", quantity=4, urgency="high"),
            StoredFood(id=2, name="Rice"),
        ]

    async def test_fractional_quantity_and_capacity(self, database, seed):
        await seed(
            foods=[{"name": "Milk", "quantity": 2.5}],
            recipients=[{"name": "A", "capacity": 7.5}],
        )

        foods = await FoodRepository(database).list_all()
        recipients = await RecipientRepository(database).list_all()

        assert foods[0].quantity == 2.5
        assert recipients[0].capacity == 7.5

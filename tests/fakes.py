"""
Test doubles for external collaborators.
"""

import asyncio
import re
from typing import Optional, Union

from foodshare.exceptions import PaymentError
from foodshare.matching.oracle import BaseScoringClient


_RECIPIENT_PATTERN = re.compile(r"Recipient: (.*?), capacity:")
_FOOD_PATTERN = re.compile(r"Food: (.*?), quantity:")


class FakeScoringClient(BaseScoringClient):
    """
    Oracle that answers from a table keyed by recipient name.

    Values may be a response string or an exception instance to raise.
    Recipients missing from the table get ``default``.
    """

    model = "fake-oracle"

    def __init__(
        self,
        responses: Optional[dict] = None,
        default: Union[str, Exception] = "0",
        delays: Optional[dict] = None,
        per_food: Optional[dict] = None,
    ):
        self.responses = responses or {}
        self.default = default
        self.delays = delays or {}
        self.per_food = per_food or {}
        self.prompts: list[str] = []
        self.closed = False

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        recipient = _RECIPIENT_PATTERN.search(prompt).group(1)
        food = _FOOD_PATTERN.search(prompt).group(1)

        delay = self.delays.get(recipient)
        if delay:
            await asyncio.sleep(delay)

        table = self.per_food.get(food, self.responses)
        answer = table.get(recipient, self.default)
        if isinstance(answer, Exception):
            raise answer
        return answer

    async def aclose(self) -> None:
        self.closed = True


class FakePaymentClient:
    """Payment client that records charges instead of calling IntaSend."""

    def __init__(self, response: Optional[dict] = None, error: Optional[str] = None):
        self.response = response if response is not None else {"invoice": {"state": "PENDING"}}
        self.error = error
        self.charges: list[tuple] = []
        self.closed = False

    async def charge(self, amount, phone):
        self.charges.append((amount, phone))
        if self.error:
            raise PaymentError(self.error)
        return self.response

    async def aclose(self) -> None:
        self.closed = True

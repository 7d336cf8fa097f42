"""
Food Matching Engine

Greedy per-food selection of the best recipient, scored by the LLM oracle.

For every food item the oracle rates each recipient; the first recipient
with the strictly highest score wins. This is not a global assignment:
one recipient can win several foods.
"""

import asyncio
import re
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from loguru import logger

from foodshare.storage.repositories import StoredFood, StoredRecipient
from .oracle import BaseScoringClient


_NON_DIGITS = re.compile(r"[^0-9]")

PROMPT_TEMPLATE = """You are helping match surplus food to recipients.

Food: {food_name}, quantity: {quantity}, urgency: {urgency}.
Recipient: {recipient_name}, capacity: {capacity}, location: {address}.
Rate the suitability of this food donation to the recipient from 0 to 100, and respond with only the number."""


def parse_score(text: Optional[str]) -> int:
    """
    Turn free-text oracle output into an integer score.

    All non-digit characters are dropped before parsing, so "Score: 42/100"
    becomes 42100. Anything without digits scores 0.
    """
    if not text:
        return 0

    digits = _NON_DIGITS.sub("", text)
    if not digits:
        return 0

    try:
        return int(digits, 10)
    except ValueError:
        # Exceeds the interpreter's int string conversion limit
        return 0


def build_prompt(food: StoredFood, recipient: StoredRecipient) -> str:
    """Render the rating prompt for one (food, recipient) pair."""
    return PROMPT_TEMPLATE.format(
        food_name=food.name,
        quantity=food.quantity or "unknown",
        urgency=food.urgency or "unknown",
        recipient_name=recipient.name,
        capacity=recipient.capacity or "unknown",
        address=recipient.address,
    )


@dataclass
class MatchedFood:
    """Food summary embedded in a match."""

    name: str
    quantity: Optional[Union[int, float]] = None
    urgency: Optional[str] = None


@dataclass
class Match:
    """Best recipient found for one food item."""

    recipient: str
    score: int
    food: MatchedFood = field(default_factory=lambda: MatchedFood(name=""))

    def to_dict(self) -> dict:
        return {
            "recipient": self.recipient,
            "score": self.score,
            "food": {
                "name": self.food.name,
                "quantity": self.food.quantity,
                "urgency": self.food.urgency,
            },
        }


class MatchingEngine:
    """
    Scores every (food, recipient) pair and keeps the best per food.

    Oracle calls for one food run through a semaphore of size
    ``concurrency``; with the default of 1 they are strictly sequential.
    Foods are always processed one after another.
    """

    def __init__(
        self,
        oracle: BaseScoringClient,
        concurrency: int = 1,
    ):
        """
        Initialize engine.

        Args:
            oracle: Scoring oracle client.
            concurrency: Maximum in-flight oracle calls per food.
        """
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")

        self.oracle = oracle
        self.concurrency = concurrency

    async def score_pair(
        self,
        food: StoredFood,
        recipient: StoredRecipient,
    ) -> Optional[int]:
        """
        Ask the oracle to rate one pair.

        Returns:
            Parsed score, or None if the oracle call failed.
        """
        prompt = build_prompt(food, recipient)
        logger.debug(f"Sending prompt to scoring oracle:\n{prompt}")

        try:
            score_text = await self.oracle.complete(prompt)
        except Exception as e:
            logger.error(
                f'Scoring oracle error for food "{food.name}" and '
                f'recipient "{recipient.name}": {e}'
            )
            return None

        score = parse_score(score_text)
        logger.debug(f'Score text received: "{score_text}" -> {score}')
        return score

    async def best_match(
        self,
        food: StoredFood,
        recipients: Sequence[StoredRecipient],
    ) -> Optional[Match]:
        """Find the best-scoring recipient for a single food item."""
        semaphore = asyncio.Semaphore(self.concurrency)

        async def bounded(recipient: StoredRecipient) -> Optional[int]:
            async with semaphore:
                return await self.score_pair(food, recipient)

        scores = await asyncio.gather(*(bounded(r) for r in recipients))

        best_match = None
        best_score = -1

        # Selection runs in recipient order so ties keep the earliest
        for recipient, score in zip(recipients, scores):
            if score is None:
                continue
            if score > best_score:
                best_score = score
                best_match = Match(
                    recipient=recipient.name,
                    score=score,
                    food=MatchedFood(
                        name=food.name,
                        quantity=food.quantity,
                        urgency=food.urgency,
                    ),
                )

        return best_match

    async def compute_matches(
        self,
        foods: Sequence[StoredFood],
        recipients: Sequence[StoredRecipient],
    ) -> list[Match]:
        """
        Match each food to its best recipient.

        Args:
            foods: Food rows, in the order they should be reported.
            recipients: Candidate recipients; earlier entries win ties.

        Returns:
            One Match per food that received at least one usable score,
            in food order.
        """
        matches = []

        for food in foods:
            match = await self.best_match(food, recipients)

            if match is not None:
                logger.info(f'Best match for "{food.name}": {match.recipient} ({match.score})')
                matches.append(match)
            else:
                logger.info(f'No match found for "{food.name}"')

        logger.info(f"Computed {len(matches)} matches for {len(foods)} foods")
        return matches

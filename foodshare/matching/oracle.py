"""
Scoring Oracle

LLM completion clients used to rate how well a food item suits a recipient.
The oracle is a black box: prompt in, free text out. Parsing the text into
a score is the matching engine's job.
"""

import os
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from loguru import logger


class LLMProvider(str, Enum):
    """Supported LLM providers."""
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    MOCK = "mock"


class BaseScoringClient(ABC):
    """Abstract base class for scoring oracle clients."""

    model: str = ""

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """Send a single user prompt and return the raw completion text."""
        pass

    async def aclose(self) -> None:
        """Release network resources."""
        return None


class OpenAIScoringClient(BaseScoringClient):
    """
    OpenAI chat completions client.

    One user message per call, default sampling settings.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
    ):
        """
        Initialize OpenAI client.

        Args:
            api_key: OpenAI API key
            model: Model identifier
        """
        self.api_key = api_key
        self.model = model
        self._client = None

    def _get_client(self):
        """Lazy initialization of OpenAI client."""
        if self._client is None:
            import openai
            self._client = openai.AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def complete(self, prompt: str) -> str:
        client = self._get_client()

        response = await client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
        )
        logger.debug(f"Raw OpenAI response: {response}")

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None


class AnthropicScoringClient(BaseScoringClient):
    """Anthropic Claude messages client."""

    def __init__(
        self,
        api_key: str,
        model: str = "claude-3-5-haiku-latest",
        max_tokens: int = 16,
    ):
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self._client = None

    def _get_client(self):
        """Lazy initialization of Anthropic client."""
        if self._client is None:
            import anthropic
            self._client = anthropic.AsyncAnthropic(api_key=self.api_key)
        return self._client

    async def complete(self, prompt: str) -> str:
        client = self._get_client()

        response = await client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
        logger.debug(f"Raw Anthropic response: {response}")

        if not response.content:
            return ""
        return response.content[0].text

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None


class MockScoringClient(BaseScoringClient):
    """
    Offline client for development without API keys.

    Every pairing gets the same rating, so matching falls back to the
    first recipient for each food.
    """

    model = "mock-v1"

    def __init__(self, fixed_score: int = 50):
        self.fixed_score = fixed_score

    async def complete(self, prompt: str) -> str:
        return str(self.fixed_score)


def create_scoring_client(
    provider: LLMProvider = LLMProvider.OPENAI,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
    allow_mock_fallback: bool = True,
) -> BaseScoringClient:
    """
    Factory function to create a scoring client.

    Falls back to ``MockScoringClient`` when the provider has no API key,
    unless ``allow_mock_fallback`` is off.

    Raises:
        ValueError: Unknown provider, or missing key with fallback disabled.
    """
    provider = LLMProvider(provider)
    client = None

    if provider == LLMProvider.OPENAI:
        key = api_key or os.environ.get("OPENAI_API_KEY")
        if key:
            client = OpenAIScoringClient(
                api_key=key,
                model=model or "gpt-4o-mini",
            )

    elif provider == LLMProvider.ANTHROPIC:
        key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        if key:
            client = AnthropicScoringClient(
                api_key=key,
                model=model or "claude-3-5-haiku-latest",
            )

    if client is None:
        if provider != LLMProvider.MOCK:
            if not allow_mock_fallback:
                raise ValueError(f"No API key configured for provider {provider.value}")
            logger.warning(f"No API key found for provider {provider.value}. Using MockScoringClient.")
        client = MockScoringClient()

    return client

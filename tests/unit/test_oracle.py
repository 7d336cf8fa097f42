"""
Unit tests for scoring oracle clients.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from foodshare.matching.oracle import (
    AnthropicScoringClient,
    LLMProvider,
    MockScoringClient,
    OpenAIScoringClient,
    create_scoring_client,
)


class TestCreateScoringClient:
    """Tests for the client factory."""

    def test_openai_with_key(self):
        client = create_scoring_client(LLMProvider.OPENAI, api_key="sk-test")

        assert isinstance(client, OpenAIScoringClient)
        assert client.model == "gpt-4o-mini"

    def test_anthropic_with_key_and_model(self):
        client = create_scoring_client("anthropic", api_key="sk-ant", model="claude-test")

        assert isinstance(client, AnthropicScoringClient)
        assert client.model == "claude-test"

    def test_missing_key_falls_back_to_mock(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)

        client = create_scoring_client(LLMProvider.OPENAI)

        assert isinstance(client, MockScoringClient)

    def test_missing_key_without_fallback_raises(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)

        with pytest.raises(ValueError, match="openai"):
            create_scoring_client(LLMProvider.OPENAI, allow_mock_fallback=False)

    def test_mock_provider_ignores_fallback_flag(self):
        client = create_scoring_client(LLMProvider.MOCK, allow_mock_fallback=False)

        assert isinstance(client, MockScoringClient)

    def test_unknown_provider_rejected(self):
        with pytest.raises(ValueError):
            create_scoring_client("carrier-pigeon")


@pytest.mark.asyncio
class TestClients:
    """Tests for the completion wrappers."""

    async def test_openai_complete_returns_message_content(self):
        client = OpenAIScoringClient(api_key="sk-test")
        create = AsyncMock(return_value=SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content="85"))],
        ))
        client._client = MagicMock()
        client._client.chat.completions.create = create

        text = await client.complete("rate this")

        assert text == "85"
        create.assert_awaited_once_with(
            model="gpt-4o-mini",
            messages=[{"role": "user", "content": "rate this"}],
        )

    async def test_openai_empty_choices(self):
        client = OpenAIScoringClient(api_key="sk-test")
        client._client = MagicMock()
        client._client.chat.completions.create = AsyncMock(
            return_value=SimpleNamespace(choices=[]),
        )

        assert await client.complete("rate this") == ""

    async def test_openai_null_content(self):
        client = OpenAIScoringClient(api_key="sk-test")
        client._client = MagicMock()
        client._client.chat.completions.create = AsyncMock(return_value=SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=None))],
        ))

        assert await client.complete("rate this") == ""

    async def test_openai_errors_propagate(self):
        client = OpenAIScoringClient(api_key="sk-test")
        client._client = MagicMock()
        client._client.chat.completions.create = AsyncMock(side_effect=RuntimeError("429"))

        with pytest.raises(RuntimeError):
            await client.complete("rate this")

    async def test_anthropic_complete_returns_text(self):
        client = AnthropicScoringClient(api_key="sk-ant")
        client._client = MagicMock()
        client._client.messages.create = AsyncMock(return_value=SimpleNamespace(
            content=[SimpleNamespace(text="64")],
        ))

        assert await client.complete("rate this") == "64"

    async def test_mock_client_is_constant(self):
        client = MockScoringClient(fixed_score=42)

        assert await client.complete("anything") == "42"

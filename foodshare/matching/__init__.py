"""
Matching Module for FoodShare

Ranks recipients for each surplus food item:
- LLM scoring oracle clients (OpenAI, Anthropic, offline mock)
- Score parsing and prompt construction
- Greedy per-food best-recipient selection
"""

from foodshare.matching.oracle import (
    LLMProvider,
    BaseScoringClient,
    OpenAIScoringClient,
    AnthropicScoringClient,
    MockScoringClient,
    create_scoring_client,
)
from foodshare.matching.engine import (
    MatchingEngine,
    Match,
    MatchedFood,
    parse_score,
    build_prompt,
)

__all__ = [
    # Oracle
    "LLMProvider",
    "BaseScoringClient",
    "OpenAIScoringClient",
    "AnthropicScoringClient",
    "MockScoringClient",
    "create_scoring_client",
    # Engine
    "MatchingEngine",
    "Match",
    "MatchedFood",
    "parse_score",
    "build_prompt",
]

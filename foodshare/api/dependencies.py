"""
Dependency injection for FastAPI routes.

Provides injectable dependencies for:
- Configuration
- The persistence gateway and repositories
- The matching engine and scoring oracle
- The payment client
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Request
from loguru import logger

from foodshare.matching.engine import MatchingEngine
from foodshare.matching.oracle import BaseScoringClient, create_scoring_client
from foodshare.payments.intasend import IntaSendClient
from foodshare.storage.database import Database
from foodshare.storage.repositories import (
    FoodRepository,
    RecipientRepository,
    UserRepository,
)


# =============================================================================
# Configuration
# =============================================================================

# Only these environments may score with the constant mock oracle
MOCK_ORACLE_ENVIRONMENTS = ("development", "test")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass
class Settings:
    """Application settings loaded from environment."""

    # Database
    database_url: str = "sqlite+aiosqlite:///./foodshare.db"
    database_echo: bool = False
    database_ssl: bool = False

    # Payments (IntaSend)
    intasend_public_key: Optional[str] = None
    intasend_private_key: Optional[str] = None
    intasend_test_mode: bool = False
    payment_currency: str = "KES"

    # Scoring oracle
    llm_provider: str = "openai"  # openai, anthropic, mock
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    llm_model: Optional[str] = None
    match_concurrency: int = 1

    # Server
    static_dir: str = "public"
    host: str = "0.0.0.0"
    port: int = 5000

    # Environment
    environment: str = "development"
    debug: bool = True

    @staticmethod
    def database_url_from_env() -> Optional[str]:
        """
        Build the database URL.

        DATABASE_URL wins; otherwise DB_HOST/DB_USER/DB_PASSWORD/DB_NAME/DB_PORT
        are assembled into a PostgreSQL (asyncpg) URL.
        """
        url = os.getenv("DATABASE_URL")
        if url:
            return url

        host = os.getenv("DB_HOST")
        if not host:
            return None

        from sqlalchemy.engine import URL

        port = os.getenv("DB_PORT")
        return URL.create(
            "postgresql+asyncpg",
            username=os.getenv("DB_USER"),
            password=os.getenv("DB_PASSWORD"),
            host=host,
            port=int(port) if port else None,
            database=os.getenv("DB_NAME"),
        ).render_as_string(hide_password=False)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            database_url=cls.database_url_from_env() or cls.database_url,
            database_echo=_env_flag("DATABASE_ECHO"),
            database_ssl=_env_flag("DB_SSL"),
            intasend_public_key=os.getenv("INTASEND_PUBLIC_KEY"),
            intasend_private_key=os.getenv("INTASEND_PRIVATE_KEY"),
            intasend_test_mode=_env_flag("INTASEND_TEST_MODE"),
            payment_currency=os.getenv("PAYMENT_CURRENCY", cls.payment_currency),
            llm_provider=os.getenv("LLM_PROVIDER", cls.llm_provider),
            openai_api_key=os.getenv("OPENAI_API_KEY"),
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY"),
            llm_model=os.getenv("LLM_MODEL"),
            match_concurrency=int(os.getenv("MATCH_CONCURRENCY", cls.match_concurrency)),
            static_dir=os.getenv("STATIC_DIR", cls.static_dir),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", cls.port)),
            environment=os.getenv("FOODSHARE_ENV", cls.environment),
            debug=_env_flag("DEBUG", "true"),
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings.from_env()


# =============================================================================
# Service Container
# =============================================================================

class ServiceContainer:
    """
    Explicitly constructed application services.

    Built once in the application lifespan; any component can be passed in
    to replace the default (tests hand in fakes this way).
    """

    def __init__(
        self,
        settings: Settings,
        database: Optional[Database] = None,
        oracle: Optional[BaseScoringClient] = None,
        payments: Optional[IntaSendClient] = None,
    ):
        self.settings = settings

        self.database = database or Database(
            settings.database_url,
            echo=settings.database_echo,
            ssl=settings.database_ssl,
        )

        if oracle is None:
            api_key = None
            if settings.llm_provider == "openai":
                api_key = settings.openai_api_key
            elif settings.llm_provider == "anthropic":
                api_key = settings.anthropic_api_key
            oracle = create_scoring_client(
                provider=settings.llm_provider,
                api_key=api_key,
                model=settings.llm_model,
                allow_mock_fallback=settings.environment in MOCK_ORACLE_ENVIRONMENTS,
            )
        self.oracle = oracle

        self.payments = payments or IntaSendClient(
            public_key=settings.intasend_public_key,
            private_key=settings.intasend_private_key,
            test_mode=settings.intasend_test_mode,
            currency=settings.payment_currency,
        )

        self.user_repository = UserRepository(self.database)
        self.recipient_repository = RecipientRepository(self.database)
        self.food_repository = FoodRepository(self.database)
        self.matching_engine = MatchingEngine(
            oracle=self.oracle,
            concurrency=settings.match_concurrency,
        )

    async def startup(self) -> None:
        """Create tables."""
        logger.info("Creating database tables...")
        await self.database.create_tables()

    async def aclose(self) -> None:
        """Close pool and HTTP clients."""
        await self.payments.aclose()
        await self.oracle.aclose()
        await self.database.dispose()


def get_service_container(request: Request) -> ServiceContainer:
    """Get the container stored on the application."""
    return request.app.state.services


# =============================================================================
# Individual Service Dependencies
# =============================================================================

def get_user_repository(
    container: ServiceContainer = Depends(get_service_container),
) -> UserRepository:
    """Dependency for user repository."""
    return container.user_repository


def get_recipient_repository(
    container: ServiceContainer = Depends(get_service_container),
) -> RecipientRepository:
    """Dependency for recipient repository."""
    return container.recipient_repository


def get_food_repository(
    container: ServiceContainer = Depends(get_service_container),
) -> FoodRepository:
    """Dependency for food repository."""
    return container.food_repository


def get_matching_engine(
    container: ServiceContainer = Depends(get_service_container),
) -> MatchingEngine:
    """Dependency for matching engine."""
    return container.matching_engine


def get_payment_client(
    container: ServiceContainer = Depends(get_service_container),
) -> IntaSendClient:
    """Dependency for payment client."""
    return container.payments

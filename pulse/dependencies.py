"""
Service wiring for Founder Pulse.

Creates the AI provider, connects MongoDB and initializes every module's
services once at startup.
"""

import logging
from functools import lru_cache
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.ai import AIProvider, ClaudeProvider, OpenAIProvider
from common.database import MongoDB, get_main_database, set_main_database

from pulse.config import Settings, get_settings
from pulse.action_plan.dependencies import init_action_plan_services, get_action_plan_service
from pulse.assessment.dependencies import init_assessment_services
from pulse.community.dependencies import init_community_services, get_peer_match_service
from pulse.journal.dependencies import init_journal_services, get_journal_service

logger = logging.getLogger(__name__)


# =============================================================================
# AI Provider Dependencies
# =============================================================================
@lru_cache()
def get_ai_provider() -> Optional[AIProvider]:
    """
    Get the configured AI provider.

    Returns None when no API key is configured; insight generation then
    always uses the fallback text.
    """
    settings = get_settings()
    provider = settings.AI_PROVIDER.lower()
    api_key = settings.get_ai_api_key()

    if not api_key:
        logger.warning(f"No API key configured for AI provider '{provider}', insights disabled")
        return None

    # Backstop only; InsightGenerator enforces the real deadline
    timeout = settings.INSIGHT_TIMEOUT_SECONDS * 2

    if provider == "claude":
        return ClaudeProvider(api_key=api_key, model=settings.CLAUDE_MODEL, timeout=timeout)

    if provider == "openai":
        return OpenAIProvider(api_key=api_key, model=settings.OPENAI_MODEL, timeout=timeout)

    # Default to Groq through its OpenAI-compatible endpoint
    return OpenAIProvider(
        api_key=api_key,
        model=settings.GROQ_MODEL,
        base_url=settings.GROQ_BASE_URL,
        timeout=timeout,
        name="groq",
    )


# =============================================================================
# Service Initialization
# =============================================================================
def init_all_services(
    db: AsyncIOMotorDatabase,
    settings: Optional[Settings] = None,
    ai_client: Optional[AIProvider] = None
) -> None:
    """
    Initialize every module's services.

    Args:
        db: MongoDB database connection
        settings: Application settings (default: get_settings())
        ai_client: AI provider for insights (default: get_ai_provider())
    """
    settings = settings or get_settings()
    if ai_client is None:
        ai_client = get_ai_provider()

    init_assessment_services(
        db,
        ai_client=ai_client,
        insight_timeout=settings.INSIGHT_TIMEOUT_SECONDS,
        insight_max_tokens=settings.INSIGHT_MAX_TOKENS,
    )
    init_journal_services(db, trend_window_days=settings.TREND_WINDOW_DAYS)
    init_community_services(db, max_matches=settings.MAX_PEER_MATCHES)
    init_action_plan_services(db)

    logger.info("All services initialized")


async def ensure_indexes() -> None:
    """Create the unique indexes the upserts rely on."""
    await get_journal_service().ensure_indexes()
    await get_peer_match_service().ensure_indexes()
    await get_action_plan_service().ensure_indexes()


async def startup(settings: Optional[Settings] = None) -> MongoDB:
    """
    Connect to MongoDB and wire all services.

    Returns:
        The connected MongoDB instance (also set as the main database)
    """
    settings = settings or get_settings()
    settings.validate_required()

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    db = MongoDB()
    await db.connect(uri=settings.MONGODB_URI, database_name=settings.MONGODB_DATABASE)
    set_main_database(db)

    init_all_services(db.database, settings)
    await ensure_indexes()

    logger.info("Founder Pulse started")
    return db


async def shutdown() -> None:
    await get_main_database().disconnect()
    logger.info("Founder Pulse shut down")

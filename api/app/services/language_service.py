"""
Service for resolving language names: cache lookup, inference fallback, cache population.
"""
from sqlmodel import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import Optional
import logging

from app.models.language import LanguageEntry
from app.services.inference_service import InferenceService
from app.services.prompt_service import UNKNOWN_LANGUAGE_NAME, build_language_name_prompt

logger = logging.getLogger(__name__)


def get_language_name(session: Session, language_code: str) -> Optional[str]:
    """
    Look up the cached name for a language code.

    A failing store read is treated as a cache miss.

    Args:
        session: Database session
        language_code: Normalized language code (case-sensitive)

    Returns:
        The stored language name, or None on miss
    """
    try:
        entry = session.get(LanguageEntry, language_code)
    except SQLAlchemyError as e:
        logger.error(f"Failed to read language '{language_code}' from store, treating as miss: {str(e)}")
        session.rollback()
        return None
    return entry.language_name if entry else None


def save_language_name(session: Session, language_code: str, language_name: str) -> bool:
    """
    Insert a new cache entry.

    Entries are insert-only. A duplicate key means a concurrent request already
    stored this code, which is not an error.

    Returns:
        True if the entry was written by this call
    """
    entry = LanguageEntry(language_code=language_code, language_name=language_name)
    try:
        session.add(entry)
        session.commit()
    except IntegrityError:
        session.rollback()
        logger.info(f"Language '{language_code}' was already stored by another request")
        return False
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Failed to store language '{language_code}': {str(e)}")
        return False

    logger.info(f"Stored language '{language_code}' as '{language_name}'")
    return True


def infer_language_name(inference: InferenceService, language_code: str) -> str:
    """
    Ask the model for the English name of a language code.

    Makes a single attempt. Any failure degrades to 'Unknown'.
    """
    prompt = build_language_name_prompt(language_code)
    try:
        return inference.complete(prompt).strip()
    except Exception as e:
        logger.error(f"AI detection error for '{language_code}': {str(e)}")
        return UNKNOWN_LANGUAGE_NAME


def resolve_language_name(
    session: Session,
    language_code: str,
    inference: InferenceService
) -> str:
    """
    Resolve the English name for a language code.

    This function:
    1. Returns the stored name on a cache hit (no inference, no write)
    2. On a miss, asks the model once for the name ('Unknown' if that fails)
    3. Stores the result, including a degraded 'Unknown', before returning

    Args:
        session: Database session
        language_code: Normalized language code
        inference: Text completion service

    Returns:
        The language name
    """
    language_name = get_language_name(session, language_code)
    if language_name is not None:
        logger.debug(f"Cache hit for '{language_code}': '{language_name}'")
        return language_name

    logger.info(f"Cache miss for '{language_code}', asking the model")
    language_name = infer_language_name(inference, language_code)
    save_language_name(session, language_code, language_name)
    return language_name

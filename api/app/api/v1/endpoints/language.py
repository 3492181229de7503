"""
Endpoint for resolving a language code to its English name.
"""
from fastapi import APIRouter, Depends, Header, Query, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from sqlmodel import Session
from typing import Optional
import asyncio
import logging

from app.core.config import settings
from app.core.database import get_session
from app.models.enums import ResponseType
from app.schemas.language import LanguageNameResponse
from app.services.inference_service import InferenceService, get_inference_service
from app.services.language_service import resolve_language_name
from app.utils.accept_language import negotiate_language_code

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/language", tags=["language"])

MISSING_LANGUAGE_CODE_MESSAGE = "No language code provided and no valid Accept-Language header found"


def build_language_response(
    language_code: str,
    language_name: str,
    response_type: ResponseType
) -> Response:
    """Format a resolved name as plain text or JSON with a public cache directive."""
    headers = {"Cache-Control": f"public, max-age={settings.cache_max_age_seconds}"}

    if response_type == ResponseType.TEXT:
        return PlainTextResponse(language_name, headers=headers)

    body = LanguageNameResponse(language_code=language_code, language_name=language_name)
    return JSONResponse(content=body.model_dump(by_alias=True), headers=headers)


@router.api_route("", methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"])
async def get_language_name(
    language_code: Optional[str] = Query(default=None, alias="languageCode"),
    response_type: Optional[str] = Query(default=None, alias="type"),
    accept_language: Optional[str] = Header(default=None),
    session: Session = Depends(get_session),
    inference: InferenceService = Depends(get_inference_service)
):
    """
    Resolve the English name of a language code.

    The code comes from the languageCode query parameter or, when that is
    absent, from the highest-weighted Accept-Language tag. Names are served
    from the languages table and filled in by the model on first request.

    Args:
        language_code: Explicit language code (query parameter 'languageCode')
        response_type: 'text' for a plain-text body, anything else for JSON (query parameter 'type')
        accept_language: Accept-Language header
        session: Database session
        inference: Text completion service

    Returns:
        Plain-text or JSON response, or 400 when no code can be determined
    """
    code = negotiate_language_code(language_code, accept_language)
    if code is None:
        logger.info("Rejected request without language code or usable Accept-Language header")
        return PlainTextResponse(
            MISSING_LANGUAGE_CODE_MESSAGE,
            status_code=status.HTTP_400_BAD_REQUEST
        )

    # Store and model calls block, keep them off the event loop
    language_name = await asyncio.to_thread(resolve_language_name, session, code, inference)

    return build_language_response(code, language_name, ResponseType.from_query(response_type))

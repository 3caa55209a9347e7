"""
Chat API endpoints
Single-turn tutor chat for authenticated users
"""

import logging
from fastapi import APIRouter, Depends
from typing import Optional

from tutorchat.api.deps import get_current_user, get_tutor
from tutorchat.core.exceptions import http_400_bad_request, http_500_internal_error
from tutorchat.core.security import TokenClaims
from tutorchat.schemas.chat import ChatRequest, ChatResponse
from tutorchat.services.chat_service import TutorClient
from tutorchat.utils.error_handlers import ErrorHandler

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
async def chat(
    request: Optional[ChatRequest] = None,
    current_user: TokenClaims = Depends(get_current_user),
    tutor: TutorClient = Depends(get_tutor)
) -> ChatResponse:
    """
    Send one message to the tutor model

    No earlier turns are sent and nothing is stored.

    Args:
        request: The student's message
        current_user: Claims from the bearer token
        tutor: Model client

    Returns:
        ChatResponse: Reply text

    Raises:
        HTTPException: 400 if message is missing, 500 if the model call fails
    """
    # A POST with no body is treated like an empty JSON object
    request = request or ChatRequest()
    if not request.message:
        raise http_400_bad_request("No message provided")

    logger.info(f"Chat request from user {current_user.user_id}")

    try:
        reply = await tutor.reply(request.message)
    except Exception as e:
        error = ErrorHandler.handle_llm_error(e)
        logger.warning(f"Chat failed for user {current_user.user_id}: {error['error']}")
        raise http_500_internal_error(error["message"])

    return ChatResponse(reply=reply)

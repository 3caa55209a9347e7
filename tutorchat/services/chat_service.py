"""
Chat Service - single-turn tutor replies
Forwards one student message to the model-completion API via LiteLLM
"""

import logging
from typing import Any, Dict, List

import litellm
from litellm import acompletion

from tutorchat.config import Settings

# Configure litellm to automatically drop unsupported parameters
litellm.drop_params = True

logger = logging.getLogger(__name__)

# Returned when the model answers with something other than text
FALLBACK_REPLY = "Could not understand response"


class TutorClient:
    """
    Stateless tutor proxy

    Every call is a fresh single-turn request: fixed model, fixed output
    limit, fixed system prompt and the one user message. Nothing is retried
    and nothing is persisted.
    """

    def __init__(self, settings: Settings):
        """
        Initialize tutor client

        Args:
            settings: Application settings (model, limits, prompt, credentials)
        """
        self.model = settings.LLM_MODEL
        self.max_tokens = settings.LLM_MAX_TOKENS
        self.timeout = settings.LLM_TIMEOUT
        self.system_prompt = settings.TUTOR_SYSTEM_PROMPT
        self.api_key = settings.ANTHROPIC_API_KEY

        logger.info(f"Tutor client using model: {self.model}")

    def build_messages(self, message: str) -> List[Dict[str, str]]:
        """System instruction followed by the single user turn"""
        # TODO: prepend stored chat turns once messages are persisted per chat
        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": message},
        ]

    def _completion_kwargs(self, message: str) -> Dict[str, Any]:
        kwargs = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": self.build_messages(message),
            "timeout": self.timeout,
        }

        if self.api_key:
            kwargs["api_key"] = self.api_key

        return kwargs

    async def reply(self, message: str) -> str:
        """
        Ask the model for a tutor reply

        Args:
            message: The student's message

        Returns:
            The reply text, or FALLBACK_REPLY when the first choice has no text

        Raises:
            Any LiteLLM/provider exception, unchanged
        """
        response = await acompletion(**self._completion_kwargs(message))
        return extract_reply_text(response)


def extract_reply_text(response: Any) -> str:
    """Text of the first choice, or the fallback when it isn't text"""
    try:
        content = response.choices[0].message.content
    except (AttributeError, IndexError, TypeError):
        logger.warning("Model response had no choices")
        return FALLBACK_REPLY

    if isinstance(content, str) and content:
        return content

    logger.warning("Model response did not start with a text block")
    return FALLBACK_REPLY

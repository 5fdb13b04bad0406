from typing import Dict, List

import openai
from loguru import logger
from pydantic import ValidationError

from commit_ai.config import Settings
from commit_ai.errors import MalformedAIResponseError
from commit_ai.models import AIResponse
from commit_ai.utils.constants import RESPONSE_FORMAT, TEMPERATURE


def setup_openai_client(settings: Settings) -> openai.OpenAI:
    """Initialize and return an OpenAI client from explicit settings.

    Raises:
        MissingCredentialError: If no API key is configured
    """
    client = openai.OpenAI(
        api_key=settings.require_api_key(),
        base_url=settings.api_base,
        timeout=settings.timeout,
        max_retries=settings.max_retries,
    )
    logger.debug(f"OpenAI client configured for model {settings.model}")
    return client


def request_completion(
    client: openai.OpenAI,
    settings: Settings,
    messages: List[Dict[str, str]],
    max_tokens: int,
) -> str:
    """Send one JSON-object chat completion and return the reply text."""
    logger.debug(f"Sending request to OpenAI API ({settings.model}, max_tokens={max_tokens})")
    try:
        response = client.chat.completions.create(
            model=settings.model,
            messages=messages,
            max_tokens=max_tokens,
            temperature=TEMPERATURE,
            response_format=RESPONSE_FORMAT,
        )
    except openai.APIError as e:
        logger.error(f"OpenAI API error ({type(e).__name__}): {e}")
        raise

    if response.usage is not None:
        logger.debug(
            f"Token usage: {response.usage.prompt_tokens} prompt, "
            f"{response.usage.completion_tokens} completion"
        )
    return response.choices[0].message.content or ""


def parse_ai_response(content: str, require_commit: bool = False) -> AIResponse:
    """Validate the model reply against the expected JSON shape.

    Raises:
        MalformedAIResponseError: If the reply is not JSON or misses a section
    """
    if not content or not content.strip():
        raise MalformedAIResponseError(content, "empty response")
    try:
        result = AIResponse.model_validate_json(content)
    except ValidationError as e:
        raise MalformedAIResponseError(content, f"{e.error_count()} validation error(s)") from e

    if require_commit and result.commit is None:
        raise MalformedAIResponseError(content, "missing commit section")
    return result

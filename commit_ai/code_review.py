from typing import Optional

import git
import openai
from loguru import logger

from commit_ai.config import Settings
from commit_ai.console import log
from commit_ai.models import CodeReviewResult
from commit_ai.utils.ai_client import parse_ai_response, request_completion, setup_openai_client
from commit_ai.utils.constants import REVIEW_MAX_TOKENS
from commit_ai.utils.diff_utils import get_smart_diff, open_repository
from commit_ai.utils.display import display_review_feedback, handle_security_warning, show_setup_hint
from commit_ai.utils.prompts import build_messages


def review_code(
    settings: Settings,
    source_branch: str,
    target_branch: str,
    repo: Optional[git.Repo] = None,
    client: Optional[openai.OpenAI] = None,
) -> CodeReviewResult:
    """Review the changes of ``target_branch`` since it diverged from ``source_branch``.

    Raises:
        InvalidReferenceError: If either branch does not exist
        NoChangesError: If the branches do not differ
        MalformedAIResponseError: If the reply is not the expected JSON document
        MissingCredentialError: If no API key is configured
    """
    try:
        repo = repo or open_repository()
        payload = get_smart_diff(repo, from_branch=source_branch, to_branch=target_branch)

        client = client or setup_openai_client(settings)
        messages = build_messages(payload, include_commit=False)
        content = request_completion(client, settings, messages, REVIEW_MAX_TOKENS)

        result = parse_ai_response(content)

        if result.security.has_sensitive_info:
            handle_security_warning(result.security.details)

        display_review_feedback(result.review.feedback, announce_clean=True)

        return CodeReviewResult(security=result.security, review=result.review)

    except Exception as e:
        logger.debug(f"Code review of {source_branch}...{target_branch} failed: {e!r}")
        log.error(f"\n❌ Code review failed: {e}")
        show_setup_hint(str(e))
        raise

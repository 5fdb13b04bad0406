from typing import Optional

import git
import openai
from loguru import logger

from commit_ai.config import Settings
from commit_ai.console import log
from commit_ai.errors import MalformedAIResponseError
from commit_ai.models import CommitResult
from commit_ai.utils.ai_client import parse_ai_response, request_completion, setup_openai_client
from commit_ai.utils.constants import COMMIT_MAX_TOKENS
from commit_ai.utils.diff_utils import get_smart_diff, open_repository
from commit_ai.utils.display import display_review_feedback, handle_security_warning
from commit_ai.utils.prompts import build_messages


def parse_commit_response(content: str) -> CommitResult:
    """Turn the model reply into a CommitResult.

    A reply that cannot be parsed is used verbatim as the commit message and
    reports no security or review findings.
    """
    try:
        result = parse_ai_response(content, require_commit=True)
    except MalformedAIResponseError as e:
        logger.warning(f"{e}; using raw reply as commit message")
        log.warning("Warning: Failed to parse AI response, falling back to basic commit message")
        return CommitResult(message=e.content)

    if result.security.has_sensitive_info:
        handle_security_warning(result.security.details)

    if result.review.has_issues:
        display_review_feedback(result.review.feedback)

    return CommitResult(
        message=result.commit.message,
        has_sensitive_info=result.security.has_sensitive_info,
        has_review_issues=result.review.has_issues,
        security=result.security,
        review=result.review,
    )


def generate_commit_message(
    settings: Settings,
    stage: bool = False,
    debug: bool = False,
    repo: Optional[git.Repo] = None,
    client: Optional[openai.OpenAI] = None,
) -> CommitResult:
    """Generate a commit message and review findings for the local changes.

    Args:
        settings: Loaded configuration; must carry an API key unless ``client`` is given
        stage: Stage all working-tree changes first
        debug: Log the diff, changed files and statistics
        repo: Repository to read; the one containing the working directory by default
        client: Preconfigured OpenAI client

    Raises:
        MissingCredentialError: If no API key is configured
        NoChangesError: If there is nothing to commit
        SubprocessFailureError: If a git command fails
    """
    client = client or setup_openai_client(settings)
    repo = repo or open_repository()

    payload = get_smart_diff(repo, should_stage=stage)

    if debug:
        logger.debug(f"Git diff:\n{payload.diff}")
        logger.debug(f"Changed files: {payload.changed_files}")
        logger.debug(f"Stats:\n{payload.stats}")

    content = request_completion(client, settings, build_messages(payload), COMMIT_MAX_TOKENS)
    return parse_commit_response(content)

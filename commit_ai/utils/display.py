from typing import List

from commit_ai.console import log
from commit_ai.models import ReviewFeedbackItem
from commit_ai.utils.constants import SETUP_COMMAND, SETUP_HINT_TRIGGER


def handle_security_warning(details: List[str]) -> None:
    log.error("\n⚠️  WARNING: Sensitive information detected in your changes:")
    for detail in details:
        log.error(detail)
    log.error("\nPlease review your changes and remove any sensitive information before committing.\n")


def display_review_feedback(feedback: List[ReviewFeedbackItem], announce_clean: bool = False) -> None:
    if not feedback:
        if announce_clean:
            log.success("\n✅ No issues found in code review.")
        return

    log.info("\n📋 Code Review Feedback:")
    for item in feedback:
        log.info(f"\nFile: {item.file}")
        if item.severity is not None:
            log.info(f"Severity: {item.severity.value}")
        log.info(f"Type: {item.type}")
        log.info(f"Code:\n{item.code}")
        log.warning(f"Issue: {item.description}")
        log.success(f"Suggestion: {item.suggestion}\n")


def show_setup_hint(message: str) -> None:
    if SETUP_HINT_TRIGGER in message:
        log.warning("\nPlease run setup to configure your OpenAI API key:")
        log.cyan(f"{SETUP_COMMAND}\n")

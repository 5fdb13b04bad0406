from typing import Dict, List

from commit_ai.utils.constants import (
    COMMIT_FORMAT,
    COMMIT_TASK,
    CONTEXT_TEMPLATE,
    REVIEW_FORMAT,
    REVIEW_GUIDELINES,
    SECURITY_FORMAT,
    SYSTEM_PROMPT_HEADER,
    USER_PROMPT_TEMPLATE,
)
from commit_ai.utils.diff_utils import DiffPayload


def format_file_contents(file_contents: Dict[str, str]) -> str:
    return "\n".join(f"=== {path} ===\n{content}\n" for path, content in file_contents.items())


def _build_system_prompt(payload: DiffPayload, include_commit: bool) -> str:
    context = CONTEXT_TEMPLATE.format(
        changed_files=", ".join(payload.changed_files),
        stats=payload.stats,
        file_contents=format_file_contents(payload.file_contents),
    )
    tasks = REVIEW_GUIDELINES
    formats = [SECURITY_FORMAT, REVIEW_FORMAT]
    if include_commit:
        tasks += "\n\n" + COMMIT_TASK
        formats.append(COMMIT_FORMAT)

    response_format = "Response Format:\n{\n" + ",\n".join(formats) + "\n}"
    return "\n\n".join([SYSTEM_PROMPT_HEADER, context, tasks, response_format])


def build_messages(payload: DiffPayload, include_commit: bool = True) -> List[Dict[str, str]]:
    """Chat messages asking for security, review and (optionally) commit output."""
    return [
        {"role": "system", "content": _build_system_prompt(payload, include_commit)},
        {"role": "user", "content": USER_PROMPT_TEMPLATE.format(diff=payload.diff)},
    ]

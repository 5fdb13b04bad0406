from dataclasses import dataclass, field
from typing import Dict, List, Optional

import git
from loguru import logger

from .fetcher import fetch_diff
from .parser import parse_diff
from .sampler import get_smart_file_content


@dataclass
class DiffPayload:
    diff: str
    changed_files: List[str]
    stats: str
    file_contents: Dict[str, str] = field(default_factory=dict)


def get_smart_diff(
    repo: git.Repo,
    should_stage: bool = False,
    from_branch: Optional[str] = None,
    to_branch: Optional[str] = None,
) -> DiffPayload:
    """Collect the diff, its statistics and sampled file contents.

    Raises:
        NoChangesError: If there is nothing to diff
        InvalidReferenceError: If a branch name does not resolve
        SubprocessFailureError: If a git command fails
    """
    diff, stats = fetch_diff(repo, should_stage, from_branch, to_branch)
    changed_lines = parse_diff(diff)

    file_contents: Dict[str, str] = {}
    for file_path, lines in changed_lines.items():
        content = get_smart_file_content(repo, file_path, lines)
        if content:
            file_contents[file_path] = content

    logger.debug(
        f"Diff covers {len(changed_lines)} file(s), "
        f"{len(file_contents)} with sampled content"
    )
    return DiffPayload(
        diff=diff,
        changed_files=list(changed_lines),
        stats=stats,
        file_contents=file_contents,
    )

from typing import Iterable, List, Optional

import git
from loguru import logger

from .fetcher import show_file

MAX_FILE_SIZE = 50 * 1024  # full content below this many characters
MAX_LINES_CONTEXT = 100  # largest excerpt worth sending
CONTEXT_WINDOW = 25
SKIP_MARKER = "\n// ... (skipped lines) ...\n"


def select_line_indices(line_count: int, changed_lines: Iterable[int]) -> List[int]:
    """Sorted 0-based indices within CONTEXT_WINDOW of any changed line."""
    selected = set()
    for line in changed_lines:
        start = max(0, line - CONTEXT_WINDOW)
        end = min(line_count, line + CONTEXT_WINDOW)
        selected.update(range(start, end))
    return sorted(selected)


def sample_content(content: Optional[str], changed_lines: Iterable[int]) -> Optional[str]:
    """Return the whole file, an excerpt around the changes, or None.

    Files under MAX_FILE_SIZE are returned unchanged. Larger files are cut down
    to the lines surrounding each change, with a marker between runs that are
    not adjacent. When the excerpt would exceed MAX_LINES_CONTEXT lines the
    file is left out entirely.
    """
    if not content:
        return None

    if len(content) < MAX_FILE_SIZE:
        return content

    lines = content.split("\n")
    indices = select_line_indices(len(lines), changed_lines)

    if len(indices) > MAX_LINES_CONTEXT:
        return None

    parts = []
    last_index = -1
    for index in indices:
        if last_index != -1 and index > last_index + 1:
            parts.append(SKIP_MARKER)
        parts.append(lines[index] + "\n")
        last_index = index

    return "".join(parts)


def get_smart_file_content(repo: git.Repo, file_path: str, changed_lines: Iterable[int]) -> Optional[str]:
    content = show_file(repo, file_path)
    sampled = sample_content(content, changed_lines)
    if content and sampled is None:
        logger.debug(f"Skipping content of {file_path}: changes too spread out")
    return sampled

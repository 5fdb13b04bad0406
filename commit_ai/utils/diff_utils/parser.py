"""Extract added line numbers per file from a unified diff."""

import re
from typing import Dict, List, Optional, Set

HUNK_HEADER_RE = re.compile(r"@@ -\d+(?:,\d+)? \+(\d+)")

# "+++ b/" and "+++ a/" share the same length
FILE_HEADER_PREFIX_LEN = 6
DEV_NULL = "+++ /dev/null"


def parse_diff(diff_text: str) -> Dict[str, Set[int]]:
    """Map each file of the new tree to the 1-based line numbers that were added.

    Files keep the order of their first ``+++`` header. The line counter only
    resets at a hunk header, so content appearing before any ``@@`` is counted
    from 0 and is not meaningful.
    """
    changed_lines: Dict[str, Set[int]] = {}
    current_file: Optional[str] = None
    current_line = 0

    for line in diff_text.split("\n"):
        if line.startswith("+++ "):
            if line.rstrip() == DEV_NULL:
                current_file = None
                continue
            # git appends a TAB to names containing spaces
            current_file = line[FILE_HEADER_PREFIX_LEN:].split("\t", 1)[0]
            changed_lines.setdefault(current_file, set())
        elif line.startswith("@@ "):
            match = HUNK_HEADER_RE.match(line)
            if match:
                current_line = int(match.group(1))
        elif line.startswith("+") and current_file is not None:
            changed_lines[current_file].add(current_line)
            current_line += 1
        elif line.startswith("-"):
            continue
        else:
            current_line += 1

    return changed_lines


def changed_files(diff_text: str) -> List[str]:
    return list(parse_diff(diff_text))

from typing import Optional, Tuple

import git
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError
from loguru import logger

from commit_ai.console import log
from commit_ai.errors import InvalidReferenceError, NoChangesError, SubprocessFailureError

BASE_DIFF_ARGS = (
    "--unified=8",
    "--function-context",
    "--diff-algorithm=histogram",
)


def open_repository(path: str = ".") -> git.Repo:
    """Open the git repository containing ``path``.

    Raises:
        SubprocessFailureError: If ``path`` is not inside a git work tree
    """
    try:
        return git.Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise SubprocessFailureError(f"Not a git repository: {path}") from e


def _run_git(repo: git.Repo, command: str, *args: str, **kwargs) -> str:
    try:
        return getattr(repo.git, command)(*args, **kwargs)
    except GitCommandError as e:
        raise SubprocessFailureError(f"git {command} failed: {e}") from e


def stage_all(repo: git.Repo) -> None:
    """Stage every working-tree change (``git add .``)."""
    _run_git(repo, "add", ".")
    logger.debug("Staged all working-tree changes")


def fetch_branch_diff(repo: git.Repo, from_branch: str, to_branch: str) -> Tuple[str, str]:
    """Three-dot diff between two references, plus its ``--stat`` summary.

    Raises:
        InvalidReferenceError: If either reference does not resolve
        NoChangesError: If the references have no differences
    """
    revision_range = f"{from_branch}...{to_branch}"
    try:
        diff = repo.git.diff(*BASE_DIFF_ARGS, revision_range)
        stats = repo.git.diff("--stat", revision_range)
    except GitCommandError as e:
        logger.error(f"Failed to diff {revision_range}: {e}")
        raise InvalidReferenceError(from_branch, to_branch, str(e).strip()) from e

    if not diff:
        raise NoChangesError()
    return diff, stats


def fetch_working_diff(repo: git.Repo, should_stage: bool = False) -> Tuple[str, str]:
    """Staged diff, falling back to the unstaged diff when nothing is staged.

    Raises:
        NoChangesError: If neither the index nor the work tree has changes
        SubprocessFailureError: If a git command fails
    """
    if should_stage:
        stage_all(repo)
    else:
        log.warning(
            "\nNote: Only reviewing staged changes. "
            "Use -s flag to stage and review all changes.\n"
        )

    diff = _run_git(repo, "diff", "--staged", *BASE_DIFF_ARGS)
    if diff:
        return diff, _run_git(repo, "diff", "--staged", "--stat")

    diff = _run_git(repo, "diff", *BASE_DIFF_ARGS)
    if not diff:
        raise NoChangesError()

    logger.warning("No staged changes, using unstaged changes instead")
    log.warning("No staged changes found, falling back to unstaged changes.")
    return diff, _run_git(repo, "diff", "--stat")


def fetch_diff(
    repo: git.Repo,
    should_stage: bool = False,
    from_branch: Optional[str] = None,
    to_branch: Optional[str] = None,
) -> Tuple[str, str]:
    """Return ``(diff, stats)`` for a branch pair, or for local changes."""
    if from_branch and to_branch:
        return fetch_branch_diff(repo, from_branch, to_branch)
    return fetch_working_diff(repo, should_stage)


def show_file(repo: git.Repo, file_path: str, ref: str = "HEAD") -> Optional[str]:
    """Content of ``file_path`` at ``ref``, or None when it does not exist there."""
    try:
        return repo.git.show(f"{ref}:{file_path}", strip_newline_in_stdout=False)
    except GitCommandError:
        logger.debug(f"{file_path} not found at {ref}, skipping content")
        return None


def commit(repo: git.Repo, message: str) -> None:
    """Create a commit from the index with ``message``."""
    _run_git(repo, "commit", "-m", message)
    logger.info(f"Changes committed with message: '{message}'")

from typing import Optional


class CommitAIError(Exception):
    """Base exception for commit-ai operations."""
    pass


class NoChangesError(CommitAIError):
    """Raised when there is nothing to diff."""

    def __init__(self, message: str = "No changes found in the repository."):
        super().__init__(message)


class InvalidReferenceError(CommitAIError):
    """Raised when a branch or reference name does not resolve."""

    def __init__(self, source: str, target: str, detail: str = ""):
        self.source = source
        self.target = target
        message = (
            "Failed to get diff between branches. Please verify that "
            f"'{source}' and '{target}' are valid branch names."
        )
        if detail:
            message += f"\nError: {detail}"
        super().__init__(message)


class MissingCredentialError(CommitAIError):
    """Raised when no OpenAI API key is configured."""

    def __init__(
        self,
        message: str = "OpenAI API key not found (OPENAI_API_KEY). Please run: cai --setup",
    ):
        super().__init__(message)


class MalformedAIResponseError(CommitAIError):
    """Raised when the model reply is not the expected JSON document."""

    def __init__(self, content: Optional[str], reason: str = ""):
        self.content = content or ""
        message = "Malformed AI response"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class SubprocessFailureError(CommitAIError):
    """Raised when a git command fails."""
    pass


class ConfigError(CommitAIError):
    """Raised when the configuration store cannot be read or written."""
    pass

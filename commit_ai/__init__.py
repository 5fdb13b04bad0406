"""
commit-ai: AI-powered git commit messages and branch reviews.

Sends the staged (or unstaged) diff, or the diff between two branches, to an
OpenAI chat model together with sampled file contents, and reports:

    - a conventional commit message
    - sensitive data found in the changes
    - code review feedback
"""

__version__ = "1.0.0"

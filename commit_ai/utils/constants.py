"""Constants used across the application."""

# OpenAI API Configuration
COMMIT_MAX_TOKENS = 1000
REVIEW_MAX_TOKENS = 500
TEMPERATURE = 0.7
RESPONSE_FORMAT = {"type": "json_object"}

SETUP_HINT_TRIGGER = "OPENAI_API_KEY"
SETUP_COMMAND = "cai --setup"

# Prompt sections
SYSTEM_PROMPT_HEADER = (
    "You are a senior software engineer performing a thorough code review. "
    "Provide your response as a JSON object."
)

CONTEXT_TEMPLATE = """Context:
- Files changed: {changed_files}
- Change statistics:
{stats}

Full/Partial File Contents:
{file_contents}"""

REVIEW_GUIDELINES = """When reviewing:
1. Use the full file content above for better context
2. Parse line numbers from diff chunks starting with @@ (e.g., "@@ -1,7 +1,9 @@")
   - The second number after + is the new file line number
   - Count lines after each @@ marker to track current line numbers
3. Extract file names from lines starting with "+++" (e.g., "+++ b/src/file.js")
4. In your feedback, always reference:
   - Exact file path from +++ lines
   - Correct line numbers based on the new file (after changes)
5. Focus review on NEW and MODIFIED code (lines with +)

Perform these tasks:

1. Security Analysis:
   - Check for exposed secrets, credentials, or sensitive data
   - Identify security vulnerabilities in the changes
   - Flag any unsafe operations or potential exploits

2. Code Review:
   Focus on the following aspects in order of priority:
   - Critical bugs and logic errors
   - Security vulnerabilities
   - Breaking changes and API compatibility
   - Error handling and edge cases
   - Performance issues in modified code
   - Architecture and design concerns

   Guidelines:
   - Review only the code visible in the diff
   - Provide accurate specific code for issues
   - Suggest concrete fixes
   - Consider the function context provided
   - Focus on substantial issues, not style"""

COMMIT_TASK = """3. Commit Message Generation:
   Create a conventional commit message that accurately describes the changes.
   Format: type(scope): description
   Types: feat, fix, refactor, perf, docs, test, chore"""

SECURITY_FORMAT = """  "security": {
    "hasSensitiveInfo": boolean,
    "details": string[] // Format: "file.js - [type]: description with relevant code snippet"
  }"""

REVIEW_FORMAT = """  "review": {
    "hasIssues": boolean,
    "feedback": Array<{
      "severity": "high" | "medium" | "low",
      "file": string,
      "type": "bug" | "security" | "performance" | "architecture" | "reliability",
      "code": string,  // The problematic code snippet
      "description": string,
      "suggestion": string  // Include suggested code if applicable
    }>
  }"""

COMMIT_FORMAT = """  "commit": {
    "message": string,
    "type": string,
    "scope": string,
    "description": string
  }"""

USER_PROMPT_TEMPLATE = "Review this diff and provide the analysis as a JSON response:\n\n{diff}"

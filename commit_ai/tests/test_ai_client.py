import json
from unittest import TestCase
from unittest.mock import Mock, patch

from commit_ai.config import Settings
from commit_ai.enums import Severity
from commit_ai.errors import MalformedAIResponseError, MissingCredentialError

from ..utils.ai_client import parse_ai_response, request_completion, setup_openai_client

VALID_REPLY = {
    "security": {"hasSensitiveInfo": False, "details": []},
    "review": {
        "hasIssues": True,
        "feedback": [
            {
                "severity": "HIGH",
                "file": "src/app.py",
                "type": "bug",
                "code": "x = y / 0",
                "description": "Division by zero",
                "suggestion": "Guard the divisor",
            }
        ],
    },
    "commit": {"message": "fix(app): guard division", "type": "fix", "scope": "app", "description": "guard division"},
}


def completion(content):
    return Mock(choices=[Mock(message=Mock(content=content))], usage=None)


class TestParseAIResponse(TestCase):
    def test_valid_reply(self):
        result = parse_ai_response(json.dumps(VALID_REPLY), require_commit=True)

        self.assertFalse(result.security.has_sensitive_info)
        self.assertTrue(result.review.has_issues)
        self.assertEqual(result.review.feedback[0].severity, Severity.HIGH)
        self.assertEqual(result.review.feedback[0].file, "src/app.py")
        self.assertEqual(result.commit.message, "fix(app): guard division")

    def test_details_string_becomes_list(self):
        reply = dict(VALID_REPLY, security={"hasSensitiveInfo": True, "details": "config.py - [secret]: API key"})

        result = parse_ai_response(json.dumps(reply))

        self.assertEqual(result.security.details, ["config.py - [secret]: API key"])

    def test_unknown_severity_and_missing_fields(self):
        reply = dict(VALID_REPLY, review={"hasIssues": True, "feedback": [{"severity": "critical", "code": None}]})

        item = parse_ai_response(json.dumps(reply)).review.feedback[0]

        self.assertIsNone(item.severity)
        self.assertEqual(item.code, "")
        self.assertEqual(item.suggestion, "")

    def test_not_json(self):
        with self.assertRaises(MalformedAIResponseError) as ctx:
            parse_ai_response("fix: something")
        self.assertEqual(ctx.exception.content, "fix: something")

    def test_missing_section(self):
        with self.assertRaises(MalformedAIResponseError):
            parse_ai_response(json.dumps({"commit": {"message": "x"}}))

    def test_missing_commit_section(self):
        reply = {key: value for key, value in VALID_REPLY.items() if key != "commit"}

        self.assertIsNone(parse_ai_response(json.dumps(reply)).commit)
        with self.assertRaises(MalformedAIResponseError):
            parse_ai_response(json.dumps(reply), require_commit=True)

    def test_empty_reply(self):
        with self.assertRaises(MalformedAIResponseError):
            parse_ai_response("   ")


class TestOpenAIClient(TestCase):
    def test_missing_api_key(self):
        with self.assertRaises(MissingCredentialError) as ctx:
            setup_openai_client(Settings(api_key=None))
        self.assertIn("OPENAI_API_KEY", str(ctx.exception))

    @patch('commit_ai.utils.ai_client.openai.OpenAI')
    def test_client_configuration(self, mock_openai):
        settings = Settings(api_key="sk-test", api_base="http://localhost:4000", timeout=30.0, max_retries=1)

        setup_openai_client(settings)

        mock_openai.assert_called_once_with(
            api_key="sk-test",
            base_url="http://localhost:4000",
            timeout=30.0,
            max_retries=1,
        )

    def test_request_completion(self):
        client = Mock()
        client.chat.completions.create.return_value = completion('{"ok": true}')
        settings = Settings(api_key="sk-test", model="gpt-4o-mini")
        messages = [{"role": "user", "content": "hi"}]

        result = request_completion(client, settings, messages, 500)

        self.assertEqual(result, '{"ok": true}')
        client.chat.completions.create.assert_called_once_with(
            model="gpt-4o-mini",
            messages=messages,
            max_tokens=500,
            temperature=0.7,
            response_format={"type": "json_object"},
        )

    def test_request_completion_without_content(self):
        client = Mock()
        client.chat.completions.create.return_value = completion(None)

        self.assertEqual(request_completion(client, Settings(api_key="k"), [], 10), "")

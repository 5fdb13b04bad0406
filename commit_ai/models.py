"""Shapes of the JSON document returned by the model."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from commit_ai.enums import Severity


class _ResponseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SecurityResult(_ResponseModel):
    has_sensitive_info: bool = Field(False, alias="hasSensitiveInfo")
    details: List[str] = Field(default_factory=list)

    @field_validator("details", mode="before")
    @classmethod
    def coerce_details(cls, value: Any) -> List[str]:
        # the commit prompt historically allowed a single string here
        if value is None:
            return []
        if isinstance(value, str):
            return [value] if value else []
        return [str(item) for item in value]


class ReviewFeedbackItem(_ResponseModel):
    severity: Optional[Severity] = None
    file: str = ""
    type: str = ""
    code: str = ""
    description: str = ""
    suggestion: str = ""

    @field_validator("severity", mode="before")
    @classmethod
    def normalize_severity(cls, value: Any) -> Optional[str]:
        if isinstance(value, str) and value.lower() in {s.value for s in Severity}:
            return value.lower()
        return None

    @field_validator("file", "type", "code", "description", "suggestion", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        return "" if value is None else str(value)


class ReviewResult(_ResponseModel):
    has_issues: bool = Field(False, alias="hasIssues")
    feedback: List[ReviewFeedbackItem] = Field(default_factory=list)


class CommitSection(_ResponseModel):
    message: str
    type: Optional[str] = None
    scope: Optional[str] = None
    description: Optional[str] = None


class AIResponse(_ResponseModel):
    security: SecurityResult
    review: ReviewResult
    commit: Optional[CommitSection] = None


class CommitResult(BaseModel):
    message: str
    has_sensitive_info: bool = False
    has_review_issues: bool = False
    security: SecurityResult = Field(default_factory=SecurityResult)
    review: ReviewResult = Field(default_factory=ReviewResult)


class CodeReviewResult(BaseModel):
    security: SecurityResult = Field(default_factory=SecurityResult)
    review: ReviewResult = Field(default_factory=ReviewResult)

"""
Pydantic models for the Codescope API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from codescope import AnalysisResult, ComplexityReport, Finding, Language, Token

from .config import settings


LANGUAGE_HINTS = {"auto"} | {lang.value for lang in Language if lang != Language.UNIDENTIFIED}


class AnalyzeRequest(BaseModel):
    """Request payload for code analysis."""
    code: Optional[str] = Field(default=None, description="Source code to analyze")
    language: str = Field(default="auto", max_length=50, description="Language hint (auto for detection)")
    includeTokens: bool = Field(default=False, description="Return the token list")

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) > settings.MAX_CODE_LENGTH:
            raise ValueError(f"Code exceeds {settings.MAX_CODE_LENGTH} characters")
        return v

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in LANGUAGE_HINTS:
            return "auto"
        return v

    def language_hint(self) -> Optional[Language]:
        return None if self.language == "auto" else Language(self.language)


class AnalyzeResponse(BaseModel):
    """Analysis payload returned to the editor."""
    language: Language
    debugResults: list[Finding] = Field(default_factory=list)
    complexity: ComplexityReport
    tokenCount: int = Field(..., ge=0)
    success: bool = Field(default=True)
    tokens: Optional[list[Token]] = Field(default=None, description="Present when includeTokens is set")

    @classmethod
    def from_result(cls, result: AnalysisResult, include_tokens: bool = False) -> AnalyzeResponse:
        return cls(
            language=result.language,
            debugResults=result.findings,
            complexity=result.complexity,
            tokenCount=result.token_count,
            tokens=result.tokens if include_tokens else None,
        )


class ErrorResponse(BaseModel):
    """Error response."""
    success: bool = Field(default=False)
    error: str = Field(..., description="Error message")
    details: Optional[str] = Field(default=None, description="Additional error details")

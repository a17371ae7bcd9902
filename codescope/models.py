"""
Data models for heuristic code analysis.

Immutable Pydantic models shared by the tokenizer, detector, debugger and
complexity estimator.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Language(str, Enum):
    """Languages the engine can recognise."""

    CPP = "cpp"
    JAVA = "java"
    PYTHON = "python"
    UNIDENTIFIED = "unidentified"


class TokenCategory(str, Enum):
    """Lexical category assigned to a token."""

    KEYWORD = "keyword"
    OPERATOR = "operator"
    NUMBER = "number"
    STRING = "string"
    DELIMITER = "delimiter"
    IDENTIFIER = "identifier"
    OTHER = "other"


class Token(BaseModel):
    """A single lexical token."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., description="Raw token text")
    line: int = Field(..., ge=1, description="1-based source line")
    category: TokenCategory = Field(..., description="Token category")


class Finding(BaseModel):
    """
    One heuristic issue reported by the debugger.

    Whole-file findings are reported on line 1.
    """

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=1, description="Line number where the issue occurs")
    message: str = Field(..., description="Short description of the issue")
    suggestion: str = Field(..., description="Suggested fix")


class ComplexityReport(BaseModel):
    """Big-O estimate with a human readable explanation."""

    model_config = ConfigDict(frozen=True)

    complexity: str = Field(..., description="Big-O label (e.g. O(n), O(n²))")
    explanation: str = Field(..., description="Why this label was chosen")


class AnalysisResult(BaseModel):
    """Complete result of analysing one snippet."""

    model_config = ConfigDict(frozen=True)

    language: Language
    findings: list[Finding] = Field(default_factory=list)
    complexity: ComplexityReport
    tokens: list[Token] = Field(default_factory=list)

    @computed_field
    @property
    def token_count(self) -> int:
        return len(self.tokens)

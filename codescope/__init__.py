"""Core module for heuristic code analysis."""

from .models import (
    AnalysisResult,
    ComplexityReport,
    Finding,
    Language,
    Token,
    TokenCategory,
)
from .analyzer import SnippetAnalyzer, analyze
from .complexity import estimate
from .debugger import debug
from .detector import detect
from .tokenizer import tokenize

__all__ = [
    "AnalysisResult",
    "ComplexityReport",
    "Finding",
    "Language",
    "Token",
    "TokenCategory",
    "SnippetAnalyzer",
    "analyze",
    "estimate",
    "debug",
    "detect",
    "tokenize",
]

"""
Snippet analyzer.

Composes language detection, rule-based debugging, complexity estimation
and tokenization into a single AnalysisResult.
"""

import logging
from typing import Optional

from .complexity import estimate
from .debugger import debug
from .detector import detect
from .models import AnalysisResult, Language
from .tokenizer import tokenize


logger = logging.getLogger(__name__)


class SnippetAnalyzer:
    """
    Heuristic code analyzer.

    Stateless: one instance can serve any number of snippets.
    """

    def analyze(self, code: str, language: Optional[Language] = None) -> AnalysisResult:
        """
        Analyze a source snippet.

        Args:
            code: Source code string to analyze
            language: Language to assume instead of detecting it

        Returns:
            AnalysisResult with language, findings, complexity and tokens
        """
        if language is None:
            language = detect(code)

        findings = debug(code, language)
        complexity = estimate(code, language)
        tokens = tokenize(code, language)

        logger.debug(
            "Analyzed %d chars as %s: %d findings, %s",
            len(code), language.value, len(findings), complexity.complexity,
        )

        return AnalysisResult(
            language=language,
            findings=findings,
            complexity=complexity,
            tokens=tokens,
        )


_default_analyzer = SnippetAnalyzer()


def analyze(code: str, language: Optional[Language] = None) -> AnalysisResult:
    """Analyze `code` with the shared analyzer."""
    return _default_analyzer.analyze(code, language)

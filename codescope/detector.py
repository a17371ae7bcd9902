"""
Language detection by weighted keyword scoring.
"""

import logging

from .models import Language
from .rules import (
    DETECTION_THRESHOLD,
    KEYWORD_WEIGHT,
    NEGATIVE_WEIGHT,
    PROFILES,
    TIE_BREAK_ORDER,
)
from .text import strip_c_comments


logger = logging.getLogger(__name__)

# Python scores this much when no semicolon appears anywhere
NO_SEMICOLON_BONUS = 2


def normalize(source: str) -> str:
    """Strip comments and surrounding whitespace."""
    return strip_c_comments(source).strip()


def score(source: str) -> dict[Language, int]:
    """
    Score the source against every supported language.

    Args:
        source: Raw source text

    Returns:
        Mapping of language to its integer score
    """
    code = normalize(source)
    scores = {}

    for language, profile in PROFILES.items():
        points = sum(KEYWORD_WEIGHT for kw in profile.detection_keywords if kw in code)
        points += sum(weight for pattern, weight in profile.bonus_patterns if pattern.search(code))
        if language == Language.PYTHON and ";" not in code:
            points += NO_SEMICOLON_BONUS
        points -= sum(NEGATIVE_WEIGHT for neg in profile.negative_indicators if neg in code)
        scores[language] = points

    return scores


def detect(source: str) -> Language:
    """
    Detect the language of a snippet.

    The highest score wins when it reaches the threshold. Ties go to cpp,
    then java, then python.
    """
    scores = score(source)
    best = max(scores.values())
    logger.debug("Detection scores: %s", {lang.value: pts for lang, pts in scores.items()})

    if best >= DETECTION_THRESHOLD:
        for language in TIE_BREAK_ORDER:
            if scores[language] == best:
                return language

    return Language.UNIDENTIFIED

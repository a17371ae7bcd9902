"""
Shallow lexical tokenizer.

Splits comment-stripped source on whitespace and punctuation and tags each
piece with a category. Multi-line strings, escaped quotes and nested comments
are not understood; such input is mis-tokenized rather than rejected.
"""

import logging
import re

from .models import Language, Token, TokenCategory
from .rules import get_profile
from .text import strip_comments


logger = logging.getLogger(__name__)

SPLIT_PATTERN = re.compile(r"(\s+|[;{}()\[\].,<>:=+\-*/%&|^!~?])")

OPERATOR = re.compile(r"^[+\-*/%=&|^<>!~?:]+$")
NUMBER = re.compile(r"^[0-9]+(\.[0-9]+)?$")
DELIMITER = re.compile(r"^[;{}()\[\].,]$")
IDENTIFIER = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


def _is_quoted(token: str) -> bool:
    return any(token.startswith(q) and token.endswith(q) for q in ('"', "'"))


def categorize(token: str, language: Language) -> TokenCategory:
    """
    Categorize a single token.

    Checks run in priority order: keyword, operator, number, string,
    delimiter, identifier, and finally other.
    """
    profile = get_profile(language)
    if profile and token.strip() in profile.reserved_words:
        return TokenCategory.KEYWORD
    if OPERATOR.match(token):
        return TokenCategory.OPERATOR
    if NUMBER.match(token):
        return TokenCategory.NUMBER
    if _is_quoted(token):
        return TokenCategory.STRING
    if DELIMITER.match(token):
        return TokenCategory.DELIMITER
    if IDENTIFIER.match(token):
        return TokenCategory.IDENTIFIER
    return TokenCategory.OTHER


def tokenize(source: str, language: Language) -> list[Token]:
    """
    Tokenize source code.

    Args:
        source: Raw source text
        language: Language used for comment stripping and keyword lookup

    Returns:
        Tokens in order of appearance
    """
    clean = strip_comments(source, language)
    tokens = []

    for line_num, line in enumerate(clean.split("\n"), start=1):
        for piece in SPLIT_PATTERN.split(line):
            if not piece.strip():
                continue
            tokens.append(
                Token(value=piece, line=line_num, category=categorize(piece, language))
            )

    logger.debug("Tokenized %d tokens (%s)", len(tokens), language.value)
    return tokens

"""
Comment stripping helpers.

Every helper keeps line numbering intact: a block comment spanning several
lines is replaced by the same number of newlines.
"""

import re

from .models import Language


BLOCK_COMMENT = re.compile(r"/\*[\s\S]*?\*/")
LINE_COMMENT = re.compile(r"//.*$", re.MULTILINE)
HASH_COMMENT = re.compile(r"#.*$", re.MULTILINE)


def _blank_block(match: re.Match) -> str:
    return "\n" * match.group(0).count("\n")


def strip_c_comments(source: str) -> str:
    """Remove `/* */` and `//` comments."""
    return LINE_COMMENT.sub("", BLOCK_COMMENT.sub(_blank_block, source))


def strip_hash_comments(source: str) -> str:
    """Remove `#` comments."""
    return HASH_COMMENT.sub("", source)


def strip_all_comments(source: str) -> str:
    """Remove C-style and hash comments regardless of language."""
    return strip_hash_comments(strip_c_comments(source))


def strip_comments(source: str, language: Language) -> str:
    """Remove the comment forms of `language`; unidentified code is left alone."""
    if language in (Language.CPP, Language.JAVA):
        return strip_c_comments(source)
    if language == Language.PYTHON:
        return strip_hash_comments(source)
    return source

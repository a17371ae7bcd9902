"""
Per-language rule tables.

Read-only configuration shared by the detector, tokenizer and complexity
estimator. Adding a language means adding a profile here.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from .models import Language


@dataclass(frozen=True)
class LanguageProfile:
    """Static description of one supported language."""

    language: Language
    # Literal substrings worth +2 each during detection
    detection_keywords: tuple[str, ...]
    # Regexes worth a fixed bonus when they match the normalized source
    bonus_patterns: tuple[tuple[re.Pattern, int], ...] = ()
    # Literal substrings worth -2 each
    negative_indicators: tuple[str, ...] = ()
    # Reserved words for token categorisation
    reserved_words: frozenset[str] = field(default_factory=frozenset)
    # Function/method declaration heads up to the opening brace, group 1 is the name
    declaration_pattern: Optional[re.Pattern] = None
    uses_braces: bool = True


DETECTION_THRESHOLD = 3
KEYWORD_WEIGHT = 2
NEGATIVE_WEIGHT = 2
STRONG_SIGNAL_WEIGHT = 5

# Fixed tie-break order when scores are equal
TIE_BREAK_ORDER = (Language.CPP, Language.JAVA, Language.PYTHON)

CPP_MAIN_SIGNATURE = re.compile(
    r"int\s+main\s*\(\s*(?:void|int\s+argc\s*,\s*char\s*\*\s*\*?\s*argv\s*(?:\[\s*\])?)?\s*\)"
)

# Control-flow words that look like a call head in C-like code
NON_FUNCTION_WORDS = frozenset(
    {"if", "for", "while", "switch", "catch", "return", "sizeof", "new", "else", "do"}
)

_C_LIKE_DECLARATION = re.compile(
    r"^[ \t]*(?:(?:[A-Za-z_][\w:<>,\[\]]*|<[^<>;{}()\n]*>)[ \t*&]+)+"
    r"(\w+)[ \t]*\([^;{)]*\)[ \t]*"
    r"(?:const[ \t]*)?(?:throws[^{;]*)?(?:\{|$)",
    re.MULTILINE,
)

CPP = LanguageProfile(
    language=Language.CPP,
    detection_keywords=(
        "#include", "using namespace", "std::", "cout", "cin", "->", "::", "nullptr",
    ),
    bonus_patterns=(
        (re.compile(re.escape("#include")), STRONG_SIGNAL_WEIGHT),
        (CPP_MAIN_SIGNATURE, STRONG_SIGNAL_WEIGHT),
    ),
    reserved_words=frozenset({
        "auto", "bool", "break", "case", "char", "class", "const", "continue",
        "default", "delete", "do", "double", "else", "enum", "explicit", "false",
        "float", "for", "if", "inline", "int", "long", "namespace", "new",
        "nullptr", "private", "protected", "public", "return", "short", "signed",
        "sizeof", "static", "struct", "switch", "template", "this", "true",
        "typedef", "unsigned", "using", "virtual", "void", "while",
    }),
    declaration_pattern=_C_LIKE_DECLARATION,
)

JAVA = LanguageProfile(
    language=Language.JAVA,
    detection_keywords=(
        "public class", "public static void main", "System.out.println",
        "import java.", "extends", "@Override",
    ),
    bonus_patterns=(
        (re.compile(r"public\s+(static\s+)?class"), STRONG_SIGNAL_WEIGHT),
        (re.compile(r"public\s+static\s+void\s+main"), STRONG_SIGNAL_WEIGHT),
    ),
    negative_indicators=("#include", "def ", "elif", "print("),
    reserved_words=frozenset({
        "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
        "class", "const", "continue", "default", "do", "double", "else", "enum",
        "extends", "final", "finally", "float", "for", "if", "implements", "import",
        "instanceof", "int", "interface", "long", "native", "new", "package",
        "private", "protected", "public", "return", "short", "static", "strictfp",
        "super", "switch", "synchronized", "this", "throw", "throws", "transient",
        "try", "void", "volatile", "while",
    }),
    declaration_pattern=_C_LIKE_DECLARATION,
)

PYTHON = LanguageProfile(
    language=Language.PYTHON,
    detection_keywords=(
        "def ", "import ", "from ", 'if __name__ == "__main__"', "print(", "elif",
        "class ", "self",
    ),
    bonus_patterns=(
        (re.compile(r"^[ \t]{2,4}\w+", re.MULTILINE), 3),
        (re.compile(re.escape("def __init__(self")), 4),
    ),
    # ";$" is matched as two literal characters, not as an end-of-line anchor
    negative_indicators=(";$", "#include", "public class", "void", "int main"),
    reserved_words=frozenset({
        "and", "as", "assert", "async", "await", "break", "class", "continue",
        "def", "del", "elif", "else", "except", "False", "finally", "for", "from",
        "global", "if", "import", "in", "is", "lambda", "None", "nonlocal", "not",
        "or", "pass", "raise", "return", "True", "try", "while", "with", "yield",
    }),
    declaration_pattern=re.compile(r"\bdef\s+(\w+)\s*\("),
    uses_braces=False,
)

# Fallback for snippets in none of the supported languages
GENERIC_DECLARATION = re.compile(r"\bfunction\s+(\w+)|\bdef\s+(\w+)")

PROFILES: Mapping[Language, LanguageProfile] = MappingProxyType({
    Language.CPP: CPP,
    Language.JAVA: JAVA,
    Language.PYTHON: PYTHON,
})


def get_profile(language: Language) -> Optional[LanguageProfile]:
    """Profile for `language`, or None when it is not supported."""
    return PROFILES.get(language)

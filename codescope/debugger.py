"""
Rule-based debugging for C++, Java and Python snippets.

Each language has an immutable RuleSet: prefixes that mark lines to skip,
independent per-line checks, and whole-file checks. Every matching check
emits one Finding; checks never short-circuit each other.
"""

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from .models import Finding, Language
from .text import strip_comments


logger = logging.getLogger(__name__)

FILE_LEVEL_LINE = 1
INDENT_WIDTH = 4


@dataclass(frozen=True)
class LineCheck:
    """A predicate over one stripped line."""

    message: str
    suggestion: str
    matches: Callable[[str], bool]


@dataclass(frozen=True)
class FileCheck:
    """A whole-file check; returns a Finding or None."""

    name: str
    evaluate: Callable[[str], Optional[Finding]]


class IndentationTracker:
    """
    Tracks expected Python indentation across lines.

    A line ending with ':' opens a block expected 4 spaces deeper. A line
    indented less than the current level closes blocks until consistent.
    """

    def __init__(self):
        self._levels: list[int] = []

    @property
    def expected(self) -> int:
        return self._levels[-1] if self._levels else 0

    def feed(self, line_num: int, line: str) -> Optional[Finding]:
        stripped = line.strip()
        leading = len(line) - len(line.lstrip())
        finding = None

        while self._levels and leading < self.expected:
            self._levels.pop()

        # Global-scope lines are never reported
        if self._levels and leading != 0 and leading != self.expected:
            finding = Finding(
                line=line_num,
                message="Inconsistent indentation",
                suggestion=f"Expected {self.expected} spaces, got {leading}",
            )

        if stripped.endswith(":"):
            self._levels.append(leading + INDENT_WIDTH)

        return finding


@dataclass(frozen=True)
class RuleSet:
    # Lines are comment-stripped first; only an unterminated "/*" survives
    skip_prefixes: tuple[str, ...]
    line_checks: tuple[LineCheck, ...]
    file_checks: tuple[FileCheck, ...] = ()
    track_indentation: bool = False


# ---------------------------------------------------------------------------
# Shared predicates
# ---------------------------------------------------------------------------

_BARE_FOR_HEADER = re.compile(r"^\s*for\s*\(.*\)\s*$")
_POINTER_SHAPE = re.compile(r"\w+\s*\*\s*\w+")


def _missing_semicolon_cpp(line: str) -> bool:
    return (
        not line.endswith((";", "{", "}", ":"))
        and not _BARE_FOR_HEADER.match(line)
    )


def _unbalanced_parens(line: str) -> bool:
    # Multi-line for/if headers legitimately look unbalanced
    return (
        line.count("(") != line.count(")")
        and "for" not in line
        and "if" not in line
    )


def _pointer_declaration(line: str) -> bool:
    return (
        "*" in line
        and "=" not in line
        and bool(_POINTER_SHAPE.search(line))
        and not line.startswith("*")
    )


def _missing_semicolon_java(line: str) -> bool:
    return (
        not line.endswith((";", "{", "}", ":"))
        and not line.startswith(("@", "package", "import", "public class"))
    )


def _uninitialized_declaration(line: str) -> bool:
    return (
        any(kw in line for kw in ("int ", "String ", "boolean ", "double "))
        and "=" not in line
        and "(" not in line
    )


def _malformed_print(line: str) -> bool:
    idx = line.find("System.out.print")
    return idx != -1 and "(" not in line[idx:]


_BLOCK_OPENERS = ("if ", "elif ", "else", "for ", "while ", "def ", "class ")
_CAPITALIZED_ASSIGNMENT = re.compile(r"\b[A-Z][a-z]*\s*=")


def _missing_colon(line: str) -> bool:
    return line.startswith(_BLOCK_OPENERS) and not line.endswith(":")


def _legacy_print(line: str) -> bool:
    return "print " in line and "print(" not in line


def _capitalized_name(line: str) -> bool:
    return bool(_CAPITALIZED_ASSIGNMENT.search(line)) and "class" not in line


# ---------------------------------------------------------------------------
# File-level checks
# ---------------------------------------------------------------------------


def _require(token: str, header: str, message: str, suggestion: str) -> FileCheck:
    def evaluate(code: str) -> Optional[Finding]:
        if token in code and header not in code:
            return Finding(line=FILE_LEVEL_LINE, message=message, suggestion=suggestion)
        return None

    return FileCheck(name=f"requires {header}", evaluate=evaluate)


def _std_namespace(code: str) -> Optional[Finding]:
    if "cout" in code and "std::" not in code and "using namespace std" not in code:
        return Finding(
            line=FILE_LEVEL_LINE,
            message="Using std library without namespace",
            suggestion="Add 'using namespace std;' or prefix with 'std::'",
        )
    return None


_PUBLIC_CLASS = re.compile(r"public\s+class\s+(\w+)")


def _class_name_case(code: str) -> Optional[Finding]:
    match = _PUBLIC_CLASS.search(code)
    if not match:
        return None
    class_name = match.group(1)
    if f"class {class_name.lower()}" in code.lower():
        return Finding(
            line=FILE_LEVEL_LINE,
            message="Java is case-sensitive with class names",
            suggestion=f"Ensure class name '{class_name}' is used consistently throughout your code",
        )
    return None


def _main_method(code: str) -> Optional[Finding]:
    if "public class" in code and "public static void main" not in code:
        return Finding(
            line=FILE_LEVEL_LINE,
            message="No main method found",
            suggestion="Add 'public static void main(String[] args) { }' to make your class executable",
        )
    return None


# ---------------------------------------------------------------------------
# Rule sets
# ---------------------------------------------------------------------------

MISSING_SEMICOLON = ("Possible missing semicolon", "Add a semicolon at the end of this line")

CPP_RULES = RuleSet(
    skip_prefixes=("/*", "#", "{", "}"),
    line_checks=(
        LineCheck(*MISSING_SEMICOLON, _missing_semicolon_cpp),
        LineCheck(
            "Unbalanced parentheses",
            "Ensure all parentheses are properly matched",
            _unbalanced_parens,
        ),
        LineCheck(
            "Potential pointer declaration issue",
            "In C++, consider using 'Type* var' or consistent spacing around asterisks",
            _pointer_declaration,
        ),
    ),
    file_checks=(
        _require(
            "cout", "#include <iostream>",
            "Using cout without including iostream",
            "Add '#include <iostream>' at the top of your file",
        ),
        _require(
            "vector", "#include <vector>",
            "Using vector without including vector header",
            "Add '#include <vector>' at the top of your file",
        ),
        FileCheck(name="std namespace", evaluate=_std_namespace),
    ),
)

JAVA_RULES = RuleSet(
    skip_prefixes=("/*",),
    line_checks=(
        LineCheck(*MISSING_SEMICOLON, _missing_semicolon_java),
        LineCheck(
            "Variable declared but not initialized",
            "Consider initializing this variable with a default value",
            _uninitialized_declaration,
        ),
        LineCheck(
            "Incorrect System.out.print usage",
            "Use parentheses: System.out.println()",
            _malformed_print,
        ),
    ),
    file_checks=(
        FileCheck(name="class name case", evaluate=_class_name_case),
        FileCheck(name="main method", evaluate=_main_method),
    ),
)

PYTHON_RULES = RuleSet(
    skip_prefixes=(),
    line_checks=(
        LineCheck(
            "Missing colon at the end of statement",
            "Add ':' at the end of this line",
            _missing_colon,
        ),
        LineCheck(
            "Incorrect print syntax (Python 3)",
            "Use print() with parentheses in Python 3",
            _legacy_print,
        ),
        LineCheck(
            "Non-conventional variable naming",
            "In Python, variables typically use snake_case rather than CamelCase",
            _capitalized_name,
        ),
    ),
    track_indentation=True,
)

RULE_SETS: Mapping[Language, RuleSet] = MappingProxyType({
    Language.CPP: CPP_RULES,
    Language.JAVA: JAVA_RULES,
    Language.PYTHON: PYTHON_RULES,
})


def debug(source: str, language: Language) -> list[Finding]:
    """
    Run the rule set for `language` over the source.

    Args:
        source: Raw source text
        language: Detected language

    Returns:
        Findings in emission order; empty for unsupported languages
    """
    rules = RULE_SETS.get(language)
    if rules is None:
        return []

    code = strip_comments(source, language)
    tracker = IndentationTracker() if rules.track_indentation else None
    findings = []

    for line_num, raw_line in enumerate(code.split("\n"), start=1):
        line = raw_line.strip()
        if not line or line.startswith(rules.skip_prefixes):
            continue

        if tracker is not None:
            finding = tracker.feed(line_num, raw_line.rstrip())
            if finding:
                findings.append(finding)

        for check in rules.line_checks:
            if check.matches(line):
                findings.append(
                    Finding(line=line_num, message=check.message, suggestion=check.suggestion)
                )

    for file_check in rules.file_checks:
        finding = file_check.evaluate(code)
        if finding:
            findings.append(finding)

    logger.debug("%s rules produced %d findings", language.value, len(findings))
    return findings

"""
Heuristic time-complexity estimation.

The estimate comes from an ordered chain of rules evaluated top-down; the
first rule that returns a report wins:

    1. named-algorithm signature
    2. recursion
    3. loop nesting depth
    4. constant-time default

Advisory notes about built-in sorting and hash containers are appended to
the explanation afterwards and never change the label.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional

from .models import ComplexityReport, Language
from .rules import GENERIC_DECLARATION, NON_FUNCTION_WORDS, get_profile
from .text import strip_all_comments


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlgorithmSignature:
    name: str
    pattern: re.Pattern
    complexity: str
    explanation: str
    requires_recursion: bool = False


ALGORITHM_SIGNATURES: tuple[AlgorithmSignature, ...] = (
    AlgorithmSignature(
        "quickSort",
        re.compile(r"quick_?sort|partition", re.IGNORECASE),
        "O(n log n) average, O(n²) worst case",
        "QuickSort algorithm detected - Average case is O(n log n), worst case is O(n²)",
    ),
    AlgorithmSignature(
        "mergeSort",
        re.compile(r"merge_?sort", re.IGNORECASE),
        "O(n log n)",
        "MergeSort algorithm detected - Consistent O(n log n) complexity",
    ),
    AlgorithmSignature(
        "binarySearch",
        re.compile(r"binary[_\s]?search", re.IGNORECASE),
        "O(log n)",
        "Binary Search algorithm detected - Logarithmic time complexity",
    ),
    AlgorithmSignature(
        "bubbleSort",
        re.compile(r"bubble_?sort", re.IGNORECASE),
        "O(n²)",
        "Bubble Sort algorithm detected - Quadratic time complexity",
    ),
    AlgorithmSignature(
        "insertionSort",
        re.compile(r"insertion_?sort", re.IGNORECASE),
        "O(n²)",
        "Insertion Sort algorithm detected - Quadratic time complexity",
    ),
    AlgorithmSignature(
        "dfs",
        re.compile(r"depth_?first|dfs", re.IGNORECASE),
        "O(V + E)",
        "DFS graph traversal detected - Linear in terms of vertices (V) and edges (E)",
    ),
    AlgorithmSignature(
        "bfs",
        re.compile(r"breadth_?first|bfs", re.IGNORECASE),
        "O(V + E)",
        "BFS graph traversal detected - Linear in terms of vertices (V) and edges (E)",
    ),
    AlgorithmSignature(
        "dijkstra",
        re.compile(r"dijkstra", re.IGNORECASE),
        "O((V + E) log V)",
        "Dijkstra's algorithm detected - Complexity depends on graph implementation",
    ),
    AlgorithmSignature(
        "fibonacci",
        re.compile(r"fibonacci|fib\(", re.IGNORECASE),
        "O(2^n)",
        "Recursive Fibonacci implementation detected - Exponential complexity",
        requires_recursion=True,
    ),
)

LOOP_KEYWORD = re.compile(r"\b(for|while)\b")
RECURSION_WORD = re.compile(r"recursi(on|ve)", re.IGNORECASE)
BUILTIN_SORT = re.compile(r"\b(?:sort|sorted)\s*\(")
HASH_CONTAINER = re.compile(
    r"\b(?:unordered_(?:map|set)|(?:Linked)?Hash(?:Map|Set)|Hashtable|Map|Set|dict|defaultdict|Counter)\b"
)

NESTING_LABELS = {
    1: ("O(n)", "Linear time - Single loop detected"),
    2: ("O(n²)", "Quadratic time - Nested loops detected"),
    3: ("O(n³)", "Cubic time - Triple nested loops detected"),
}

DEFAULT_REPORT = ComplexityReport(
    complexity="O(1)",
    explanation="Constant time - No loops or recursion detected",
)


@dataclass(frozen=True)
class _Context:
    """Derived views of one snippet shared by every rule."""

    code: str
    language: Language
    recursive_function: Optional[str]


# ---------------------------------------------------------------------------
# Signals
# ---------------------------------------------------------------------------


def declared_functions(code: str, language: Language) -> list[str]:
    """Names of functions declared in the code, in order of appearance."""
    profile = get_profile(language)
    pattern = profile.declaration_pattern if profile else GENERIC_DECLARATION
    names = []
    for match in pattern.finditer(code):
        name = next((g for g in match.groups() if g), None)
        if name and name not in NON_FUNCTION_WORDS and name not in names:
            names.append(name)
    return names


def find_recursive_function(code: str, language: Language) -> Optional[str]:
    """
    First declared function whose name appears as a call more than once.

    The declaration itself counts as one occurrence.
    """
    for name in declared_functions(code, language):
        calls = re.findall(r"\b" + re.escape(name) + r"\s*\(", code)
        if len(calls) > 1:
            return name
    return None


def _brace_nesting(lines: list[str]) -> int:
    depth = 0
    max_depth = 0
    for line in lines:
        if LOOP_KEYWORD.search(line):
            depth += 1
            max_depth = max(max_depth, depth)
        if "}" in line:
            depth = max(depth - 1, 0)
    return max_depth


def _indent_nesting(lines: list[str]) -> int:
    open_loops: list[int] = []
    max_depth = 0
    for line in lines:
        if not line.strip():
            continue
        level = (len(line) - len(line.lstrip())) // 4
        while open_loops and open_loops[-1] >= level:
            open_loops.pop()
        if LOOP_KEYWORD.search(line):
            open_loops.append(level)
            max_depth = max(max_depth, len(open_loops))
    return max_depth


def loop_nesting_depth(code: str, language: Language) -> int:
    """Maximum loop nesting depth seen scanning top to bottom."""
    lines = code.split("\n")
    profile = get_profile(language)
    if profile is not None and not profile.uses_braces:
        return _indent_nesting(lines)
    return _brace_nesting(lines)


# ---------------------------------------------------------------------------
# Rule chain
# ---------------------------------------------------------------------------


def _algorithm_rule(ctx: _Context) -> Optional[ComplexityReport]:
    recursion_signal = bool(ctx.recursive_function) or bool(RECURSION_WORD.search(ctx.code))
    for signature in ALGORITHM_SIGNATURES:
        if signature.requires_recursion and not recursion_signal:
            continue
        if signature.pattern.search(ctx.code):
            logger.debug("Matched algorithm signature: %s", signature.name)
            return ComplexityReport(
                complexity=signature.complexity,
                explanation=signature.explanation,
            )
    return None


def _recursion_rule(ctx: _Context) -> Optional[ComplexityReport]:
    if ctx.recursive_function is None:
        return None
    return ComplexityReport(
        complexity="O(2^n)",
        explanation=(
            f"Recursive function calls detected in '{ctx.recursive_function}' "
            "- Potentially exponential complexity"
        ),
    )


def _nesting_rule(ctx: _Context) -> Optional[ComplexityReport]:
    depth = loop_nesting_depth(ctx.code, ctx.language)
    if depth == 0:
        return None
    complexity, explanation = NESTING_LABELS.get(
        depth,
        (f"O(n^{depth})", f"Polynomial time - {depth} levels of nested loops detected"),
    )
    return ComplexityReport(complexity=complexity, explanation=explanation)


def _default_rule(ctx: _Context) -> Optional[ComplexityReport]:
    return DEFAULT_REPORT


RULE_CHAIN: tuple[tuple[str, Callable[[_Context], Optional[ComplexityReport]]], ...] = (
    ("algorithm", _algorithm_rule),
    ("recursion", _recursion_rule),
    ("nesting", _nesting_rule),
    ("default", _default_rule),
)


def _annotate(report: ComplexityReport, code: str) -> ComplexityReport:
    notes = []
    if BUILTIN_SORT.search(code):
        notes.append("Built-in sorting operations are typically O(n log n)")
    if HASH_CONTAINER.search(code):
        notes.append("Hash table operations are generally O(1) for lookups")
    if not notes:
        return report
    return report.model_copy(
        update={"explanation": report.explanation + "\nNote: " + ". ".join(notes)}
    )


def estimate(source: str, language: Language) -> ComplexityReport:
    """
    Estimate the time complexity of a snippet.

    Args:
        source: Raw source text
        language: Detected language

    Returns:
        ComplexityReport from the first matching rule, with advisory notes
    """
    code = strip_all_comments(source)
    ctx = _Context(
        code=code,
        language=language,
        recursive_function=find_recursive_function(code, language),
    )

    for name, rule in RULE_CHAIN:
        report = rule(ctx)
        if report is not None:
            logger.debug("Complexity decided by %s rule: %s", name, report.complexity)
            return _annotate(report, code)

    return _annotate(DEFAULT_REPORT, code)

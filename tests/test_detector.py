"""Tests for language detection."""

import pytest

from codescope import Language, detect
from codescope.detector import score


CPP_SNIPPET = """#include <iostream>
int main(void) {
    std::cout << "hi" << std::endl;
    return 0;
}
"""

JAVA_SNIPPET = """public class Foo {
    public static void main(String[] args) {
        System.out.println("Hello");
    }
}
"""

PYTHON_SNIPPET = """def foo():
    print("hello")

foo()
"""


class TestDetect:
    """Detection outcomes for representative snippets."""

    def test_cpp_with_include_and_main(self):
        """Given an iostream include and int main(void), should detect cpp with score >= 8."""
        assert detect(CPP_SNIPPET) == Language.CPP
        assert score(CPP_SNIPPET)[Language.CPP] >= 8

    def test_cpp_main_without_parameters(self):
        """Given int main() with empty parentheses, the main bonus still applies."""
        scores = score("int main() {\n  return 0;\n}")

        assert scores[Language.CPP] == 5

    def test_java_class_with_main(self):
        """Given public class and public static void main, should detect java."""
        assert detect(JAVA_SNIPPET) == Language.JAVA

    def test_python_function(self):
        """Given def, print() and no semicolons, should detect python."""
        assert detect(PYTHON_SNIPPET) == Language.PYTHON

    @pytest.mark.parametrize("source", ["", "   ", "hello world", "x"])
    def test_weak_signal_is_unidentified(self, source):
        """Given input with no strong signal, should return unidentified."""
        assert detect(source) == Language.UNIDENTIFIED

    def test_comments_are_ignored(self):
        """Given cpp markers only inside a comment, should not count them."""
        source = "// #include <iostream>\nprint('x')"

        assert detect(source) == Language.PYTHON
        assert score(source)[Language.CPP] == 0

    def test_deterministic(self):
        """Given identical input, repeated calls should agree."""
        results = {detect(JAVA_SNIPPET) for _ in range(5)}

        assert results == {Language.JAVA}


class TestTieBreak:
    """Equal scores resolve cpp, then java, then python."""

    def test_cpp_beats_java_on_tie(self):
        """Given equal cpp and java scores, should pick cpp."""
        source = "std::x extends @Override"
        scores = score(source)

        assert scores[Language.CPP] == scores[Language.JAVA] == 4
        assert detect(source) == Language.CPP

    def test_java_beats_python_on_tie(self):
        """Given equal java and python scores, should pick java."""
        source = "extends @Override self"
        scores = score(source)

        assert scores[Language.JAVA] == scores[Language.PYTHON] == 4
        assert detect(source) == Language.JAVA


class TestNegativeIndicators:
    """Subtractive scoring."""

    def test_python_penalized_for_literal_semicolon_dollar(self):
        """Given the literal characters ';$', python loses two points."""
        plain = score("x = 1;")[Language.PYTHON]
        literal = score("x = 1;$")[Language.PYTHON]

        assert plain - literal == 2

    def test_java_penalized_for_python_markers(self):
        """Given def and print(, java loses two points for each."""
        assert score("def f():\n    print(1)")[Language.JAVA] == -4

    @pytest.mark.parametrize(
        "language,base,marked",
        [
            (Language.PYTHON, "x = 1", "#include <x>\nx = 1"),
            (Language.PYTHON, "class A", "public class A"),
            (Language.PYTHON, "x = 1", "void x = 1"),
            (Language.PYTHON, "x = 1", "int main"),
            (Language.JAVA, "x = 1", "#include <x>\nx = 1"),
            (Language.JAVA, "x = 1", "elif x"),
        ],
    )
    def test_each_indicator_costs_two(self, language, base, marked):
        """Given one foreign marker added, the language loses exactly two points."""
        assert score(base)[language] - score(marked)[language] == 2


class TestBonusPatterns:
    """Regex bonuses on top of keyword weights."""

    @pytest.mark.parametrize(
        "base,marked,bonus",
        [
            ("def f(self", "def __init__(self", 4),
            ("x = 1\ny = 2", "x = 1\n  y = 2", 3),
        ],
    )
    def test_python_bonus(self, base, marked, bonus):
        """Given a constructor or an indented line, python gains the fixed bonus."""
        assert score(marked)[Language.PYTHON] - score(base)[Language.PYTHON] == bonus

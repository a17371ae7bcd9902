"""Tests for the per-language rule sets."""

from codescope import Finding, Language, debug


def _messages(findings):
    return [f.message for f in findings]


def _on_line(findings, line):
    return [f.message for f in findings if f.line == line]


class TestCppRules:
    """C++ heuristics."""

    def test_cout_without_iostream(self):
        """Given cout with no iostream include, should report the missing include."""
        findings = debug('cout << "hi"', Language.CPP)

        assert "Using cout without including iostream" in _messages(findings)

    def test_cout_with_include_and_namespace(self):
        """Given iostream and a using directive, no include or namespace findings."""
        source = '#include <iostream>\nusing namespace std;\nint main() {\n    cout << "hi";\n}'
        messages = _messages(debug(source, Language.CPP))

        assert "Using cout without including iostream" not in messages
        assert "Using std library without namespace" not in messages

    def test_cout_without_namespace(self):
        """Given unqualified cout and no using directive, should report the namespace."""
        source = '#include <iostream>\nint main() {\n    cout << "hi";\n}'

        assert "Using std library without namespace" in _messages(debug(source, Language.CPP))

    def test_vector_without_header(self):
        """Given vector usage with no vector include, should report the header."""
        findings = debug("std::vector<int> v;", Language.CPP)

        assert Finding(
            line=1,
            message="Using vector without including vector header",
            suggestion="Add '#include <vector>' at the top of your file",
        ) in findings

    def test_missing_semicolon(self):
        """Given a statement without a semicolon, should flag that line."""
        source = "int main() {\n    int x = 5\n    return x;\n}"
        findings = debug(source, Language.CPP)

        assert _on_line(findings, 2) == ["Possible missing semicolon"]

    def test_bare_for_header_not_flagged(self):
        """Given a for header without a brace, should not report a semicolon."""
        source = "for (int i = 0; i < n; i++)\n    sum += i;"

        assert _on_line(debug(source, Language.CPP), 1) == []

    def test_trailing_comment_ignored(self):
        """Given a terminated statement with a trailing comment, no finding."""
        assert debug("int x = 1; // counter", Language.CPP) == []

    def test_unbalanced_parentheses(self):
        """Given mismatched parentheses, should flag the line."""
        findings = debug("foo(bar(1);", Language.CPP)

        assert "Unbalanced parentheses" in _on_line(findings, 1)

    def test_unbalanced_parentheses_suppressed_for_if(self):
        """Given an if header spanning lines, should not flag parentheses."""
        findings = debug("if (check(a) &&\n    b) {", Language.CPP)

        assert "Unbalanced parentheses" not in _on_line(findings, 1)

    def test_pointer_declaration(self):
        """Given a spaced pointer declaration without assignment, should flag it."""
        findings = debug("int *ptr;", Language.CPP)

        assert _messages(findings) == ["Potential pointer declaration issue"]

    def test_pointer_with_assignment_not_flagged(self):
        """Given a pointer initialised on declaration, no pointer finding."""
        assert debug("int* p = nullptr;", Language.CPP) == []

    def test_preprocessor_and_brace_lines_skipped(self):
        """Given only directives and braces, no line findings."""
        source = "#include <vector>\n{\n}"

        assert debug(source, Language.CPP) == []

    def test_unterminated_block_comment_skipped(self):
        """Given a block comment that never closes, its opening line is skipped."""
        assert debug("/* note without an end", Language.CPP) == []

    def test_multiple_findings_on_one_line(self):
        """Given a line breaking two rules, both findings are reported."""
        findings = debug("foo(bar(1)", Language.CPP)

        assert _on_line(findings, 1) == ["Possible missing semicolon", "Unbalanced parentheses"]


class TestJavaRules:
    """Java heuristics."""

    def test_uninitialized_variable(self):
        """Given a declaration without initializer, should flag it."""
        source = "public class Main {\n    int count;\n}"
        findings = debug(source, Language.JAVA)

        assert "Variable declared but not initialized" in _on_line(findings, 2)

    def test_missing_main(self):
        """Given a public class without main, should report the missing main method."""
        source = "public class Main {\n    int count = 0;\n}"

        assert "No main method found" in _messages(debug(source, Language.JAVA))

    def test_main_present(self):
        """Given a main method, no missing-main finding."""
        source = (
            "public class Main {\n"
            "    public static void main(String[] args) {\n"
            '        System.out.println("hi");\n'
            "    }\n"
            "}"
        )
        messages = _messages(debug(source, Language.JAVA))

        assert "No main method found" not in messages
        assert "Possible missing semicolon" not in messages

    def test_class_name_case_check(self):
        """Given a public class, the case-consistency reminder names the class."""
        source = "public class Main {\n}"
        findings = [f for f in debug(source, Language.JAVA) if f.message == "Java is case-sensitive with class names"]

        assert len(findings) == 1
        assert "'Main'" in findings[0].suggestion

    def test_malformed_print(self):
        """Given System.out.print without parentheses, should flag it."""
        findings = debug('System.out.println "hi";', Language.JAVA)

        assert "Incorrect System.out.print usage" in _messages(findings)

    def test_missing_semicolon(self):
        """Given a field without a semicolon, should flag that line."""
        source = "public class A {\n    int x = 1\n}"

        assert _on_line(debug(source, Language.JAVA), 2) == ["Possible missing semicolon"]

    def test_bare_class_header_exempt(self):
        """Given a public class line with no brace, no semicolon finding."""
        findings = debug("public class A", Language.JAVA)

        assert "Possible missing semicolon" not in _on_line(findings, 1)

    def test_annotations_and_imports_exempt(self):
        """Given annotation, package and import lines, no semicolon findings."""
        source = "package app\nimport java.util.List\n@Override"

        assert "Possible missing semicolon" not in _messages(debug(source, Language.JAVA))


class TestPythonRules:
    """Python heuristics."""

    def test_missing_colon(self):
        """Given 'if x > 0' without a colon, should report it on that line."""
        source = 'x = 5\nif x > 0\n    print("positive")'
        findings = debug(source, Language.PYTHON)

        assert "Missing colon at the end of statement" in _on_line(findings, 2)

    def test_clean_code(self):
        """Given well-formed code with a dedent, should report nothing."""
        source = (
            "def foo(x):\n"
            "    if x:\n"
            "        y = 1\n"
            "    z = 2\n"
            "w = 3\n"
        )

        assert debug(source, Language.PYTHON) == []

    def test_inconsistent_indentation(self):
        """Given an over-indented line, should report expected vs actual spaces."""
        source = "def foo():\n    x = 1\n      y = 2"
        findings = [f for f in debug(source, Language.PYTHON) if f.message == "Inconsistent indentation"]

        assert len(findings) == 1
        assert findings[0].line == 3
        assert findings[0].suggestion == "Expected 4 spaces, got 6"

    def test_legacy_print(self):
        """Given a Python 2 print statement, should flag it."""
        findings = debug('print "hello"', Language.PYTHON)

        assert _messages(findings) == ["Incorrect print syntax (Python 3)"]

    def test_capitalized_assignment(self):
        """Given a capitalized variable assignment, should flag naming."""
        findings = debug("Total = 0", Language.PYTHON)

        assert _messages(findings) == ["Non-conventional variable naming"]

    def test_class_line_not_flagged_for_naming(self):
        """Given a class line, the naming rule does not apply."""
        assert debug("class Config:\n    pass", Language.PYTHON) == []

    def test_comments_skipped(self):
        """Given only comments, should report nothing."""
        assert debug("# if x > 0\n    # print 'x'", Language.PYTHON) == []


class TestDispatch:
    """Language dispatch."""

    def test_unidentified_yields_nothing(self):
        """Given unidentified language, should degrade to no findings."""
        assert debug("cout << x", Language.UNIDENTIFIED) == []

    def test_empty_source(self):
        """Given empty source, every rule set returns no findings."""
        for language in (Language.CPP, Language.JAVA, Language.PYTHON):
            assert debug("", language) == []

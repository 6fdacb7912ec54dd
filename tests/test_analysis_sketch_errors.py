"""Tests for run-time sketch error classification from source text."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from helpfuljava.analysis import (
    Category,
    ExtraneousClosingBrace,
    IncorrectMethodDeclaration,
    IncorrectVariableDeclaration,
    UnexpectedToken,
    classify_sketch_error,
)
from helpfuljava.analysis.sketch_errors import (
    MIXED_MODES_MESSAGE,
    STRAY_BRACE_MESSAGE,
    extraneous_closing_brace,
    incorrect_method_declaration,
    incorrect_variable_declaration,
)
from tests.strategies import java_identifiers


class TestExtraneousClosingBrace:
    """The stray brace snippet shows the preceding block header."""

    def test_single_block(self) -> None:
        source = "void setup() {\n  size(200, 200);\n}\n}"
        hint = classify_sketch_error(STRAY_BRACE_MESSAGE, source, len(source))
        assert hint == ExtraneousClosingBrace(
            original="void setup() {\n  /* your code */\n}\n}",
            fixed="void setup() {\n  /* your code */\n}\n",
        )
        assert hint.category is Category.EXTRANEOUS_CLOSING_BRACE

    def test_includes_line_above_block(self) -> None:
        source = "void setup() {\n  fill(0);\n}\n\nvoid draw() {\n  rect(1, 2, 3, 4);\n}\n}"
        hint = extraneous_closing_brace(source)
        assert hint is not None
        assert hint.original == "\nvoid draw() {\n  /* your code */\n}\n}"
        assert hint.fixed == hint.original[:-1]

    @pytest.mark.parametrize("text", ["", "}", "int x = 1;\n}", "{ a }"])
    def test_no_complete_block(self, text: str) -> None:
        assert extraneous_closing_brace(text) is None

    def test_unmatched_block_is_unclassified(self) -> None:
        assert extraneous_closing_brace("x)\n}\n}") is None

    @given(java_identifiers())
    def test_fixed_drops_only_last_brace(self, name: str) -> None:
        source = f"void {name}() {{\n}}\n}}"
        hint = extraneous_closing_brace(source)
        assert hint is not None
        assert hint.original.endswith("}\n}")
        assert hint.original.startswith(f"void {name}() {{")
        assert hint.fixed + "}" == hint.original


class TestIncorrectVariableDeclaration:
    """The first malformed declarator names the variable."""

    def test_second_declarator_invalid(self) -> None:
        source = "int[] a = new int[5], b = 3;"
        hint = classify_sketch_error("expecting DOT, found '='", source, source.index("a ="))
        assert hint == IncorrectVariableDeclaration(type_name="int", found_name="b")
        assert hint.parameters() == (("typename", "int"), ("foundname", "b"))

    def test_first_declarator_invalid(self) -> None:
        source = "float[] xs = new float[], ys = new float[2];"
        hint = incorrect_variable_declaration(source, source.index("xs"))
        assert hint == IncorrectVariableDeclaration(type_name="float", found_name="xs")

    def test_initializer_commas_not_split(self) -> None:
        source = "int[] a = {1, 2, 3}, c = new int[];"
        hint = incorrect_variable_declaration(source, source.index("a ="))
        assert hint is not None
        assert hint.found_name == "c"

    def test_all_declarators_valid(self) -> None:
        source = "int[] a = new int[5], b = {1, 2};"
        assert incorrect_variable_declaration(source, source.index("a =")) is None

    def test_only_first_statement_considered(self) -> None:
        source = "int[] a = new int[5];\nint b = 3;"
        assert incorrect_variable_declaration(source, source.index("a =")) is None

    def test_qualified_type_trimmed(self) -> None:
        source = "java.lang.String[] names = new String;"
        hint = incorrect_variable_declaration(source, source.index("names"))
        assert hint == IncorrectVariableDeclaration(type_name="String", found_name="names")


class TestIncorrectMethodDeclaration:
    """Method name read back from the last opening parenthesis."""

    def test_method_name(self) -> None:
        source = "size(100, 100);\nvoid drawThing("
        hint = classify_sketch_error(MIXED_MODES_MESSAGE, source, len(source))
        assert hint == IncorrectMethodDeclaration(method_name="drawThing")
        assert hint.parameters() == (("methodname", "drawThing"),)

    def test_no_parenthesis(self) -> None:
        assert incorrect_method_declaration("int x = 3;") is None

    @given(java_identifiers())
    def test_any_identifier(self, name: str) -> None:
        hint = incorrect_method_declaration(f"rect(1, 2);\nvoid {name}(")
        assert hint == IncorrectMethodDeclaration(method_name=name)


class TestDispatch:
    """Message dispatch and offset handling."""

    def test_unexpected_token(self) -> None:
        assert classify_sketch_error("unexpected token: float", "", 0) == UnexpectedToken(type_name="float")

    def test_unexpected_punctuation(self) -> None:
        assert classify_sketch_error("unexpected token: )", "", 0) is None

    @pytest.mark.parametrize("message", ["", "unexpected char: '#'", "expecting EOF, found 'void'"])
    def test_unknown_messages(self, message: str) -> None:
        assert classify_sketch_error(message, "void setup() {\n}\n}", 15) is None

    @given(st.integers(min_value=-100, max_value=1000), st.text(max_size=40))
    def test_offset_clamped(self, offset: int, source: str) -> None:
        for message in (STRAY_BRACE_MESSAGE, "expecting DOT", MIXED_MODES_MESSAGE):
            classify_sketch_error(message, source, offset)

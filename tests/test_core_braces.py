"""Tests for brace matching and declarator splitting."""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from helpfuljava.core.braces import (
    CLOSING_BRACES,
    OPENING_BRACES,
    find_matching_brace,
    split_declarators,
)
from tests.strategies import balanced_brace_text

_BRACES = OPENING_BRACES | CLOSING_BRACES


class TestFindMatchingBrace:
    """find_matching_brace scans outward counting depth."""

    def test_forward_match(self) -> None:
        code = "void setup() { fill(0); }"
        assert find_matching_brace(code, code.index("{")) == len(code) - 1

    def test_backward_match(self) -> None:
        code = "void setup() { fill(0); }"
        assert find_matching_brace(code, len(code) - 1) == code.index("{")

    def test_parentheses(self) -> None:
        code = "f(g(x))"
        assert find_matching_brace(code, 1) == 6
        assert find_matching_brace(code, 3) == 5

    @given(balanced_brace_text())
    def test_round_trip_on_balanced_text(self, text: str) -> None:
        """findMatch(findMatch(i)) == i for every brace in balanced text."""
        positions = [i for i, ch in enumerate(text) if ch in _BRACES]
        event(f"brace_count={min(len(positions), 10)}")
        for position in positions:
            partner = find_matching_brace(text, position)
            assert partner is not None
            assert partner != position
            assert find_matching_brace(text, partner) == position

    @given(balanced_brace_text())
    def test_unmatched_opening_brace(self, text: str) -> None:
        code = "{" + text
        assert find_matching_brace(code, 0) is None

    @given(balanced_brace_text())
    def test_unmatched_closing_brace(self, text: str) -> None:
        code = text + "}"
        assert find_matching_brace(code, len(code) - 1) is None

    @pytest.mark.parametrize("code", ["{", "(", "{ ( }", "x { y"])
    def test_no_match_examples(self, code: str) -> None:
        index = next(i for i, ch in enumerate(code) if ch in OPENING_BRACES)
        assert find_matching_brace(code, index) is None

    def test_non_brace_raises(self) -> None:
        with pytest.raises(ValueError, match="not a brace"):
            find_matching_brace("abc", 1)

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_out_of_range_raises(self, index: int) -> None:
        with pytest.raises(ValueError, match="outside text"):
            find_matching_brace("{ }", index)


class TestSplitDeclarators:
    """split_declarators splits on top-level commas only."""

    def test_reference_statement(self) -> None:
        statement = "a = new int[5], b = {1,2,3}, c = new int[1];"
        assert split_declarators(statement) == [
            "a = new int[5],",
            " b = {1,2,3},",
            " c = new int[1];",
        ]

    def test_single_declarator(self) -> None:
        assert split_declarators("x = {1, 2};") == ["x = {1, 2};"]

    def test_nested_initializers(self) -> None:
        statement = "m = {{1,2},{3,4}}, n = {5};"
        assert split_declarators(statement) == ["m = {{1,2},{3,4}},", " n = {5};"]

    def test_trailing_comma_has_no_empty_piece(self) -> None:
        assert split_declarators("a = 1,") == ["a = 1,"]

    def test_empty_statement(self) -> None:
        assert split_declarators("") == []

    def test_unterminated_initializer_is_one_piece(self) -> None:
        assert split_declarators("a = 1, b = {1, 2") == ["a = 1,", " b = {1, 2"]

    @given(st.lists(st.sampled_from(["a = new int[5]", "b = {1,2,3}", "c = {}", "d = 4"]),
                    min_size=1, max_size=6))
    def test_pieces_concatenate_to_statement(self, declarators: list[str]) -> None:
        statement = ", ".join(declarators) + ";"
        pieces = split_declarators(statement)
        assert "".join(pieces) == statement
        assert len(pieces) == len(declarators)
        assert all(piece.endswith((",", ";")) for piece in pieces)

    @given(balanced_brace_text())
    def test_never_loses_text(self, text: str) -> None:
        assert "".join(split_declarators(text)) == text

"""Tests for the high-level patlex API."""

import pytest

from patlex import (
    Lexer,
    LexerBuilder,
    NoMatchingRuleError,
    Span,
    Token,
    tokenize,
)


@pytest.fixture
def abc_lexer() -> Lexer[str]:
    """Digits are A, lowercase words are B, whitespace is skipped."""
    return (
        LexerBuilder()
        .token(r"[0-9]+", lambda _: "A")
        .token(r"[a-z]+", lambda _: "B")
        .skip(r"\s+")
        .build()
    )


class TestScenarios:
    """End-to-end tokenization of small inputs."""

    def test_whitespace_skipped(self, abc_lexer: Lexer[str]) -> None:
        tokens = abc_lexer.tokenize("12 ab")
        assert tokens == [Token("A", Span(0, 2)), Token("B", Span(3, 5))]

    def test_adjacent_tokens_from_different_rules(self) -> None:
        lexer = (
            LexerBuilder()
            .token(r"[0-9]+", lambda _: "A")
            .token(r"[a-z]+", lambda _: "B")
            .build()
        )
        tokens = lexer.tokenize("12ab")
        assert tokens == [Token("A", Span(0, 2)), Token("B", Span(2, 4))]

    def test_unmatched_input_raises_at_offset_zero(self, abc_lexer: Lexer[str]) -> None:
        with pytest.raises(NoMatchingRuleError) as exc_info:
            abc_lexer.tokenize("!!")
        assert exc_info.value.offset == 0

    def test_empty_input_yields_nothing(self, abc_lexer: Lexer[str]) -> None:
        assert abc_lexer.tokenize("") == []

    def test_keyword_declared_first_beats_identifier(self) -> None:
        lexer = (
            LexerBuilder()
            .token(r"if", lambda _: "kw")
            .token(r"[a-z]+", lambda _: "ident")
            .build()
        )
        assert list(lexer.tokens("if")) == ["kw"]

    def test_longer_identifier_beats_keyword(self) -> None:
        lexer = (
            LexerBuilder()
            .token(r"if", lambda _: "kw")
            .token(r"[a-z]+", lambda _: "ident")
            .build()
        )
        assert list(lexer.tokens("iffy")) == ["ident"]


class TestArithmetic:
    """Calculator-style token set with parsed values in the kinds."""

    @pytest.fixture
    def lexer(self) -> Lexer[object]:
        return (
            LexerBuilder()
            .token(r"[0-9]+", lambda tok: ("Num", int(tok)))
            .token(r"\+", lambda _: "Add")
            .token(r"-", lambda _: "Sub")
            .token(r"\*", lambda _: "Mul")
            .token(r"/", lambda _: "Div")
            .token(r"\(", lambda _: "Open")
            .token(r"\)", lambda _: "Close")
            .skip(r"\s+")
            .build()
        )

    def test_expression(self, lexer: Lexer[object]) -> None:
        assert list(lexer.tokens("(1 + 2) * 3")) == [
            "Open",
            ("Num", 1),
            "Add",
            ("Num", 2),
            "Close",
            "Mul",
            ("Num", 3),
        ]

    def test_spans_cover_matched_text(self, lexer: Lexer[object]) -> None:
        source = "10 / 250"
        texts = [token.text(source) for token in lexer.scan(source)]
        assert texts == ["10", "/", "250"]


class TestLexerObject:
    def test_builder_alias(self) -> None:
        builder = Lexer.builder()
        assert isinstance(builder, LexerBuilder)
        assert len(builder) == 0

    def test_reusable_across_scans(self, abc_lexer: Lexer[str]) -> None:
        first = abc_lexer.tokenize("1 a")
        second = abc_lexer.tokenize("1 a")
        assert first == second

    def test_tokens_is_lazy(self) -> None:
        seen: list[str] = []

        def record(text: str) -> str:
            seen.append(text)
            return text

        lexer = LexerBuilder().token(r"[a-z]", record).build()
        kinds = lexer.tokens("abc")
        assert seen == []
        assert next(kinds) == "a"
        assert seen == ["a"]

    def test_repr_lists_patterns(self, abc_lexer: Lexer[str]) -> None:
        assert repr(abc_lexer) == r"Lexer(patterns=['[0-9]+', '[a-z]+', '\\s+'])"

    def test_patterns_exposed_in_order(self, abc_lexer: Lexer[str]) -> None:
        assert abc_lexer.patterns.sources == ("[0-9]+", "[a-z]+", r"\s+")


class TestTokenizeFunction:
    def test_one_off_tokenize(self) -> None:
        tokens = tokenize("a1", [(r"[a-z]", lambda _: "L"), (r"[0-9]", lambda _: "D")])
        assert [t.kind for t in tokens] == ["L", "D"]
        assert [t.span for t in tokens] == [Span(0, 1), Span(1, 2)]

"""Tests for patlex.profiling, the scan profiling API."""

import pytest

from patlex import LexerBuilder, NoMatchingRuleError
from patlex.profiling import (
    ScanAccumulator,
    get_scan_accumulator,
    profiled_scan,
)

LEXER = LexerBuilder().token(r"[a-z]+", lambda _: "W").skip(r"\s+").build()


class TestGetScanAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_scan_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_scan():
            pass
        assert get_scan_accumulator() is None


class TestProfiledScan:
    def test_yields_accumulator(self) -> None:
        with profiled_scan() as acc:
            assert isinstance(acc, ScanAccumulator)
            assert get_scan_accumulator() is acc

    def test_records_tokens_and_skips(self) -> None:
        with profiled_scan() as acc:
            LEXER.tokenize("ab cd  ef")
        assert acc.scans == 1
        assert acc.tokens == 3
        assert acc.skipped == 2
        assert acc.characters == len("ab cd  ef")
        assert acc.errors == 0

    def test_records_multiple_scans(self) -> None:
        with profiled_scan() as acc:
            LEXER.tokenize("a")
            LEXER.tokenize("b")
            LEXER.scan("c")
        assert acc.scans == 3
        assert acc.tokens == 2

    def test_records_errors(self) -> None:
        with profiled_scan() as acc:
            with pytest.raises(NoMatchingRuleError):
                LEXER.tokenize("ab 1")
        assert acc.errors == 1
        assert acc.tokens == 1
        assert acc.characters == 3

    def test_stream_keeps_recording_after_block(self) -> None:
        with profiled_scan() as acc:
            stream = LEXER.scan("a b")
        list(stream)
        assert acc.tokens == 2

    def test_unprofiled_stream_not_recorded(self) -> None:
        stream = LEXER.scan("a b")
        with profiled_scan() as acc:
            list(stream)
        assert acc.scans == 0
        assert acc.tokens == 0


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = ScanAccumulator().summary()
        assert summary["scans"] == 0
        assert summary["tokens"] == 0
        assert summary["skipped"] == 0
        assert summary["characters"] == 0
        assert summary["errors"] == 0
        assert summary["total_ms"] >= 0

    def test_summary_after_scan(self) -> None:
        with profiled_scan() as acc:
            LEXER.tokenize("hello world")
        summary = acc.summary()
        assert summary["tokens"] == 2
        assert summary["skipped"] == 1
        assert set(summary) == {"total_ms", "scans", "tokens", "skipped", "characters", "errors"}

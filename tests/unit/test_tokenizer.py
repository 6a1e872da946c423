"""Tests for shell-style word splitting."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from argsmith import SplitConfig, split
from argsmith.tokenizer import _Word

pytestmark = pytest.mark.unit

WORDS = ["foo", "bar", "baz"]


class TestDelimiters:
    @pytest.mark.parametrize("text", ["foo bar baz", "foo\tbar\tbaz", "foo\nbar\nbaz"])
    def test_default_delimiters(self, text: str) -> None:
        """Space, tab and newline split words by default."""
        assert split(text) == WORDS

    def test_custom_delimiters(self) -> None:
        assert split("foo|bar|baz", delimiters="|") == WORDS
        assert split("foo.bar|baz", delimiters="|.") == WORDS
        assert split("foo bar|baz", delimiters="|") == ["foo bar", "baz"]

    @pytest.mark.parametrize(
        "text",
        ["foo  bar   baz", "foo\t\tbar\t\t\tbaz", "foo\n\nbar\n\n\nbaz", "foo \t\n \n\t\n bar \n\t\tbaz"],
    )
    def test_contiguous_delimiters_collapse(self, text: str) -> None:
        assert split(text) == WORDS

    def test_mixed_custom_delimiters(self) -> None:
        assert split("foo | . bar . | . baz", delimiters=".| ") == WORDS

    @pytest.mark.parametrize(
        ("text", "options", "expected"),
        [
            (" foo", {}, ["foo"]),
            ("  foo", {}, ["foo"]),
            ("foo ", {}, ["foo"]),
            (" foo ", {}, ["foo"]),
            ("|foo", {"delimiters": "|"}, ["foo"]),
            ("| foo", {"delimiters": "|"}, [" foo"]),
            ("||foo||bar||", {"delimiters": "|"}, ["foo", "bar"]),
        ],
    )
    def test_leading_and_trailing_delimiters_skipped(
        self, text: str, options: dict[str, str], expected: list[str]
    ) -> None:
        assert split(text, **options) == expected

    def test_empty_input(self) -> None:
        assert split("") == []
        assert split("   \t\n") == []


class TestQuotes:
    @pytest.mark.parametrize("text", ["'foo'", '"foo"', "`foo`"])
    def test_default_quote_chars(self, text: str) -> None:
        assert split(text) == ["foo"]

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("foo 'bar baz' qux", ["foo", "bar baz", "qux"]),
            ("'foo bar ' baz qux", ["foo bar ", "baz", "qux"]),
            ("foo bar ' baz qux'", ["foo", "bar", " baz qux"]),
            ("foo 'bar baz qux'", ["foo", "bar baz qux"]),
            ('"foo bar" baz', ["foo bar", "baz"]),
            ("`foo bar` baz", ["foo bar", "baz"]),
        ],
    )
    def test_delimiters_inside_quotes_kept(self, text: str, expected: list[str]) -> None:
        assert split(text) == expected

    def test_keep_quotes(self) -> None:
        assert split("'foo'", keep_quotes=True) == ["'foo'"]

    @pytest.mark.parametrize("text", ["foo b'ar ba'z qux", "foo b'ar baz' qux", "foo 'bar ba'z qux"])
    def test_quotes_inside_words(self, text: str) -> None:
        assert split(text) == ["foo", "bar baz", "qux"]

    def test_custom_quote_chars(self) -> None:
        assert split("foo /bar baz/ qux", quote_chars="/") == ["foo", "bar baz", "qux"]
        assert split("/foo bar  baz / qux", quote_chars="/") == ["foo bar  baz ", "qux"]
        assert split("/foo bar/ 'baz qux'", quote_chars="/") == ["foo bar", "'baz", "qux'"]
        assert split("~foo bar~ /baz qux/", quote_chars="~/") == ["foo bar", "baz qux"]

    def test_other_quote_chars_are_literal_inside_a_region(self) -> None:
        text = "a 'b `c' `d e'` f"
        assert split(text) == ["a", "b `c", "d e'", "f"]
        assert split(text, keep_quotes=True) == ["a", "'b `c'", "`d e'`", "f"]

        text = "a /b `c/ `d e/` f"
        assert split(text, quote_chars="/`") == ["a", "b `c", "d e/", "f"]
        assert split(text, quote_chars="/`", keep_quotes=True) == ["a", "/b `c/", "`d e/`", "f"]

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("foo '' bar", ["foo", "", "bar"]),
            ("foo '''' bar", ["foo", "", "bar"]),
            ("foo ''`` bar", ["foo", "", "bar"]),
            ("foo '' `` bar", ["foo", "", "", "bar"]),
            ("foo ''' bar", ["foo", " bar"]),
            ("foo '' ``", ["foo", "", ""]),
            ("''", [""]),
            (" '' ", [""]),
            ("''' ", [" "]),
            ("'' ``", ["", ""]),
            ("'' `` ", ["", ""]),
            ("'' `` foo", ["", "", "foo"]),
        ],
    )
    def test_empty_quote_pairs_yield_empty_words(self, text: str, expected: list[str]) -> None:
        assert split(text) == expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("''", ["''"]),
            ("foo '' bar", ["foo", "''", "bar"]),
            ("foo '''' bar", ["foo", "''''", "bar"]),
            ("foo ''`` bar", ["foo", "''``", "bar"]),
            ("foo '' `` bar", ["foo", "''", "``", "bar"]),
        ],
    )
    def test_empty_quote_pairs_with_keep_quotes(self, text: str, expected: list[str]) -> None:
        assert split(text, keep_quotes=True) == expected

    def test_unterminated_quote_runs_to_end(self) -> None:
        assert split("foo 'bar baz") == ["foo", "bar baz"]
        assert split("foo 'bar baz", keep_quotes=True) == ["foo", "'bar baz"]


class TestEscapes:
    def test_escaped_delimiter(self) -> None:
        assert split("foo\\ bar") == ["foo bar"]

    def test_escaped_quotes(self) -> None:
        assert split("foo \\'bar baz\\' qux") == ["foo", "'bar", "baz'", "qux"]

    def test_escaped_escape(self) -> None:
        assert split("foo\\\\ bar") == ["foo\\", "bar"]

    def test_escaping_ordinary_characters(self) -> None:
        assert split("foo\\bar") == ["foobar"]

    def test_keep_escapes(self) -> None:
        assert split("foo\\ bar", keep_escapes=True) == ["foo\\ bar"]

    def test_custom_escape_chars(self) -> None:
        assert split("foo% bar", escape_chars="%") == ["foo bar"]
        assert split("foo% bar", escape_chars="%", keep_escapes=True) == ["foo% bar"]

    def test_mixed_escape_chars(self) -> None:
        assert split("foo%\\ bar", escape_chars="%\\") == ["foo\\", "bar"]
        assert split("foo%\\ bar", escape_chars="%\\", keep_escapes=True) == ["foo%\\", "bar"]

    def test_escapes_inside_quoted_regions(self) -> None:
        assert split("foo 'bar\\'s baz' qux") == ["foo", "bar's baz", "qux"]
        assert split("foo 'bar\\\\'s baz qux'") == ["foo", "bar\\s", "baz", "qux"]

    @pytest.mark.parametrize("keep_escapes", [False, True])
    def test_trailing_escape_is_dropped(self, keep_escapes: bool) -> None:
        assert split("foo \\", keep_escapes=keep_escapes) == ["foo"]
        assert split("foo\\", keep_escapes=keep_escapes) == ["foo"]
        assert split("\\", keep_escapes=keep_escapes) == []


class TestConfig:
    def test_config_object_and_overrides(self) -> None:
        config = SplitConfig(delimiters="|")
        assert split("a|b c", config) == ["a", "b c"]
        assert split("a|b c", config, delimiters=" ") == ["a|b", "c"]

    def test_camel_case_aliases(self) -> None:
        assert split("'foo'", keepQuotes=True) == ["'foo'"]

    def test_alphabet_from_iterable(self) -> None:
        assert split("a|b.c", delimiters=["|", "."]) == ["a", "b", "c"]

    def test_unknown_option_rejected(self) -> None:
        with pytest.raises(ValidationError):
            split("foo", quotes="'")


class TestWordBuffer:
    def test_kept_markers_do_not_start_a_word(self) -> None:
        word = _Word()
        word.keep("\\")
        assert not word.started
        word.drop_last()
        word.add("a")
        word.keep("'")
        assert word.started
        assert word.flush() == "a'"
        assert not word.started
        assert word.flush() == ""

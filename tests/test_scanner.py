"""
Unit Tests — Scanner
====================
Line splitting and 1-based substring location shared by every checker.
"""
from reviewer.core.languages import Language, parse_language
from reviewer.parser.scanner import scan


class TestScan:

    def test_splits_on_newlines(self):
        source = scan("a\nb\nc")
        assert source.lines == ("a", "b", "c")
        assert source.line_count == 3

    def test_empty_text_is_one_line(self):
        assert scan("").line_count == 1

    def test_trailing_newline_adds_empty_line(self):
        assert scan("a\n").lines == ("a", "")

    def test_numbered_is_one_based(self):
        assert list(scan("x\ny").numbered()) == [(1, "x"), (2, "y")]


class TestLocate:

    def test_first_line_containing(self):
        source = scan("alpha\nbeta\nbeta again")
        assert source.first_line_containing("beta") == 2

    def test_not_found_returns_none(self):
        assert scan("alpha").first_line_containing("omega") is None

    def test_locate_miss_is_multiple(self):
        assert scan("alpha").locate("omega") == "multiple"

    def test_locate_any_picks_earliest_line(self):
        source = scan("one\ntwo\nthree")
        assert source.locate_any("three", "two") == 2


class TestParseLanguage:

    def test_known_languages(self):
        for language in Language:
            assert parse_language(language.value) is language

    def test_case_sensitive(self):
        assert parse_language("Python") is None

    def test_unknown_language(self):
        assert parse_language("ruby") is None

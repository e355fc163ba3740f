"""
Unit Tests — Fix Synthesizer
============================
Validates the lookup chain precedence:
    language table → language-agnostic table → generic fallback
and the non-empty fix guarantee for combinations absent from the catalog.
"""
import pytest

from reviewer.core.fix_catalog import FALLBACK_BEFORE, GENERIC_FIXES, LANGUAGE_FIXES
from reviewer.core.languages import Language
from reviewer.models.finding import FindingType, RawFinding
from reviewer.services.fix_synthesizer import (
    SOURCE_FALLBACK,
    SOURCE_GENERIC,
    SOURCE_LANGUAGE,
    resolve_fix_template,
    synthesize,
)


# ---------------------------------------------------------------------------
# 1. Lookup precedence
# ---------------------------------------------------------------------------
class TestResolveFixTemplate:

    def test_language_entry_hit(self):
        template, source = resolve_fix_template(
            FindingType.SYNTAX, Language.JAVASCRIPT, "Missing semicolon")
        assert source == SOURCE_LANGUAGE
        assert template.after == "let result = 5 + 3;"

    def test_language_entry_wins_over_generic(self):
        template, source = resolve_fix_template(
            FindingType.SYNTAX, Language.JAVASCRIPT, "Unmatched curly braces")
        assert source == SOURCE_LANGUAGE
        assert "console.log" in template.after

    def test_generic_entry_when_language_misses(self):
        template, source = resolve_fix_template(
            FindingType.SYNTAX, Language.PYTHON, "Unmatched curly braces")
        assert source == SOURCE_GENERIC
        assert template is GENERIC_FIXES[(FindingType.SYNTAX, "Unmatched curly braces")]

    def test_logical_entries_are_language_agnostic(self):
        for language in list(Language) + [None]:
            _, source = resolve_fix_template(
                FindingType.LOGICAL, language, "Potential infinite loop")
            assert source == SOURCE_GENERIC

    def test_unknown_language_skips_language_table(self):
        template, source = resolve_fix_template(FindingType.SYNTAX, None, "Missing semicolon")
        assert template is None
        assert source == SOURCE_FALLBACK

    def test_type_is_part_of_the_key(self):
        _, source = resolve_fix_template(
            FindingType.RUNTIME, Language.JAVASCRIPT, "Missing semicolon")
        assert source == SOURCE_FALLBACK


# ---------------------------------------------------------------------------
# 2. synthesize()
# ---------------------------------------------------------------------------
class TestSynthesize:

    def test_catalog_fix_attached(self):
        raw = RawFinding(FindingType.RUNTIME, "Potential memory leak", 4, "free it")
        finding = synthesize(raw, Language.CPP)
        assert finding.line == 4
        assert finding.type == FindingType.RUNTIME
        assert "delete ptr;" in finding.fix.after
        assert finding.fix.explanation == "Always free allocated memory with delete"

    def test_fallback_uses_suggested_fix_text(self):
        raw = RawFinding(FindingType.SECURITY, "Invented rule", "multiple", "Do the safe thing")
        finding = synthesize(raw, Language.JAVA)
        assert finding.fix.before == FALLBACK_BEFORE
        assert finding.fix.after == "Do the safe thing"
        assert finding.fix.explanation == "Do the safe thing"
        assert finding.line == "multiple"

    def test_fallback_never_empty(self):
        raw = RawFinding(FindingType.LOGICAL, "Made-up message", 1, "   ")
        finding = synthesize(raw, None)
        assert finding.fix.before
        assert finding.fix.after == "Made-up message"
        assert finding.fix.explanation == "Made-up message"


# ---------------------------------------------------------------------------
# 3. Catalog sanity
# ---------------------------------------------------------------------------
class TestCatalog:

    @pytest.mark.parametrize("template", list(LANGUAGE_FIXES.values()) + list(GENERIC_FIXES.values()))
    def test_no_empty_fields(self, template):
        assert template.before.strip()
        assert template.after.strip()
        assert template.explanation.strip()

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            GENERIC_FIXES[(FindingType.SYNTAX, "x")] = None  # type: ignore[index]

    def test_python_indentation_fix_uses_four_spaces(self):
        template = LANGUAGE_FIXES[(FindingType.SYNTAX, Language.PYTHON, "Incorrect indentation")]
        assert '\n    print("test")' in template.after

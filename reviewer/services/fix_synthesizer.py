"""
Fix Synthesizer
===============
Attaches a concrete Fix to every raw checker finding.

Resolution order (first hit wins):
  1. LANGUAGE_FIXES[(type, language, message)]
  2. GENERIC_FIXES[(type, message)]
  3. Generic fallback built from the checker's own suggested fix text

A miss is never an error.  The fallback guarantees non-empty
before/after/explanation for any (type, language, message) combination.
"""
import logging
from typing import Iterable, List, Optional, Tuple

from reviewer.core.fix_catalog import (
    FALLBACK_BEFORE,
    GENERIC_FIXES,
    LANGUAGE_FIXES,
    FixTemplate,
)
from reviewer.core.languages import Language
from reviewer.models.finding import Finding, FindingType, Fix, RawFinding

logger = logging.getLogger(__name__)

SOURCE_LANGUAGE = "language"
SOURCE_GENERIC = "generic"
SOURCE_FALLBACK = "fallback"


def resolve_fix_template(
    finding_type: FindingType,
    language: Optional[Language],
    message: str,
) -> Tuple[Optional[FixTemplate], str]:
    """
    Walk the lookup chain for one finding.

    Returns
    -------
    (template, source)
        source is one of SOURCE_LANGUAGE, SOURCE_GENERIC, SOURCE_FALLBACK.
        template is None only when source is SOURCE_FALLBACK.
    """
    if language is not None:
        template = LANGUAGE_FIXES.get((finding_type, language, message))
        if template is not None:
            return template, SOURCE_LANGUAGE

    template = GENERIC_FIXES.get((finding_type, message))
    if template is not None:
        return template, SOURCE_GENERIC

    return None, SOURCE_FALLBACK


def fallback_fix(raw: RawFinding) -> Fix:
    text = raw.suggested_fix.strip() or raw.message
    return Fix(before=FALLBACK_BEFORE, after=text, explanation=text)


def synthesize(raw: RawFinding, language: Optional[Language]) -> Finding:
    """Turn one RawFinding into a Finding carrying its Fix."""
    template, _ = resolve_fix_template(raw.type, language, raw.message)
    if template is None:
        logger.debug("No catalog fix for (%s, %s, %r), using fallback",
                     raw.type.value, language.value if language else None, raw.message)
        fix = fallback_fix(raw)
    else:
        fix = Fix(before=template.before, after=template.after,
                  explanation=template.explanation)

    return Finding(type=raw.type, message=raw.message, line=raw.line, fix=fix)


def synthesize_all(raws: Iterable[RawFinding], language: Optional[Language]) -> List[Finding]:
    return [synthesize(raw, language) for raw in raws]

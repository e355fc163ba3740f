"""
Report Orchestrator
===================
Single public entry point of the analysis engine.

Pipeline (fixed order):
    Scanner → Bug Finder (+ Fix Synthesizer) → Metrics
    → Suggestions → Best Practices → Report

STRICT DETERMINISM CONTRACT:
  - No I/O, no configuration, no clock, no randomness.
  - Same (code, language) always yields an identical Report.
  - Never raises for string input; unknown languages run only the
    language-agnostic rules.
"""
import logging
from typing import List

from reviewer.core.best_practices import get_best_practices
from reviewer.core.languages import parse_language
from reviewer.models.finding import Finding, FindingType
from reviewer.models.report import (
    BugTypeCounts,
    CodeAnalysis,
    Debugging,
    Metrics,
    Report,
)
from reviewer.parser.scanner import scan
from reviewer.services import metrics
from reviewer.services.bug_finder import find_bugs
from reviewer.services.suggestions import generate_suggestions

logger = logging.getLogger(__name__)


def _count_types(bugs: List[Finding]) -> BugTypeCounts:
    counts = {finding_type.value: 0 for finding_type in FindingType}
    for bug in bugs:
        counts[bug.type.value] += 1
    return BugTypeCounts(**counts)


def analyze_code(code: str, language: str) -> Report:
    """
    Produce the full quality report for one block of source text.

    Parameters
    ----------
    code : str
        Source text.  May be empty.
    language : str
        Declared language, matched case-sensitively.  Echoed verbatim in
        ``code_analysis.language``.

    Returns
    -------
    Report
    """
    resolved = parse_language(language)
    if resolved is None:
        logger.debug("Unrecognised language %r: language-agnostic rules only", language)

    source = scan(code)
    bugs = find_bugs(source, resolved)

    comment_lines = metrics.count_comment_lines(source.lines)
    code_analysis = CodeAnalysis(
        language=language,
        total_lines=source.line_count,
        comment_lines=comment_lines,
        function_count=metrics.count_functions(source.lines),
        complexity=metrics.calculate_complexity(code),
        code_to_comment_ratio=metrics.comment_ratio(comment_lines, source.line_count),
    )
    quality = Metrics(
        maintainability=metrics.calculate_maintainability(code),
        readability=metrics.calculate_readability(code),
        efficiency=metrics.calculate_efficiency(code),
    )
    suggestions = generate_suggestions(code, resolved)
    best_practices = get_best_practices(resolved)

    logger.info(
        "Analysis complete: language=%s lines=%d bugs=%d suggestions=%d",
        language, source.line_count, len(bugs), len(suggestions),
    )

    return Report(
        code_analysis=code_analysis,
        suggestions=suggestions,
        best_practices=best_practices,
        metrics=quality,
        debugging=Debugging(
            bugs=bugs,
            bug_count=len(bugs),
            bug_types=_count_types(bugs),
        ),
    )

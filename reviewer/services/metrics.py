"""
Metrics Calculator
==================
Four independent Low/Medium/High ratings computed from whole-source
statistics, plus the line/comment/function counts of the code analysis
section.  Each function is pure: same text in, same rating out.
"""
import re
from typing import List, Sequence

from reviewer.models.report import Rating

# ---------------------------------------------------------------------------
# Complexity
# ---------------------------------------------------------------------------
# Substring keyword counts (no word boundaries).
_CONTROL_RE = re.compile(r"if|else|for|while|switch|catch")
_PAREN_GROUP_RE = re.compile(r"\([^)]*\)")
COMPLEXITY_HIGH = 20
COMPLEXITY_MEDIUM = 10

# ---------------------------------------------------------------------------
# Maintainability
# ---------------------------------------------------------------------------
LONG_LINE = 80
AVG_LEN_LOW = 100
AVG_LEN_MEDIUM = 80
LONG_RATIO_LOW = 0.2
LONG_RATIO_MEDIUM = 0.1

# ---------------------------------------------------------------------------
# Readability
# ---------------------------------------------------------------------------
_NAME_RE = re.compile(r"[a-z][a-zA-Z0-9]*")
DESCRIPTIVE_MIN_LEN = 4
DESCRIPTIVE_LOW = 0.7
DESCRIPTIVE_MEDIUM = 0.9

# ---------------------------------------------------------------------------
# Efficiency
# ---------------------------------------------------------------------------
_LOOP_RE = re.compile(r"for|while")
# Two loop keywords on the same line: a crude nested-loop detector.
NESTED_LOOP_RE = re.compile(r"for.*for|while.*while")
LOOP_DENSITY_MEDIUM = 0.2

_COMMENT_PREFIXES = ("//", "/*", "*", "#")
_FUNCTION_MARKERS = ("function", "def ", "class ")


def _split(code: str) -> List[str]:
    return code.split("\n")


def complexity_score(code: str) -> int:
    return (
        len(_CONTROL_RE.findall(code))
        + code.count("{")
        + len(_PAREN_GROUP_RE.findall(code))
    )


def calculate_complexity(code: str) -> Rating:
    score = complexity_score(code)
    if score > COMPLEXITY_HIGH:
        return Rating.HIGH
    if score > COMPLEXITY_MEDIUM:
        return Rating.MEDIUM
    return Rating.LOW


def calculate_maintainability(code: str) -> Rating:
    lines = _split(code)
    avg_len = sum(len(line) for line in lines) / len(lines)
    long_ratio = sum(1 for line in lines if len(line) > LONG_LINE) / len(lines)

    if avg_len > AVG_LEN_LOW or long_ratio > LONG_RATIO_LOW:
        return Rating.LOW
    if avg_len > AVG_LEN_MEDIUM or long_ratio > LONG_RATIO_MEDIUM:
        return Rating.MEDIUM
    return Rating.HIGH


def calculate_readability(code: str) -> Rating:
    """
    Low when any non-blank line starts without two spaces or a tab, or
    fewer than 70% of lowercase-leading names are longer than 3 chars.
    Medium under 90%, otherwise High.
    """
    consistent = all(
        line.startswith("  ") or line.startswith("\t") or not line.strip()
        for line in _split(code)
    )
    names = _NAME_RE.findall(code)
    descriptive = sum(1 for name in names if len(name) >= DESCRIPTIVE_MIN_LEN)

    if not consistent or descriptive < len(names) * DESCRIPTIVE_LOW:
        return Rating.LOW
    if descriptive < len(names) * DESCRIPTIVE_MEDIUM:
        return Rating.MEDIUM
    return Rating.HIGH


def has_nested_loops(code: str) -> bool:
    return NESTED_LOOP_RE.search(code) is not None


def calculate_efficiency(code: str) -> Rating:
    if has_nested_loops(code):
        return Rating.LOW
    if len(_LOOP_RE.findall(code)) > len(_split(code)) * LOOP_DENSITY_MEDIUM:
        return Rating.MEDIUM
    return Rating.HIGH


# ---------------------------------------------------------------------------
# Code analysis counts
# ---------------------------------------------------------------------------
def count_comment_lines(lines: Sequence[str]) -> int:
    return sum(1 for line in lines if line.strip().startswith(_COMMENT_PREFIXES))


def count_functions(lines: Sequence[str]) -> int:
    return sum(1 for line in lines if any(marker in line for marker in _FUNCTION_MARKERS))


def comment_ratio(comment_lines: int, total_lines: int) -> float:
    """Percentage of comment lines; 0.0 for zero-length input."""
    if total_lines == 0:
        return 0.0
    return comment_lines / total_lines * 100

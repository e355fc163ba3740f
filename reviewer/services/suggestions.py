"""
Suggestion Generator
====================
Improvement suggestions, independent of the bug finder.

Each rule is a predicate over the whole source text paired with a key in
SUGGESTIONS.  Rules run in a fixed order:

    comments → error handling → indentation → naming
    → language idioms → nested loops → dynamic evaluation
"""
import logging
import re
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from reviewer.core.languages import Language
from reviewer.core.suggestion_catalog import SUGGESTIONS
from reviewer.models.suggestion import Example, Suggestion
from reviewer.services.metrics import has_nested_loops

logger = logging.getLogger(__name__)

Rule = Tuple[str, Callable[[str], bool]]

_COMMENT_MARKERS = ("//", "/*", "#")
_SHORT_NAME_RE = re.compile(r"[a-z][a-zA-Z0-9]*")
SHORT_NAME_LEN = 3


def _has_short_names(code: str) -> bool:
    return any(len(name) < SHORT_NAME_LEN for name in _SHORT_NAME_RE.findall(code))


_GENERAL_RULES: Sequence[Rule] = (
    ("add_comments",           lambda code: not any(m in code for m in _COMMENT_MARKERS)),
    ("error_handling",         lambda code: "try" not in code and "catch" not in code),
    ("consistent_indentation", lambda code: "  " in code and "\t" in code),
    ("descriptive_names",      _has_short_names),
)

_TRAILING_RULES: Sequence[Rule] = (
    ("nested_loops",       has_nested_loops),
    ("dynamic_evaluation", lambda code: "eval(" in code or "Function(" in code),
)

LANGUAGE_RULES: Dict[Language, Sequence[Rule]] = {
    Language.JAVASCRIPT: (
        ("js_var",             lambda code: "var " in code),
        ("js_arrow_functions", lambda code: "function()" in code or "function ()" in code),
        ("js_strict_equality", lambda code: "==" in code or "!=" in code),
    ),
    Language.PYTHON: (
        ("py_logging", lambda code: "print(" in code),
        ("py_globals", lambda code: "global " in code),
    ),
    Language.JAVA: (
        ("java_access_modifiers", lambda code: "public class" not in code),
    ),
    Language.CPP: (
        ("cpp_namespace_std", lambda code: "using namespace std;" in code),
    ),
}


def _to_suggestion(key: str) -> Suggestion:
    template = SUGGESTIONS[key]
    return Suggestion(
        message=template.message,
        example=Example(before=template.before, after=template.after),
    )


def generate_suggestions(code: str, language: Optional[Language]) -> List[Suggestion]:
    rules: list[Rule] = list(_GENERAL_RULES)
    if language is not None:
        rules.extend(LANGUAGE_RULES[language])
    rules.extend(_TRAILING_RULES)

    keys = [key for key, applies in rules if applies(code)]
    logger.debug("Suggestions triggered: %s", keys)
    return [_to_suggestion(key) for key in keys]

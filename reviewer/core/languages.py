"""
Languages
=========
Closed set of source languages that carry language-specific rules.

Matching is case-sensitive against the enum values.  Any other value maps
to ``None``, meaning "only language-agnostic rules apply".
"""
from enum import Enum
from typing import Optional


class Language(str, Enum):
    JAVASCRIPT = "javascript"
    PYTHON     = "python"
    JAVA       = "java"
    CPP        = "cpp"


def parse_language(value: str) -> Optional[Language]:
    """Return the matching Language, or None for an unrecognised value."""
    try:
        return Language(value)
    except ValueError:
        return None

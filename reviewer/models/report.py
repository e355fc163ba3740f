"""
Report Model
============
Pydantic model for the aggregate returned by one analysis call.

Serialised field names are camelCase (``codeAnalysis``, ``bugTypes``...)
because that is the wire shape the front-end consumes.  Python code uses
the snake_case attribute names; both are accepted on construction.

Structure:
    code_analysis   — language, line/comment/function counts, complexity, ratio
    suggestions     — List[Suggestion]
    best_practices  — List[str]
    metrics         — maintainability / readability / efficiency ratings
    debugging       — bugs, bug_count, per-type counts
"""
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .finding import Finding
from .suggestion import Suggestion


class Rating(str, Enum):
    LOW    = "Low"
    MEDIUM = "Medium"
    HIGH   = "High"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CodeAnalysis(_CamelModel):
    language: str
    total_lines: int
    comment_lines: int
    function_count: int
    complexity: Rating
    code_to_comment_ratio: float


class Metrics(_CamelModel):
    maintainability: Rating
    readability: Rating
    efficiency: Rating


class BugTypeCounts(_CamelModel):
    syntax: int = 0
    runtime: int = 0
    logical: int = 0
    security: int = 0


class Debugging(_CamelModel):
    bugs: List[Finding] = []
    bug_count: int = 0
    bug_types: BugTypeCounts = BugTypeCounts()


class Report(_CamelModel):
    code_analysis: CodeAnalysis
    suggestions: List[Suggestion] = []
    best_practices: List[str] = []
    metrics: Metrics
    debugging: Debugging

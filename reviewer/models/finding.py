"""
Finding Model
=============
Pydantic models for suspected defects reported by the bug finder.

Fields:
    type     — one of FindingType (syntax, runtime, logical, security)
    message  — literal rule message; doubles as the fix catalog key
    line     — 1-based line number, or "multiple" when no single line applies
    fix      — before/after/explanation triple, always populated

RawFinding is the pre-synthesis shape produced by the checkers.  It never
leaves the bug finder: every checker result passes through the fix
synthesizer first.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel

MULTIPLE_LINES = "multiple"

LineRef = Union[int, Literal["multiple"]]


class FindingType(str, Enum):
    SYNTAX   = "syntax"
    RUNTIME  = "runtime"
    LOGICAL  = "logical"
    SECURITY = "security"


class Fix(BaseModel):
    before: str
    after: str
    explanation: str


class Finding(BaseModel):
    type: FindingType
    message: str
    line: LineRef
    fix: Fix


@dataclass(frozen=True)
class RawFinding:
    """Checker output before a Fix is attached."""
    type: FindingType
    message: str
    line: LineRef
    suggested_fix: str

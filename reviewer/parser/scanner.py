"""
Scanner
=======
Splits source text into 1-indexed lines and answers substring location
queries.  Every checker goes through this module so they all share one
line-numbering rule: line N is the N-th element of ``text.split("\\n")``.
"""
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

from reviewer.models.finding import MULTIPLE_LINES, LineRef


@dataclass(frozen=True)
class SourceScan:
    """Immutable view over one block of source text."""
    code: str
    lines: Tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.code.split("\n")))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def numbered(self) -> Iterator[Tuple[int, str]]:
        """Yield (line_number, line) pairs, 1-based."""
        return enumerate(self.lines, start=1)

    def first_line_containing(self, needle: str) -> Optional[int]:
        """1-based number of the first line containing needle, or None."""
        for number, line in self.numbered():
            if needle in line:
                return number
        return None

    def locate(self, needle: str) -> LineRef:
        """Like first_line_containing, but reports a miss as "multiple"."""
        number = self.first_line_containing(needle)
        return MULTIPLE_LINES if number is None else number

    def locate_any(self, *needles: str) -> LineRef:
        """First line containing any of the needles, or "multiple"."""
        for number, line in self.numbered():
            if any(needle in line for needle in needles):
                return number
        return MULTIPLE_LINES


def scan(code: str) -> SourceScan:
    return SourceScan(code)

"""
Bug Finder
==========
Heuristic, line-oriented defect detection.

NO AST, NO EXECUTION.  Every rule is a substring or regex test over the
scanned source, so results are approximate by nature: false positives and
false negatives are expected and accepted.

Four sub-checkers run in a fixed order and append to one list:
    syntax → runtime → logical → security

Language-specific rules are dispatched through tables keyed by Language.
Each table covers every Language member.  An unrecognised language (None)
only runs the language-agnostic rules.

OUTPUT CONTRACT:
  find_bugs(scan, language) -> List[Finding]
  Every Finding already carries its Fix.  No deduplication.
"""
import logging
import re
from typing import Callable, Dict, List, Optional, Sequence

from reviewer.core.languages import Language
from reviewer.models.finding import MULTIPLE_LINES, Finding, FindingType, RawFinding
from reviewer.parser.scanner import SourceScan
from reviewer.services.fix_synthesizer import synthesize_all

logger = logging.getLogger(__name__)

Checker = Callable[[SourceScan], List[RawFinding]]

# ---------------------------------------------------------------------------
# Rule messages (also the fix catalog keys)
# ---------------------------------------------------------------------------
MSG_MISSING_SEMICOLON = "Missing semicolon"
MSG_UNMATCHED_BRACES = "Unmatched curly braces"
MSG_UNCLOSED_CALL = "Missing closing parenthesis in function call"
MSG_UNCLOSED_STRING = "Unclosed string literal"
MSG_BAD_INDENT = "Incorrect indentation"
MSG_MISSING_COLON = "Missing colon after {keyword} statement"
MSG_MISSING_CLASS = "Missing public class declaration"
MSG_MISSING_MAIN = "Missing main method"
MSG_MISSING_IOSTREAM = "Missing iostream include"
MSG_MISSING_NAMESPACE = "Missing namespace declaration"
MSG_UNDEFINED_VARIABLE = "Potential undefined variable"
MSG_DIVISION_BY_ZERO = "Potential division by zero"
MSG_NULL_POINTER = "Potential null pointer exception"
MSG_MEMORY_LEAK = "Potential memory leak"
MSG_INFINITE_LOOP = "Potential infinite loop"
MSG_UNREACHABLE = "Unreachable code after return statement"
MSG_SQL_INJECTION = "Potential SQL injection vulnerability"
MSG_XSS = "Potential XSS vulnerability"

# ---------------------------------------------------------------------------
# Patterns and keyword tables
# ---------------------------------------------------------------------------
_TERMINATOR_ENDINGS = (";", "{", "}")
_COMMENT_PREFIXES = ("//", "/*", "*")

_JS_EXEMPT_KEYWORDS = ("if", "for", "while", "function")
_JS_DECLARATION_PREFIXES = ("const", "let", "var")
_JAVA_EXEMPT_KEYWORDS = ("if", "for", "while", "class")
_CPP_EXEMPT_KEYWORDS = ("if", "for", "while", "class")
_CPP_DIRECTIVE_PREFIXES = ("#",)

_PYTHON_BLOCK_KEYWORDS = ("if", "for", "while", "def", "class", "else", "elif")
_PYTHON_BLOCK_RES = [(kw, re.compile(rf"{kw}\b")) for kw in _PYTHON_BLOCK_KEYWORDS]
_PYTHON_INDENT_WIDTH = 4

# Call opened on a line and never closed before the end of that line.
_UNCLOSED_CALL_RE = re.compile(r"\b\w+[ \t]*\([^)\n]*$", re.MULTILINE)
# A quote and everything up to its unescaped partner on the same line.
# Group 2 is the closing quote and is None when the literal never closes.
_STRING_RE = re.compile(r"""(["'])(?:(?!\1)[^\\\n]|\\.)*(\1)?""")

_JS_DECLARATION_RE = re.compile(r"var\s+(\w+)|let\s+(\w+)|const\s+(\w+)")
_IDENTIFIER_RE = re.compile(r"\b[a-zA-Z_]\w*\b")

_INFINITE_LOOP_MARKERS = ("while(true)", "for(;;)")
_SQL_MARKERS = ("SELECT", "INSERT", "UPDATE")
_XSS_MARKERS = ("innerHTML", "document.write")

_RETURN = "return"
# Second-occurrence search starts one character past the first keyword.
_RETURN_SKIP = len(_RETURN) + 1


# ===================================================================
# Shared Syntax Rules
# ===================================================================
def check_missing_terminators(
    scan: SourceScan,
    exempt_keywords: Sequence[str],
    exempt_prefixes: Sequence[str] = (),
) -> List[RawFinding]:
    """
    Flag every non-blank line that does not end with ; { or }.

    Lines containing any exempt keyword, lines opening with a comment
    marker, and lines opening with an exempt prefix are skipped.
    Keyword containment is a plain substring test.
    """
    prefixes = _COMMENT_PREFIXES + tuple(exempt_prefixes)
    findings: list[RawFinding] = []
    for number, line in scan.numbered():
        stripped = line.strip()
        if not stripped or stripped.endswith(_TERMINATOR_ENDINGS):
            continue
        if any(keyword in stripped for keyword in exempt_keywords):
            continue
        if stripped.startswith(prefixes):
            continue
        findings.append(RawFinding(
            type=FindingType.SYNTAX,
            message=MSG_MISSING_SEMICOLON,
            line=number,
            suggested_fix="Add semicolon at the end of the statement",
        ))
    return findings


def check_brace_balance(scan: SourceScan) -> List[RawFinding]:
    """One finding when the unit's { and } counts differ, however large the gap."""
    if scan.code.count("{") == scan.code.count("}"):
        return []
    return [RawFinding(
        type=FindingType.SYNTAX,
        message=MSG_UNMATCHED_BRACES,
        line=MULTIPLE_LINES,
        suggested_fix="Check and match all opening and closing braces",
    )]


def check_unclosed_calls(scan: SourceScan) -> List[RawFinding]:
    findings: list[RawFinding] = []
    for match in _UNCLOSED_CALL_RE.finditer(scan.code):
        findings.append(RawFinding(
            type=FindingType.SYNTAX,
            message=MSG_UNCLOSED_CALL,
            line=scan.locate(match.group(0)),
            suggested_fix="Add closing parenthesis to complete the function call",
        ))
    return findings


def _unclosed_string_tail(line: str) -> Optional[str]:
    """Text from the first unpaired quote to end of line, or None."""
    for match in _STRING_RE.finditer(line):
        if match.group(2) is None:
            return line[match.start():]
    return None


def check_unclosed_strings(scan: SourceScan) -> List[RawFinding]:
    findings: list[RawFinding] = []
    for line in scan.lines:
        tail = _unclosed_string_tail(line)
        if tail is None:
            continue
        findings.append(RawFinding(
            type=FindingType.SYNTAX,
            message=MSG_UNCLOSED_STRING,
            line=scan.locate(tail),
            suggested_fix="Add closing quote to complete the string",
        ))
    return findings


# ===================================================================
# Language-specific Syntax Rules
# ===================================================================
def _syntax_javascript(scan: SourceScan) -> List[RawFinding]:
    findings = check_missing_terminators(scan, _JS_EXEMPT_KEYWORDS, _JS_DECLARATION_PREFIXES)
    findings.extend(check_unclosed_calls(scan))
    findings.extend(check_unclosed_strings(scan))
    return findings


def _leading_width(line: str) -> int:
    return len(line) - len(line.lstrip())


def check_python_indentation(scan: SourceScan) -> List[RawFinding]:
    """
    Flag lines whose indentation is not a multiple of 4, and block bodies
    that are not indented deeper than the header line ending in ':'.
    At most one finding per line.
    """
    findings: list[RawFinding] = []
    header_width: Optional[int] = None

    for number, line in scan.numbered():
        width = _leading_width(line)
        stripped = line.strip()

        misaligned = width % _PYTHON_INDENT_WIDTH != 0
        unindented_body = (
            bool(stripped)
            and not stripped.startswith("#")
            and header_width is not None
            and width <= header_width
        )
        if misaligned or unindented_body:
            findings.append(RawFinding(
                type=FindingType.SYNTAX,
                message=MSG_BAD_INDENT,
                line=number,
                suggested_fix="Use 4 spaces for indentation",
            ))

        # comments neither open a block nor end one
        if stripped and not stripped.startswith("#"):
            header_width = width if stripped.endswith(":") else None

    return findings


def check_python_colons(scan: SourceScan) -> List[RawFinding]:
    findings: list[RawFinding] = []
    for number, line in scan.numbered():
        stripped = line.strip()
        if stripped.endswith(":"):
            continue
        for keyword, pattern in _PYTHON_BLOCK_RES:
            if pattern.match(stripped):
                findings.append(RawFinding(
                    type=FindingType.SYNTAX,
                    message=MSG_MISSING_COLON.format(keyword=keyword),
                    line=number,
                    suggested_fix="Add colon after the statement",
                ))
    return findings


def _syntax_python(scan: SourceScan) -> List[RawFinding]:
    findings = check_python_indentation(scan)
    findings.extend(check_python_colons(scan))
    findings.extend(check_unclosed_calls(scan))
    return findings


def _syntax_java(scan: SourceScan) -> List[RawFinding]:
    findings = check_missing_terminators(scan, _JAVA_EXEMPT_KEYWORDS)

    if "public class" not in scan.code:
        findings.append(RawFinding(
            type=FindingType.SYNTAX,
            message=MSG_MISSING_CLASS,
            line=1,
            suggested_fix="Add public class declaration",
        ))
    if "public static void main" not in scan.code:
        findings.append(RawFinding(
            type=FindingType.SYNTAX,
            message=MSG_MISSING_MAIN,
            line=MULTIPLE_LINES,
            suggested_fix="Add public static void main method",
        ))
    return findings


def _syntax_cpp(scan: SourceScan) -> List[RawFinding]:
    findings = check_missing_terminators(scan, _CPP_EXEMPT_KEYWORDS, _CPP_DIRECTIVE_PREFIXES)

    if "cout" in scan.code:
        if "#include <iostream>" not in scan.code:
            findings.append(RawFinding(
                type=FindingType.SYNTAX,
                message=MSG_MISSING_IOSTREAM,
                line=1,
                suggested_fix="Add #include <iostream> at the beginning of the file",
            ))
        if "using namespace std;" not in scan.code:
            findings.append(RawFinding(
                type=FindingType.SYNTAX,
                message=MSG_MISSING_NAMESPACE,
                line=MULTIPLE_LINES,
                suggested_fix="Add using namespace std; after includes",
            ))
    return findings


SYNTAX_CHECKERS: Dict[Language, Checker] = {
    Language.JAVASCRIPT: _syntax_javascript,
    Language.PYTHON:     _syntax_python,
    Language.JAVA:       _syntax_java,
    Language.CPP:        _syntax_cpp,
}


def check_syntax(scan: SourceScan, language: Optional[Language]) -> List[RawFinding]:
    findings: list[RawFinding] = []
    if language is not None:
        findings.extend(SYNTAX_CHECKERS[language](scan))
    findings.extend(check_brace_balance(scan))
    return findings


# ===================================================================
# Runtime Rules
# ===================================================================
def _runtime_javascript(scan: SourceScan) -> List[RawFinding]:
    """
    Whole-unit undefined-name scan.  Not scope aware: a token counts as
    declared when it is a substring of any var/let/const match anywhere,
    so keywords, properties and parameters are routinely flagged.  One
    finding per token occurrence.
    """
    declarations = [m.group(0) for m in _JS_DECLARATION_RE.finditer(scan.code)]
    findings: list[RawFinding] = []
    for token in _IDENTIFIER_RE.findall(scan.code):
        if any(token in declaration for declaration in declarations):
            continue
        findings.append(RawFinding(
            type=FindingType.RUNTIME,
            message=MSG_UNDEFINED_VARIABLE,
            line=scan.locate(token),
            suggested_fix=f"Declare variable {token} before using it",
        ))
    return findings


def _runtime_python(scan: SourceScan) -> List[RawFinding]:
    if "/" not in scan.code:
        return []
    return [RawFinding(
        type=FindingType.RUNTIME,
        message=MSG_DIVISION_BY_ZERO,
        line=scan.locate("/"),
        suggested_fix="Add check for zero before division",
    )]


def _runtime_java(scan: SourceScan) -> List[RawFinding]:
    if "." not in scan.code or "null" in scan.code:
        return []
    return [RawFinding(
        type=FindingType.RUNTIME,
        message=MSG_NULL_POINTER,
        line=scan.locate("."),
        suggested_fix="Add null check before accessing object methods",
    )]


def _runtime_cpp(scan: SourceScan) -> List[RawFinding]:
    if "new " not in scan.code or "delete " in scan.code:
        return []
    return [RawFinding(
        type=FindingType.RUNTIME,
        message=MSG_MEMORY_LEAK,
        line=scan.locate("new "),
        suggested_fix="Add delete statement to free allocated memory",
    )]


RUNTIME_CHECKERS: Dict[Language, Checker] = {
    Language.JAVASCRIPT: _runtime_javascript,
    Language.PYTHON:     _runtime_python,
    Language.JAVA:       _runtime_java,
    Language.CPP:        _runtime_cpp,
}


def check_runtime(scan: SourceScan, language: Optional[Language]) -> List[RawFinding]:
    if language is None:
        return []
    return RUNTIME_CHECKERS[language](scan)


# ===================================================================
# Logical Rules (language-agnostic)
# ===================================================================
def check_logical(scan: SourceScan, language: Optional[Language] = None) -> List[RawFinding]:
    findings: list[RawFinding] = []
    code = scan.code

    if any(marker in code for marker in _INFINITE_LOOP_MARKERS):
        findings.append(RawFinding(
            type=FindingType.LOGICAL,
            message=MSG_INFINITE_LOOP,
            line=scan.locate_any(*_INFINITE_LOOP_MARKERS),
            suggested_fix="Add proper loop termination condition",
        ))

    # Textual test only: any second "return" past the first one triggers.
    first_return = code.find(_RETURN)
    if first_return >= 0 and code.find(_RETURN, first_return + _RETURN_SKIP) >= 0:
        findings.append(RawFinding(
            type=FindingType.LOGICAL,
            message=MSG_UNREACHABLE,
            line=scan.locate(_RETURN),
            suggested_fix="Remove code after return statement or restructure logic",
        ))

    return findings


# ===================================================================
# Security Rules (language-agnostic)
# ===================================================================
def check_security(scan: SourceScan, language: Optional[Language] = None) -> List[RawFinding]:
    findings: list[RawFinding] = []
    code = scan.code

    if any(marker in code for marker in _SQL_MARKERS):
        findings.append(RawFinding(
            type=FindingType.SECURITY,
            message=MSG_SQL_INJECTION,
            line=scan.locate_any(*_SQL_MARKERS),
            suggested_fix="Use parameterized queries or prepared statements",
        ))

    if any(marker in code for marker in _XSS_MARKERS):
        findings.append(RawFinding(
            type=FindingType.SECURITY,
            message=MSG_XSS,
            line=scan.locate_any(*_XSS_MARKERS),
            suggested_fix="Use textContent instead of innerHTML or sanitize input",
        ))

    return findings


# ===================================================================
# Public Entry Point
# ===================================================================
def collect_raw_findings(scan: SourceScan, language: Optional[Language]) -> List[RawFinding]:
    """Run the four sub-checkers in order: syntax, runtime, logical, security."""
    raws: list[RawFinding] = []
    for checker in (check_syntax, check_runtime, check_logical, check_security):
        found = checker(scan, language)
        logger.debug("%s: %d finding(s)", checker.__name__, len(found))
        raws.extend(found)
    return raws


def find_bugs(scan: SourceScan, language: Optional[Language]) -> List[Finding]:
    """
    Detect suspected defects and attach a Fix to each.

    Returns
    -------
    List[Finding]
        Ordered syntax → runtime → logical → security.  Not deduplicated.
    """
    return synthesize_all(collect_raw_findings(scan, language), language)

"""
Fix Catalog
===========
THE SINGLE SOURCE OF TRUTH for the before/after/explanation text attached
to every finding.

Structure:
    LANGUAGE_FIXES[(finding_type, language, message)] = FixTemplate
    GENERIC_FIXES[(finding_type, message)]            = FixTemplate

RULES:
  - Keys use the literal finding message.  A checker that rewords its
    message stops matching here and silently gets the generic fallback.
  - Adding a language or a rule is a data change in this module only.
  - Both tables are read-only views; nothing mutates them after import.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from reviewer.core.languages import Language
from reviewer.models.finding import FindingType


@dataclass(frozen=True)
class FixTemplate:
    before: str
    after: str
    explanation: str


_SEMICOLON = "Add a semicolon at the end of the statement"

_PYTHON_BLOCK_KEYWORDS = ("if", "for", "while", "def", "class", "else", "elif")


def _python_colon_fixes() -> dict:
    headers = {
        "if":    ("if ready", "if ready:"),
        "for":   ("for item in items", "for item in items:"),
        "while": ("while running", "while running:"),
        "def":   ("def test()", "def test():"),
        "class": ("class Config", "class Config:"),
        "else":  ("else", "else:"),
        "elif":  ("elif retries > 3", "elif retries > 3:"),
    }
    fixes = {}
    for keyword in _PYTHON_BLOCK_KEYWORDS:
        before, after = headers[keyword]
        fixes[(FindingType.SYNTAX, Language.PYTHON, f"Missing colon after {keyword} statement")] = FixTemplate(
            before=f"{before}\n    pass",
            after=f"{after}\n    pass",
            explanation=f"End every {keyword} header with a colon to open its block",
        )
    return fixes


# ---------------------------------------------------------------------------
# Language-specific templates
# ---------------------------------------------------------------------------
_LANGUAGE_FIXES: dict[Tuple[FindingType, Language, str], FixTemplate] = {

    # --- syntax ---
    (FindingType.SYNTAX, Language.JAVASCRIPT, "Missing semicolon"): FixTemplate(
        before="let result = 5 + 3",
        after="let result = 5 + 3;",
        explanation=_SEMICOLON,
    ),
    (FindingType.SYNTAX, Language.JAVASCRIPT, "Unmatched curly braces"): FixTemplate(
        before='if (true) {\n    console.log("test")\n',
        after='if (true) {\n    console.log("test");\n}',
        explanation="Ensure all opening braces have matching closing braces",
    ),
    (FindingType.SYNTAX, Language.JAVASCRIPT, "Missing closing parenthesis in function call"): FixTemplate(
        before='console.log("total", total',
        after='console.log("total", total);',
        explanation="Close every function call with a matching parenthesis",
    ),
    (FindingType.SYNTAX, Language.JAVASCRIPT, "Unclosed string literal"): FixTemplate(
        before='const greeting = "Hello world;',
        after='const greeting = "Hello world";',
        explanation="Terminate the string with the same quote character that opened it",
    ),
    (FindingType.SYNTAX, Language.PYTHON, "Incorrect indentation"): FixTemplate(
        before='def test():\nprint("test")',
        after='def test():\n    print("test")',
        explanation="Use 4 spaces for indentation in Python",
    ),
    (FindingType.SYNTAX, Language.PYTHON, "Missing closing parenthesis in function call"): FixTemplate(
        before='print("total", total',
        after='print("total", total)',
        explanation="Close every function call with a matching parenthesis",
    ),
    (FindingType.SYNTAX, Language.JAVA, "Missing semicolon"): FixTemplate(
        before='System.out.println("Hello World")',
        after='System.out.println("Hello World");',
        explanation=_SEMICOLON,
    ),
    (FindingType.SYNTAX, Language.JAVA, "Missing public class declaration"): FixTemplate(
        before='static void greet() {\n    System.out.println("Hello");\n}',
        after='public class Main {\n    static void greet() {\n        System.out.println("Hello");\n    }\n}',
        explanation="Wrap the code in a public class named after the source file",
    ),
    (FindingType.SYNTAX, Language.JAVA, "Missing main method"): FixTemplate(
        before="public class Main {\n}",
        after="public class Main {\n    public static void main(String[] args) {\n    }\n}",
        explanation="Add a public static void main(String[] args) entry point",
    ),
    (FindingType.SYNTAX, Language.CPP, "Missing semicolon"): FixTemplate(
        before='cout << "Hello World"',
        after='cout << "Hello World";',
        explanation=_SEMICOLON,
    ),
    (FindingType.SYNTAX, Language.CPP, "Missing iostream include"): FixTemplate(
        before='int main() {\n    cout << "Hello";\n}',
        after='#include <iostream>\n\nint main() {\n    cout << "Hello";\n}',
        explanation="Include <iostream> before using cout",
    ),
    (FindingType.SYNTAX, Language.CPP, "Missing namespace declaration"): FixTemplate(
        before='#include <iostream>\ncout << "Hello";',
        after='#include <iostream>\nusing namespace std;\ncout << "Hello";',
        explanation="Bring cout into scope with a using declaration after the includes",
    ),

    # --- runtime ---
    (FindingType.RUNTIME, Language.JAVASCRIPT, "Potential undefined variable"): FixTemplate(
        before="console.log(myVariable)",
        after='let myVariable = "value";\nconsole.log(myVariable);',
        explanation="Declare variables before using them",
    ),
    (FindingType.RUNTIME, Language.PYTHON, "Potential division by zero"): FixTemplate(
        before="result = number / divisor",
        after='if divisor != 0:\n    result = number / divisor\nelse:\n    print("Error: Division by zero")',
        explanation="Add a check for zero before division",
    ),
    (FindingType.RUNTIME, Language.JAVA, "Potential null pointer exception"): FixTemplate(
        before="object.method()",
        after="if (object != null) {\n    object.method();\n}",
        explanation="Add null check before accessing object methods",
    ),
    (FindingType.RUNTIME, Language.CPP, "Potential memory leak"): FixTemplate(
        before="int* ptr = new int(5)",
        after="int* ptr = new int(5);\n// ... use ptr ...\ndelete ptr;",
        explanation="Always free allocated memory with delete",
    ),
}
_LANGUAGE_FIXES.update(_python_colon_fixes())


# ---------------------------------------------------------------------------
# Language-agnostic templates
# ---------------------------------------------------------------------------
_GENERIC_FIXES: dict[Tuple[FindingType, str], FixTemplate] = {
    (FindingType.SYNTAX, "Unmatched curly braces"): FixTemplate(
        before="if (ready) {\n    start()\n",
        after="if (ready) {\n    start()\n}",
        explanation="Ensure all opening braces have matching closing braces",
    ),
    (FindingType.LOGICAL, "Potential infinite loop"): FixTemplate(
        before="while(true) {\n    // code\n}",
        after="let condition = true;\nwhile(condition) {\n    // code\n    condition = false; // Add termination condition\n}",
        explanation="Add a proper termination condition to the loop",
    ),
    (FindingType.LOGICAL, "Unreachable code after return statement"): FixTemplate(
        before='return value;\nconsole.log("This will never run");',
        after='console.log("This will run");\nreturn value;',
        explanation="Move the return statement to the end of the function",
    ),
    (FindingType.SECURITY, "Potential SQL injection vulnerability"): FixTemplate(
        before='query = "SELECT * FROM users WHERE id = " + userInput',
        after='const query = "SELECT * FROM users WHERE id = ?";\nconst params = [userInput];',
        explanation="Use parameterized queries to prevent SQL injection",
    ),
    (FindingType.SECURITY, "Potential XSS vulnerability"): FixTemplate(
        before="element.innerHTML = userInput",
        after="element.textContent = userInput;",
        explanation="Use textContent instead of innerHTML to prevent XSS attacks",
    ),
}


LANGUAGE_FIXES: Mapping[Tuple[FindingType, Language, str], FixTemplate] = MappingProxyType(_LANGUAGE_FIXES)
GENERIC_FIXES: Mapping[Tuple[FindingType, str], FixTemplate] = MappingProxyType(_GENERIC_FIXES)

# Placeholder "before" text for findings without a catalog entry.
FALLBACK_BEFORE = "Original code"

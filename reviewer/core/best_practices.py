"""
Best Practices
Static guidance lists keyed by language.  Unknown languages get the
javascript list.
"""
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from reviewer.core.languages import Language

DEFAULT_LANGUAGE = Language.JAVASCRIPT

BEST_PRACTICES: Mapping[Language, Tuple[str, ...]] = MappingProxyType({
    Language.JAVASCRIPT: (
        "Use const for values that won't be reassigned",
        "Use arrow functions for callbacks",
        "Implement proper error handling",
        "Use template literals for string interpolation",
        "Follow the principle of least privilege",
    ),
    Language.PYTHON: (
        "Follow PEP 8 style guide",
        "Use virtual environments",
        "Implement proper exception handling",
        "Use type hints for better code clarity",
        "Write docstrings for functions and classes",
    ),
    Language.JAVA: (
        "Follow Java naming conventions",
        "Use appropriate access modifiers",
        "Implement proper exception handling",
        "Use interfaces for abstraction",
        "Follow SOLID principles",
    ),
    Language.CPP: (
        "Use smart pointers instead of raw pointers",
        "Follow RAII principles",
        "Use const where appropriate",
        "Implement proper memory management",
        "Use modern C++ features",
    ),
})


def get_best_practices(language: Optional[Language]) -> List[str]:
    """Return a fresh copy of the guidance list for language."""
    return list(BEST_PRACTICES[language or DEFAULT_LANGUAGE])

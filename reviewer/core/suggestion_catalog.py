"""
Suggestion Catalog
==================
Fixed message + before/after example text for every improvement
suggestion.  Examples are illustrative templates; they are never derived
from the analysed code.

SUGGESTIONS[key] = SuggestionTemplate
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class SuggestionTemplate:
    message: str
    before: str
    after: str


_SUGGESTIONS: dict[str, SuggestionTemplate] = {

    # --- language-agnostic ---
    "add_comments": SuggestionTemplate(
        message="Add comments to explain complex logic and important sections",
        before="function calculateTotal(items) {\n    return items.reduce((sum, item) => sum + item.price, 0);\n}",
        after="// Calculate the total price of all items in the cart\nfunction calculateTotal(items) {\n    // Use reduce to sum up all item prices\n    return items.reduce((sum, item) => sum + item.price, 0);\n}",
    ),
    "error_handling": SuggestionTemplate(
        message="Implement proper error handling with try-catch blocks",
        before="function divide(a, b) {\n    return a / b;\n}",
        after='function divide(a, b) {\n    try {\n        if (b === 0) throw new Error("Division by zero");\n        return a / b;\n    } catch (error) {\n        console.error("Error:", error.message);\n        return null;\n    }\n}',
    ),
    "consistent_indentation": SuggestionTemplate(
        message="Use consistent indentation (either spaces or tabs, not both)",
        before='function example() {\n\tconsole.log("tab");\n  console.log("spaces");\n}',
        after='function example() {\n    console.log("consistent");\n    console.log("spaces");\n}',
    ),
    "descriptive_names": SuggestionTemplate(
        message="Use more descriptive variable names (avoid single or double letter names)",
        before="let x = 5;\nlet y = 10;\nlet z = x + y;",
        after="let firstNumber = 5;\nlet secondNumber = 10;\nlet sum = firstNumber + secondNumber;",
    ),
    "nested_loops": SuggestionTemplate(
        message="Consider optimizing nested loops for better performance",
        before="for (let i = 0; i < array.length; i++) {\n    for (let j = 0; j < array.length; j++) {\n        console.log(array[i][j]);\n    }\n}",
        after="const length = array.length;\nfor (let i = 0; i < length; i++) {\n    for (let j = 0; j < length; j++) {\n        console.log(array[i][j]);\n    }\n}",
    ),
    "dynamic_evaluation": SuggestionTemplate(
        message="Avoid using eval() or Function() constructor as they can lead to security vulnerabilities",
        before="eval(userInput);",
        after="// Use safer alternatives\nconst result = parseFloat(userInput);\nif (!isNaN(result)) {\n    // Process the number\n}",
    ),

    # --- javascript ---
    "js_var": SuggestionTemplate(
        message="Use const or let instead of var for better scoping",
        before='var counter = 0;\nvar name = "John";',
        after='const name = "John";\nlet counter = 0;',
    ),
    "js_arrow_functions": SuggestionTemplate(
        message="Consider using arrow functions for better readability",
        before="function multiply(a, b) {\n    return a * b;\n}",
        after="const multiply = (a, b) => a * b;",
    ),
    "js_strict_equality": SuggestionTemplate(
        message="Use strict equality operators (=== and !==) instead of loose equality",
        before='if (value == "5") {\n    console.log("Equal");\n}',
        after='if (value === "5") {\n    console.log("Equal");\n}',
    ),

    # --- python ---
    "py_logging": SuggestionTemplate(
        message="Consider using logging instead of print statements",
        before='print("Error occurred")',
        after='import logging\nlogging.error("Error occurred")',
    ),
    "py_globals": SuggestionTemplate(
        message="Avoid using global variables, consider passing values as parameters",
        before="global counter\ndef increment():\n    global counter\n    counter += 1",
        after="def increment(counter):\n    return counter + 1",
    ),

    # --- java ---
    "java_access_modifiers": SuggestionTemplate(
        message="Add proper access modifiers to classes and methods",
        before="class Calculator {\n    int add(int a, int b) {\n        return a + b;\n    }\n}",
        after="public class Calculator {\n    public int add(int a, int b) {\n        return a + b;\n    }\n}",
    ),

    # --- cpp ---
    "cpp_namespace_std": SuggestionTemplate(
        message="Avoid using namespace std, use specific using declarations instead",
        before='using namespace std;\ncout << "Hello";',
        after='using std::cout;\ncout << "Hello";',
    ),
}

SUGGESTIONS: Mapping[str, SuggestionTemplate] = MappingProxyType(_SUGGESTIONS)

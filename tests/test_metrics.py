"""
Unit Tests — Metrics Calculator
===============================
Threshold behaviour of the four ratings and the code-analysis counters.
"""
from reviewer.models.report import Rating
from reviewer.services.metrics import (
    calculate_complexity,
    calculate_efficiency,
    calculate_maintainability,
    calculate_readability,
    comment_ratio,
    complexity_score,
    count_comment_lines,
    count_functions,
)

_RANK = {Rating.LOW: 0, Rating.MEDIUM: 1, Rating.HIGH: 2}


# ===================================================================
# Complexity
# ===================================================================
class TestComplexity:

    def test_plain_single_line_is_low(self):
        assert complexity_score("x = 1") == 0
        assert calculate_complexity("x = 1") == Rating.LOW

    def test_counts_keywords_braces_and_paren_groups(self):
        # if + { + (x)
        assert complexity_score("if (x) {") == 3

    def test_thresholds(self):
        block = "if (x) {\n"
        assert calculate_complexity(block * 3) == Rating.LOW      # 9
        assert calculate_complexity(block * 4) == Rating.MEDIUM   # 12
        assert calculate_complexity(block * 7) == Rating.HIGH     # 21

    def test_monotonic_in_token_count(self):
        ranks = [_RANK[calculate_complexity("if (x) {\n" * n)] for n in range(12)]
        scores = [complexity_score("if (x) {\n" * n) for n in range(12)]
        assert ranks == sorted(ranks)
        assert scores == sorted(scores)


# ===================================================================
# Maintainability
# ===================================================================
class TestMaintainability:

    def test_short_lines_high(self):
        assert calculate_maintainability("a = 1\nb = 2") == Rating.HIGH

    def test_very_long_average_low(self):
        assert calculate_maintainability("a" * 120) == Rating.LOW

    def test_some_long_lines_medium(self):
        code = "\n".join(["x" * 85] * 2 + ["x"] * 8)
        assert calculate_maintainability(code) == Rating.MEDIUM


# ===================================================================
# Readability
# ===================================================================
class TestReadability:

    def test_unindented_line_low(self):
        assert calculate_readability("counter = value") == Rating.LOW

    def test_descriptive_and_indented_high(self):
        assert calculate_readability("  counter = value\n  total = counter") == Rating.HIGH

    def test_some_short_names_medium(self):
        code = "  alpha beta gamma delta epsilon zeta theta iota xy ab"
        assert calculate_readability(code) == Rating.MEDIUM

    def test_blank_lines_do_not_break_consistency(self):
        assert calculate_readability("  counter = value\n\n\tresult = counter") == Rating.HIGH


# ===================================================================
# Efficiency
# ===================================================================
class TestEfficiency:

    def test_nested_loop_low(self):
        assert calculate_efficiency("for (a) { for (b) {} }") == Rating.LOW

    def test_dense_loops_medium(self):
        assert calculate_efficiency("for x in a:\n    pass") == Rating.MEDIUM

    def test_no_loops_high(self):
        assert calculate_efficiency("x = 1") == Rating.HIGH


# ===================================================================
# Counters
# ===================================================================
class TestCounters:

    def test_comment_lines(self):
        lines = ["// a", "  # b", " * c", "/* d", "code"]
        assert count_comment_lines(lines) == 4

    def test_function_lines(self):
        lines = ["function go() {", "def run():", "class Foo:", "define = 1"]
        assert count_functions(lines) == 3

    def test_ratio(self):
        assert comment_ratio(1, 4) == 25.0

    def test_ratio_zero_lines(self):
        assert comment_ratio(0, 0) == 0.0

"""tests package"""

__description__ = """
    Tests for the edfprojects package: field extraction heuristics,
    consortium parsing, aggregation and report generation."""

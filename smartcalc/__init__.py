"""Expression evaluation, plotting data, and loan and deposit calculators."""

__version__ = "1.0.0"

__all__ = ["cli", "credit", "deposit", "evaluator", "graph", "lexer", "notation"]
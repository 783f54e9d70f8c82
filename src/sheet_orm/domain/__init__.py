"""Domain layer for the sheet query engine.

Holds the row and query value objects, the error hierarchy, and the
pure services that evaluate a query: comparator, predicate evaluator,
ordering engine and projection engine.
"""

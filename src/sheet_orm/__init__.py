"""
Sheet ORM - query a spreadsheet like a table

An in-memory query engine over a flat row-set exported from a spreadsheet:
typed where-clauses, stable multi-key ordering, pagination and projection.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"

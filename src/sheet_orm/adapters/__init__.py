"""Adapters layer - concrete implementations of ports.

Inbound adapters expose the query engine (REST API); outbound adapters
supply rows to it (in-memory list, Google Sheets CSV export).
"""

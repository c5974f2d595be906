"""Core interfaces.

Protocols implemented by the adapters, so the pipeline depends on
abstractions and can be exercised with in-memory fakes.
"""

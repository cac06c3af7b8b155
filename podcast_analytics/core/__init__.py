"""
Core domain logic.

Exceptions, identifier and URL parsing, credential primitives, analytics
views, and prompt templates. Nothing here touches the database or network.
"""

"""
Domain models package.

Pydantic request/response schemas and the podcast document model.
"""

"""
Database boundary: ORM models, CRUD singletons, and connection management.
"""

"""
Application layer: use case orchestration between the API and boundaries.
"""

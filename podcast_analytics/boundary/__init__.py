"""
Boundary layer: database persistence and external provider clients.
"""

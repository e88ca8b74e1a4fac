"""
Shared helpers for FootyCast (logging, paths).
"""

"""
FootyCast: league standings + upcoming fixtures -> AI match predictions.
"""

__version__ = "0.1.0"

"""
Data layer for FootyCast.

Includes:
- Typed models for sports-data payloads and predictions (`schema`)
- The football-data.org read client (`football_api`)
"""

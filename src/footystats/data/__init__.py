"""
Data layer for FootyStats.

Includes:
- Match record schema and validation (`schema`)
- The read-only in-memory match store (`match_store`)
"""

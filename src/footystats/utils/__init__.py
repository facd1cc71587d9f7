"""
Shared helpers for FootyStats (logging, paths, dates).
"""

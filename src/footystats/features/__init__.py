"""
Per-match features for FootyStats.

- `outcomes` derives outcome labels, team results and points from a match.
"""

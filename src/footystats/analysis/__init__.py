"""
Match analysis for FootyStats.

- `filters` evaluates filter criteria against matches.
- `statistics` computes aggregate statistics (form, head-to-head, scoring).
- `results` holds the result models returned by the engines.
"""

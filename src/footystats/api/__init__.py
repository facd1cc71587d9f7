"""
FastAPI service for FootyStats.

Exposes endpoints to:
- List and filter matches with statistics and pagination.
- Predict the outcome of a fixture from head-to-head history.
"""

"""
FootyStats: football match data API with statistics and head-to-head
predictions.
"""

__version__ = "0.1.0"

"""
Prediction for FootyStats.

- `predictor` builds head-to-head based predictions.
- `metrics` provides rounding and percentage helpers.
"""

"""
Column Builder - backtest column definition assembly

Holds a draft column definition (lag, percent change, rolling window,
formula, indicator), validates it per kind and collects accepted definitions
as tagged configuration objects for a separate backtest data pipeline.
"""

__version__ = "0.1.0"
__author__ = "Column Builder Team"

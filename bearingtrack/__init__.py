"""Bearing-only ship tracking: a radar bearing simulator and an extended Kalman filter."""

__version__ = "0.1.0"
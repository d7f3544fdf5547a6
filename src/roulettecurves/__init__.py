"""Animated roulette curves (hypotrochoids and epitrochoids) in a 3D viewport."""

__version__ = "0.1.0"

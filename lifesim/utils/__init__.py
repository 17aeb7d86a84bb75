"""Utility helpers: configuration loading and random number handling."""

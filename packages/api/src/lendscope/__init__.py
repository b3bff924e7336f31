# This project was developed with assistance from AI tools.
"""Lendscope loan comparison API."""

__version__ = "0.1.0"

"""Randomized hex board generation and a simplified Catan resource economy."""

__version__ = "0.1.0"

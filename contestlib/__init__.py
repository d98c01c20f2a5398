"""Algorithms and data structures for competitive programming: modular arithmetic,
recurrences, strings, trees, polynomials, geometry and tensors."""

__version__ = "0.1.0"
"""Data structures and routines for range queries, trees, graphs, strings and modular arithmetic."""

__version__ = "0.1.0"
"""Sorting, searching, containers, heaps, hash tables, graph and grid searches, and exercise solutions."""

__version__ = "0.1.0"
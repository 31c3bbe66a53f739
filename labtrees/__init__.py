"""Graphs, binary trees, heaps, expression trees and record files with simple Python interfaces."""

__version__ = "0.1.0"
__all__ = ["bst", "expression", "graph", "heap", "records", "trees"]
"""Classic algorithms and data structures in plain Python: sorting, searching,
bits, heaps, backtracking, graphs, trees, greedy and dynamic programming."""

__version__ = "0.1.0"
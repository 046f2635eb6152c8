"""Classic algorithm and data-structure exercises: DP, search, lists, trees, strings, arrays, graphs, bits and containers."""

__version__ = "0.1.0"
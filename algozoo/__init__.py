"""Classic algorithms: sorting, searching, graphs, dynamic programming, RSA and numerics."""

__version__ = "0.1.0"
"""Classic algorithms: sorting, graph algorithms, knapsack and backtracking
searches, small string and list problems, and a command-line front end."""

__version__ = "0.1.0"

__all__ = ["__version__"]
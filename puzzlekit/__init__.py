"""Solutions to classic algorithmic puzzles on arrays, strings, grids and graphs."""

__version__ = "0.1.0"

__all__ = ["arrays", "containers", "dynamic", "graphs", "grids", "islands", "text"]
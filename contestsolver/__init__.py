"""Solutions to classic beginner programming-contest problems, as plain functions."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "sequences", "grids", "text"]
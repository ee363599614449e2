"""Complex numbers and loading of complex-valued matrices from text files."""

__version__ = "0.1.0"

__all__ = ["complex_num", "loader"]
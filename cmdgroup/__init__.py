"""Store shell commands in named groups in SQLite and run them by name."""

__version__ = "0.1.0"
__all__ = ["__version__"]
"""printf-style formatting, C string helpers and a coloured level logger."""

__version__ = "0.1.0"

__all__ = ["conversion", "cstring", "formatspec", "formatter", "log"]
"""Block-world title, loading and game screens built on pygame."""

__version__ = "1.0.0"
__all__ = ["__version__"]
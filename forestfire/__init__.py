"""Terminal forest fire simulator: trees, tiles, forest generation and fire spread."""

__version__ = "0.1.0"
__all__ = ["__version__"]
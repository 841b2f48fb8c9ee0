"""CLI package for lptex tools."""

__all__ = ["render"]

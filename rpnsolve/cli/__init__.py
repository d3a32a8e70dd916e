"""CLI package for rpnsolve tools."""

__all__ = ["solve", "validate"]

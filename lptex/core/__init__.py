"""Core data types for lptex."""

from lptex.core.errors import DimensionMismatch, LPParseError, LptexError
from lptex.core.models import LinearSystem, dump_system, load_system
from lptex.core.options import RenderOptions

__all__ = [
    "DimensionMismatch",
    "LPParseError",
    "LinearSystem",
    "LptexError",
    "RenderOptions",
    "dump_system",
    "load_system",
]

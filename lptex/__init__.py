"""Render linear-programming systems as LaTeX documents."""

from lptex.core.errors import DimensionMismatch, LPParseError, LptexError
from lptex.core.models import LinearSystem, load_system
from lptex.core.options import RenderOptions
from lptex.latex.document import render_document
from lptex.render.tex import write_tex

__all__ = [
    "DimensionMismatch",
    "LPParseError",
    "LinearSystem",
    "LptexError",
    "RenderOptions",
    "load_system",
    "render_document",
    "write_tex",
]

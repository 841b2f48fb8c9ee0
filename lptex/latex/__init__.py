"""LaTeX rendering for linear systems."""

from lptex.latex.document import EPILOGUE, PREAMBLE, format_system, render_body, render_document
from lptex.latex.expression import (
    constraint_row_cells,
    expression_tokens,
    format_number,
    render_constraint_row,
    render_expression,
    render_objective_header,
)

__all__ = [
    "EPILOGUE",
    "PREAMBLE",
    "constraint_row_cells",
    "expression_tokens",
    "format_number",
    "format_system",
    "render_body",
    "render_constraint_row",
    "render_document",
    "render_expression",
    "render_objective_header",
]

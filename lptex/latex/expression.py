"""Sign and sparsity aware LaTeX rendering of linear expressions."""

from __future__ import annotations

from collections.abc import Sequence

from lptex.core.errors import DimensionMismatch
from lptex.core.options import RenderOptions


_DEFAULT_OPTIONS = RenderOptions()
_ROW_BREAK = "\\\\"


def format_number(value: float, options: RenderOptions = _DEFAULT_OPTIONS) -> str:
    """Format a coefficient in shortest general form (``2``, ``5.6``, ``1e-07``)."""

    return format(float(value), options.number_format)


def variable_token(index: int, options: RenderOptions = _DEFAULT_OPTIONS) -> str:
    return f"{options.variable_name}_{{{index}}}"


def expression_tokens(
    values: Sequence[float],
    options: RenderOptions = _DEFAULT_OPTIONS,
) -> list[str]:
    """Tokenize ``sum values[i] * x_i`` with zero and unit elision.

    Position 0 is the leading term and never gets a ``+`` separator.
    """

    tokens: list[str] = []
    for index, value in enumerate(values):
        if value == 0:
            continue
        leading = index == 0
        if value == 1:
            if not leading:
                tokens.append("+")
        elif value == -1:
            tokens.append("-")
        else:
            if value > 0 and not leading:
                tokens.append("+")
            tokens.append(format_number(value, options))
        tokens.append(variable_token(index, options))
    return tokens


def render_expression(
    values: Sequence[float],
    options: RenderOptions = _DEFAULT_OPTIONS,
) -> str:
    """Render a linear expression, e.g. ``[2, 0, -1]`` -> ``2x_{0}-x_{2}``."""

    return "".join(expression_tokens(values, options))


def render_objective_header(
    objective: Sequence[float],
    options: RenderOptions = _DEFAULT_OPTIONS,
) -> str:
    """Render the ``Maximize`` line and open the constraint array."""

    columns = "c" * (3 * len(objective))
    lines = [
        f"Maximize $ {render_expression(objective, options)} $ such that : $ {_ROW_BREAK}",
        "\\left\\{",
        f"\\begin{{array}}{{{columns}}}",
    ]
    return "\n".join(lines) + "\n"


def constraint_row_cells(
    objective: Sequence[float],
    row: Sequence[float],
    options: RenderOptions = _DEFAULT_OPTIONS,
) -> list[str]:
    """Return the ``3 * n`` alignment cells of one constraint row.

    Each variable slot is a sign cell, a coefficient cell and a variable cell.
    Slots past position 0 where the objective coefficient is zero stay blank
    whatever the row holds there, so every row lines up with the objective.
    A zero row coefficient blanks its slot at every position, position 0
    included, instead of printing a bare variable.
    """

    if len(row) != len(objective):
        raise DimensionMismatch(
            f"constraint row has {len(row)} coefficients",
            expected=len(objective),
            actual=len(row),
        )

    cells: list[str] = []
    for index, value in enumerate(row):
        if (index > 0 and objective[index] == 0) or value == 0:
            cells.extend(["", "", ""])
            continue
        if value < 0:
            sign = "-"
        elif index > 0:
            sign = "+"
        else:
            sign = ""
        magnitude = abs(value)
        coefficient = "" if magnitude == 1 else format_number(magnitude, options)
        cells.extend([sign, coefficient, variable_token(index, options)])
    return cells


def render_constraint_row(
    objective: Sequence[float],
    row: Sequence[float],
    options: RenderOptions = _DEFAULT_OPTIONS,
) -> str:
    """Render one array row terminated by a LaTeX row break."""

    cells = constraint_row_cells(objective, row, options)
    return " & ".join(cells) + f" {_ROW_BREAK}\n"


def render_array_footer() -> str:
    return "\\end{array}\n\\right.\n$\n"

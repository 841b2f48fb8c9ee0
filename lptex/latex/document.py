"""Full LaTeX document assembly for linear systems."""

from __future__ import annotations

from collections.abc import Sequence

from lptex.core.models import LinearSystem
from lptex.core.options import RenderOptions
from lptex.latex.expression import (
    render_array_footer,
    render_constraint_row,
    render_objective_header,
)


PREAMBLE_PACKAGES = (
    "\\usepackage[latin1]{inputenc}",
    "\\usepackage[T1]{fontenc}",
    "\\usepackage[french]{babel}",
    "\\usepackage{setspace}",
    "\\usepackage{lmodern}",
    "\\usepackage{soul}",
    "\\usepackage{ulem}",
    "\\usepackage{enumerate}",
    "\\usepackage{amsmath,amsfonts, amssymb}",
    "\\usepackage{mathrsfs}",
    "\\usepackage{amsthm}",
    "\\usepackage{float}",
    "\\usepackage{array}",
    "\\usepackage{mathabx}",
    "\\usepackage{stmaryrd}",
)

PREAMBLE = (
    "\\documentclass[10pt]{article}\n"
    + "\n".join(PREAMBLE_PACKAGES)
    + "\n\n\\begin{document}\n"
)

EPILOGUE = "\\end{document}\n"


def render_body(system: LinearSystem, options: RenderOptions | None = None) -> str:
    """Render the objective line and the constraint array of ``system``."""

    opts = options or RenderOptions()
    rows = system.rows()
    parts = [render_objective_header(system.objective, opts)]
    parts.extend(render_constraint_row(system.objective, row, opts) for row in rows)
    parts.append(render_array_footer())
    return "".join(parts)


def format_system(
    objective: Sequence[float],
    matrix: Sequence[float],
    rhs: Sequence[float],
    *,
    options: RenderOptions | None = None,
) -> str:
    """Render the body for raw objective, flat matrix and rhs vectors."""

    system = LinearSystem(objective=list(objective), matrix=list(matrix), rhs=list(rhs))
    return render_body(system, options)


def render_document(system: LinearSystem, options: RenderOptions | None = None) -> str:
    """Render preamble, body and epilogue into one LaTeX source string."""

    body = render_body(system, options)
    return PREAMBLE + body + EPILOGUE

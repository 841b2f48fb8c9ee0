from __future__ import annotations

import pytest

from lptex.core.errors import DimensionMismatch
from lptex.core.options import RenderOptions
from lptex.latex.expression import (
    constraint_row_cells,
    expression_tokens,
    format_number,
    render_constraint_row,
    render_expression,
    render_objective_header,
)


VECTORS = [
    [2.0, 0.0, -1.0],
    [1.0, 1.0],
    [-1.0, 3.0, -2.5, 0.0, 1.0],
    [0.0, 4.0, 0.0],
    [0.0, 0.0, 0.0],
    [7.25],
    [-1.0, -1.0, 1.0, 12.0],
]


def test_render_expression_skips_zero_and_unit_literals() -> None:
    assert render_expression([2, 0, -1]) == "2x_{0}-x_{2}"


def test_render_expression_unit_coefficients() -> None:
    assert render_expression([1, 1]) == "x_{0}+x_{1}"
    assert render_expression([-1, -1]) == "-x_{0}-x_{1}"


def test_render_expression_mixed_signs() -> None:
    assert render_expression([-1, 3, -2.5]) == "-x_{0}+3x_{1}-2.5x_{2}"


def test_render_expression_all_zero_is_empty() -> None:
    assert render_expression([0, 0, 0]) == ""


def test_render_expression_leading_zero_keeps_separator_on_next_term() -> None:
    assert render_expression([0, 4]) == "+4x_{1}"


def test_expression_tokens_layout() -> None:
    assert expression_tokens([2, 5, -1, -3]) == [
        "2",
        "x_{0}",
        "+",
        "5",
        "x_{1}",
        "-",
        "x_{2}",
        "-3",
        "x_{3}",
    ]


@pytest.mark.parametrize("values", VECTORS)
def test_zero_coefficient_never_yields_variable(values: list[float]) -> None:
    tokens = expression_tokens(values)
    for index, value in enumerate(values):
        if value == 0:
            assert f"x_{{{index}}}" not in tokens


@pytest.mark.parametrize("values", VECTORS)
def test_unit_coefficients_have_no_literal(values: list[float]) -> None:
    tokens = expression_tokens(values)
    assert "1" not in tokens
    assert "-1" not in tokens
    for index, value in enumerate(values):
        if value not in (1, -1):
            continue
        position = tokens.index(f"x_{{{index}}}")
        if value == -1:
            assert tokens[position - 1] == "-"
        elif index == 0:
            assert position == 0
        else:
            assert tokens[position - 1] == "+"


@pytest.mark.parametrize("values", VECTORS)
def test_leading_term_has_no_plus(values: list[float]) -> None:
    tokens = expression_tokens(values)
    if values and values[0] != 0:
        assert tokens[0] != "+"


@pytest.mark.parametrize("values", VECTORS)
def test_positive_literals_past_leading_are_preceded_by_plus(values: list[float]) -> None:
    tokens = expression_tokens(values)
    for index, value in enumerate(values):
        if index == 0 or value <= 0 or value == 1:
            continue
        position = tokens.index(f"x_{{{index}}}")
        assert tokens[position - 1] == format_number(value)
        assert tokens[position - 2] == "+"


def test_format_number_general_form() -> None:
    assert format_number(2.0) == "2"
    assert format_number(5.6) == "5.6"
    assert format_number(-8.9) == "-8.9"
    assert format_number(1e-7) == "1e-07"
    assert format_number(1234567.0) == "1.23457e+06"


def test_variable_name_option() -> None:
    options = RenderOptions(variable_name="y")
    assert render_expression([1, -2], options) == "y_{0}-2y_{1}"


def test_objective_header_all_zero() -> None:
    header = render_objective_header([0, 0, 0])
    assert header == (
        "Maximize $  $ such that : $ \\\\\n"
        "\\left\\{\n"
        "\\begin{array}{ccccccccc}\n"
    )


def test_objective_header_column_count() -> None:
    header = render_objective_header([2, 0, -1, 4])
    assert "\\begin{array}{" + "c" * 12 + "}" in header
    assert header.startswith("Maximize $ 2x_{0}-x_{2}+4x_{3} $ such that : $ ")


def test_row_cells_unit_and_negative() -> None:
    cells = constraint_row_cells([1, 1], [3, -1])
    assert cells == ["", "3", "x_{0}", "-", "", "x_{1}"]
    assert "1" not in cells


def test_row_rendering_layout() -> None:
    row = render_constraint_row([1, 1], [3, -1])
    assert row == " & 3 & x_{0} & - &  & x_{1} \\\\\n"


def test_row_cells_gated_by_objective_sparsity() -> None:
    cells = constraint_row_cells([1, 0, 2], [1, 5, -1])
    assert cells == ["", "", "x_{0}", "", "", "", "-", "", "x_{2}"]


def test_row_cells_position_zero_is_never_gated() -> None:
    cells = constraint_row_cells([0, 1], [2, 1])
    assert cells == ["", "2", "x_{0}", "+", "", "x_{1}"]


def test_row_cells_negative_leading_uses_absolute_value() -> None:
    cells = constraint_row_cells([1, 1], [-4.5, 2])
    assert cells == ["-", "4.5", "x_{0}", "+", "2", "x_{1}"]


def test_row_cells_zero_entries_are_blank() -> None:
    cells = constraint_row_cells([1, 1], [0, 7])
    assert cells == ["", "", "", "+", "7", "x_{1}"]


@pytest.mark.parametrize(
    ("objective", "row"),
    [
        ([1, 0, 2], [1, 5, -1]),
        ([0, 0, 0], [1, 2, 3]),
        ([1, 1, 1, 1], [0, 0, 0, 0]),
        ([5], [-1]),
        ([2, 0, -1], [-3, 4, 1.5]),
    ],
)
def test_row_cell_count_matches_array_columns(objective: list[float], row: list[float]) -> None:
    assert len(constraint_row_cells(objective, row)) == 3 * len(objective)
    rendered = render_constraint_row(objective, row)
    assert rendered.count("&") == 3 * len(objective) - 1
    assert rendered.endswith(" \\\\\n")


def test_row_length_mismatch_raises() -> None:
    with pytest.raises(DimensionMismatch) as excinfo:
        constraint_row_cells([1, 2, 3], [1, 2])
    assert excinfo.value.expected == 3
    assert excinfo.value.actual == 2

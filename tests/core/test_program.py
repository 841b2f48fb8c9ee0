from __future__ import annotations

import pytest
from pydantic import ValidationError

from lptex.core.errors import LPParseError
from lptex.core.program import Bound, Constraint, GoalKind, LinearProgram, Relation, Term


def _term(coefficient: float, variable: str) -> Term:
    return Term(coefficient=coefficient, variable=variable)


def test_to_system_normalizes_relations_and_bounds() -> None:
    program = LinearProgram(
        goal=GoalKind.MAXIMIZE,
        objective=[_term(3, "x"), _term(2, "y"), _term(-1, "z")],
        constraints=[
            Constraint(terms=[_term(1, "x"), _term(1, "y")], relation=Relation.LE, rhs=4),
            Constraint(terms=[_term(1, "x"), _term(-1, "z")], relation=Relation.GE, rhs=-2),
            Constraint(terms=[_term(1, "y")], relation=Relation.EQ, rhs=1),
        ],
        bounds=[
            Bound(variable="x", lower=0, upper=10),
            Bound(variable="z", lower=1),
        ],
        variables=["x", "y", "z"],
    )

    system = program.to_system()

    assert system.objective == [3.0, 2.0, -1.0]
    assert system.rows() == [
        [1.0, 1.0, 0.0],
        [-1.0, 0.0, 1.0],
        [0.0, 1.0, 0.0],
        [0.0, -1.0, 0.0],
        [1.0, 0.0, 0.0],
        [0.0, 0.0, -1.0],
    ]
    assert system.rhs == [4.0, 2.0, 1.0, -1.0, 10.0, -1.0]


def test_minimize_negates_objective() -> None:
    program = LinearProgram(
        goal=GoalKind.MINIMIZE,
        objective=[_term(1, "a"), _term(-2, "b")],
    )
    assert program.to_system().objective == [-1.0, 2.0]


def test_variable_order_defaults_to_first_appearance() -> None:
    program = LinearProgram(
        goal=GoalKind.MAXIMIZE,
        objective=[_term(1, "y")],
        constraints=[Constraint(terms=[_term(1, "x")], relation=Relation.LE, rhs=1)],
    )
    assert program.variable_order() == ["y", "x"]
    assert program.to_system().rows() == [[0.0, 1.0]]


def test_repeated_terms_are_summed() -> None:
    program = LinearProgram(
        goal=GoalKind.MAXIMIZE,
        objective=[_term(1, "x"), _term(2, "x")],
    )
    assert program.to_system().objective == [3.0]


def test_undeclared_variable_raises() -> None:
    program = LinearProgram(
        goal=GoalKind.MAXIMIZE,
        objective=[_term(1, "x"), _term(1, "y")],
        variables=["x"],
    )
    with pytest.raises(LPParseError, match="undeclared variable 'y'"):
        program.to_system()


def test_duplicate_declared_variables_rejected() -> None:
    with pytest.raises(ValidationError):
        LinearProgram(goal=GoalKind.MAXIMIZE, objective=[_term(1, "x")], variables=["x", "x"])


def test_bound_order_validated() -> None:
    with pytest.raises(ValidationError):
        Bound(variable="x", lower=3, upper=1)

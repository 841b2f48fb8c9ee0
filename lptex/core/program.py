"""Pydantic models for LP programs read from text."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from lptex.core.errors import LPParseError
from lptex.core.models import LinearSystem


class GoalKind(str, Enum):
    """Optimization direction."""

    MAXIMIZE = "maximize"
    MINIMIZE = "minimize"


class Relation(str, Enum):
    """Constraint comparison."""

    LE = "<="
    GE = ">="
    EQ = "="


class Term(BaseModel):
    """Coefficient times a named variable."""

    coefficient: float
    variable: str = Field(min_length=1)


class Constraint(BaseModel):
    """Linear constraint ``sum(terms) <relation> rhs``."""

    terms: list[Term] = Field(min_length=1)
    relation: Relation
    rhs: float


class Bound(BaseModel):
    """Box bound on a single variable."""

    variable: str = Field(min_length=1)
    lower: float | None = None
    upper: float | None = None

    @model_validator(mode="after")
    def _validate_order(self) -> "Bound":
        if self.lower is not None and self.upper is not None and self.lower > self.upper:
            raise ValueError("Bound.lower must be <= Bound.upper")
        return self


class LinearProgram(BaseModel):
    """LP program with named variables, as written in LP text."""

    goal: GoalKind
    objective: list[Term]
    constraints: list[Constraint] = Field(default_factory=list)
    bounds: list[Bound] = Field(default_factory=list)
    variables: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_variables(self) -> "LinearProgram":
        if len(self.variables) != len(set(self.variables)):
            raise ValueError("Declared variables must be unique")
        return self

    def _referenced(self) -> list[str]:
        names: list[str] = [term.variable for term in self.objective]
        for constraint in self.constraints:
            names.extend(term.variable for term in constraint.terms)
        names.extend(bound.variable for bound in self.bounds)
        return names

    def variable_order(self) -> list[str]:
        """Declared variables, or every referenced name in first-seen order."""

        if self.variables:
            return list(self.variables)
        return list(dict.fromkeys(self._referenced()))

    def to_system(self) -> LinearSystem:
        """Convert to a dense ``maximize c.x subject to A x <= b`` system.

        Minimize goals negate the objective, ``>=`` rows are negated and ``=``
        rows are split in two. Upper bounds and nonzero lower bounds become
        extra rows; a lower bound of zero is implicit.
        """

        order = self.variable_order()
        index = {name: i for i, name in enumerate(order)}

        def dense(terms: list[Term]) -> list[float]:
            values = [0.0] * len(order)
            for term in terms:
                if term.variable not in index:
                    raise LPParseError(f"undeclared variable {term.variable!r}")
                values[index[term.variable]] += term.coefficient
            return values

        def unit(name: str, scale: float) -> list[float]:
            if name not in index:
                raise LPParseError(f"undeclared variable {name!r}")
            values = [0.0] * len(order)
            values[index[name]] = scale
            return values

        objective = dense(self.objective)
        if self.goal == GoalKind.MINIMIZE:
            objective = [-value for value in objective]

        rows: list[list[float]] = []
        rhs: list[float] = []
        for constraint in self.constraints:
            coeffs = dense(constraint.terms)
            if constraint.relation in (Relation.LE, Relation.EQ):
                rows.append(coeffs)
                rhs.append(constraint.rhs)
            if constraint.relation in (Relation.GE, Relation.EQ):
                rows.append([-value for value in coeffs])
                rhs.append(-constraint.rhs)

        for bound in self.bounds:
            if bound.upper is not None:
                rows.append(unit(bound.variable, 1.0))
                rhs.append(bound.upper)
            if bound.lower is not None and bound.lower != 0:
                rows.append(unit(bound.variable, -1.0))
                rhs.append(-bound.lower)

        return LinearSystem.from_rows(objective, rows, rhs)

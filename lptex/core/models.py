"""Pydantic models for linear systems."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from lptex.core.errors import DimensionMismatch


class LinearSystem(BaseModel):
    """Objective vector, flat row-major constraint matrix and right-hand side.

    Row ``i`` of the matrix occupies ``matrix[i * n : i * n + n]`` where ``n``
    is the objective length. Only the length of ``rhs`` is used when
    rendering: it fixes the number of constraint rows.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    objective: list[float]
    matrix: list[float] = Field(default_factory=list)
    rhs: list[float] = Field(default_factory=list)

    @classmethod
    def from_rows(
        cls,
        objective: list[float],
        rows: list[list[float]],
        rhs: list[float],
    ) -> "LinearSystem":
        """Build a system from nested constraint rows."""

        n = len(objective)
        flat: list[float] = []
        for index, row in enumerate(rows):
            if len(row) != n:
                raise DimensionMismatch(
                    f"constraint row {index} has {len(row)} coefficients",
                    expected=n,
                    actual=len(row),
                )
            flat.extend(row)
        return cls(objective=list(objective), matrix=flat, rhs=list(rhs))

    @property
    def n_vars(self) -> int:
        return len(self.objective)

    @property
    def n_constraints(self) -> int:
        return len(self.rhs)

    def check_dimensions(self) -> None:
        """Raise DimensionMismatch unless ``|A| == |B| * |C|`` with ``|C| > 0``."""

        n = self.n_vars
        size = len(self.matrix)
        if n == 0:
            raise DimensionMismatch("objective vector is empty", expected=None, actual=0)
        if size % n != 0:
            raise DimensionMismatch(
                f"matrix length {size} is not a multiple of objective length {n}",
                expected=self.n_constraints * n,
                actual=size,
            )
        if size != self.n_constraints * n:
            raise DimensionMismatch(
                f"matrix has {size // n} rows but rhs has {self.n_constraints} entries",
                expected=self.n_constraints * n,
                actual=size,
            )

    def rows(self) -> list[list[float]]:
        """Return the constraint rows after checking dimensions."""

        self.check_dimensions()
        n = self.n_vars
        return [self.matrix[i * n : i * n + n] for i in range(self.n_constraints)]


def system_from_payload(payload: dict) -> LinearSystem:
    """Validate a JSON payload holding either ``matrix`` or nested ``rows``."""

    if "rows" in payload:
        if "matrix" in payload:
            raise ValueError("payload must hold either 'matrix' or 'rows', not both")
        data = dict(payload)
        rows = data.pop("rows")
        base = LinearSystem.model_validate({**data, "matrix": []})
        return LinearSystem.from_rows(base.objective, rows, base.rhs)
    return LinearSystem.model_validate(payload)


def load_system(path: str) -> LinearSystem:
    """Load a linear system from a JSON file."""

    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    return system_from_payload(payload)


def dump_system(system: LinearSystem, path: str) -> None:
    """Write a linear system to a JSON file."""

    payload = system.model_dump()
    Path(path).write_text(json.dumps(payload, indent=2), encoding="utf-8")

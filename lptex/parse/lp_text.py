"""Tokenizer and recursive-descent parser for LP text files.

Layout::

    MAXIMIZE 3 x + 2 * y
    SUBJECT TO
      x + y <= 4
    BOUNDS
      0 <= x <= 10
    VARIABLES
      x y
"""

from __future__ import annotations

from pathlib import Path

from lptex.core.errors import LPParseError
from lptex.core.program import Bound, Constraint, GoalKind, LinearProgram, Relation, Term


_SEPARATORS = {"+", "-", "*", "<", ">", "="}
_RELATIONS = {"<=": Relation.LE, ">=": Relation.GE, "=": Relation.EQ}
_GOALS = {"MAXIMIZE": GoalKind.MAXIMIZE, "MINIMIZE": GoalKind.MINIMIZE}
_SECTION_KEYWORDS = {"SUBJECT", "BOUNDS", "VARIABLES"}


def tokenize_lp(text: str) -> list[str]:
    """Split LP text into numbers, names, signs and comparison operators."""

    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch.isspace():
            i += 1
            continue
        if ch in "<>" and i + 1 < n and text[i + 1] == "=":
            out.append(text[i : i + 2])
            i += 2
            continue
        if ch in _SEPARATORS:
            out.append(ch)
            i += 1
            continue
        if ch.isdigit() or ch == ".":
            j = i + 1
            while j < n and (text[j].isdigit() or text[j] == "."):
                j += 1
            out.append(text[i:j])
            i = j
            continue
        j = i + 1
        while j < n and not text[j].isspace() and text[j] not in _SEPARATORS:
            j += 1
        out.append(text[i:j])
        i = j
    return out


def _is_number(token: str | None) -> bool:
    return token is not None and (token[0].isdigit() or token[0] == ".")


def _is_name(token: str | None) -> bool:
    return (
        token is not None
        and token not in _SEPARATORS
        and token not in _RELATIONS
        and not _is_number(token)
    )


class _Parser:
    def __init__(self, tokens: list[str]) -> None:
        self.tokens = tokens
        self.i = 0

    def _peek(self) -> str | None:
        return self.tokens[self.i] if self.i < len(self.tokens) else None

    def _pop(self) -> str | None:
        tok = self._peek()
        if tok is not None:
            self.i += 1
        return tok

    def _eat(self, token: str) -> bool:
        if self._peek() == token:
            self.i += 1
            return True
        return False

    def _fail(self, message: str) -> LPParseError:
        return LPParseError(message, position=self.i)

    def _expect(self, token: str) -> None:
        if not self._eat(token):
            raise self._fail(f"expected {token!r}, found {self._peek()!r}")

    def parse(self) -> LinearProgram:
        goal_token = self._pop()
        if goal_token not in _GOALS:
            raise LPParseError(
                "input must begin with MAXIMIZE or MINIMIZE", position=0
            )
        objective = self._parse_sum()
        if not objective:
            raise self._fail("empty objective")

        constraints: list[Constraint] = []
        if self._eat("SUBJECT"):
            self._expect("TO")
            while self._peek() not in (None, "BOUNDS", "VARIABLES"):
                constraints.append(self._parse_constraint())

        bounds: list[Bound] = []
        if self._eat("BOUNDS"):
            while self._peek() not in (None, "VARIABLES"):
                bounds.append(self._parse_bound())

        variables: list[str] = []
        if self._eat("VARIABLES"):
            while self._peek() is not None:
                name = self._parse_name()
                if name in variables:
                    raise self._fail(f"variable {name!r} declared twice")
                variables.append(name)

        if self._peek() is not None:
            raise self._fail(f"unexpected token {self._peek()!r}")

        return LinearProgram(
            goal=_GOALS[goal_token],
            objective=objective,
            constraints=constraints,
            bounds=bounds,
            variables=variables,
        )

    def _parse_name(self) -> str:
        tok = self._peek()
        if not _is_name(tok) or tok in _SECTION_KEYWORDS:
            raise self._fail(f"expected a variable name, found {tok!r}")
        self.i += 1
        return tok

    def _parse_number(self) -> float:
        tok = self._peek()
        if not _is_number(tok):
            raise self._fail(f"expected a number, found {tok!r}")
        try:
            value = float(tok)
        except ValueError:
            raise self._fail(f"malformed number {tok!r}") from None
        self.i += 1
        return value

    def _parse_signed_number(self) -> float:
        if self._eat("-"):
            return -self._parse_number()
        self._eat("+")
        return self._parse_number()

    def _parse_product(self) -> tuple[float, str] | None:
        tok = self._peek()
        if _is_number(tok):
            value = self._parse_number()
            self._eat("*")
            return value, self._parse_name()
        if _is_name(tok) and tok not in _SECTION_KEYWORDS:
            self.i += 1
            return 1.0, tok
        return None

    def _parse_sum(self) -> list[Term]:
        terms: list[Term] = []
        sign = -1.0 if self._eat("-") else 1.0
        if sign > 0:
            self._eat("+")
        while True:
            product = self._parse_product()
            if product is None:
                if terms or sign < 0:
                    raise self._fail("dangling sign in expression")
                break
            value, name = product
            terms.append(Term(coefficient=sign * value, variable=name))
            if self._eat("-"):
                sign = -1.0
            elif self._eat("+"):
                sign = 1.0
            else:
                break
        return terms

    def _parse_relation(self) -> Relation:
        tok = self._pop()
        if tok not in _RELATIONS:
            raise self._fail(f"expected '<=', '>=' or '=', found {tok!r}")
        return _RELATIONS[tok]

    def _parse_constraint(self) -> Constraint:
        terms = self._parse_sum()
        if not terms:
            raise self._fail(f"expected a constraint, found {self._peek()!r}")
        relation = self._parse_relation()
        rhs = self._parse_signed_number()
        return Constraint(terms=terms, relation=relation, rhs=rhs)

    def _parse_bound(self) -> Bound:
        tok = self._peek()
        if _is_number(tok) or tok in ("+", "-"):
            lower = self._parse_signed_number()
            if self._peek() != "<=":
                raise self._fail("double bounds must read 'lower <= name <= upper'")
            self.i += 1
            name = self._parse_name()
            self._expect("<=")
            upper = self._parse_signed_number()
            return self._make_bound(name, lower=lower, upper=upper)

        name = self._parse_name()
        relation = self._parse_relation()
        value = self._parse_signed_number()
        if relation == Relation.LE:
            return self._make_bound(name, upper=value)
        if relation == Relation.GE:
            return self._make_bound(name, lower=value)
        return self._make_bound(name, lower=value, upper=value)

    def _make_bound(
        self,
        name: str,
        *,
        lower: float | None = None,
        upper: float | None = None,
    ) -> Bound:
        if lower is not None and upper is not None and lower > upper:
            raise self._fail(f"empty bound on {name!r}: {lower} > {upper}")
        return Bound(variable=name, lower=lower, upper=upper)


def parse_lp(text: str) -> LinearProgram:
    """Parse LP text into a LinearProgram."""

    return _Parser(tokenize_lp(text)).parse()


def load_lp(path: str) -> LinearProgram:
    """Read and parse an LP text file."""

    return parse_lp(Path(path).read_text(encoding="utf-8"))

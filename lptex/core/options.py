"""Rendering options."""

from __future__ import annotations

from dataclasses import dataclass


# Matches the inputenc option declared in the preamble.
TEX_ENCODING = "latin-1"


@dataclass(frozen=True)
class RenderOptions:
    """Knobs for LaTeX rendering of a linear system."""

    variable_name: str = "x"
    number_format: str = "g"

    def __post_init__(self) -> None:
        if not self.variable_name:
            raise ValueError("variable_name must be a non-empty string")
        try:
            self.variable_name.encode(TEX_ENCODING)
        except UnicodeEncodeError:
            raise ValueError(
                f"variable_name {self.variable_name!r} is not {TEX_ENCODING} "
                "LaTeX source; use a macro such as '\\xi'"
            ) from None

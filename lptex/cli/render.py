"""Render an LP system (JSON or LP text) into a LaTeX document."""

from __future__ import annotations

import argparse
from pathlib import Path

from lptex.core.models import LinearSystem, load_system
from lptex.core.options import RenderOptions
from lptex.latex.document import render_document
from lptex.parse.lp_text import load_lp
from lptex.render.tex import DEFAULT_OUT_NAME, write_tex
from lptex.trace import TraceLogger


class _SafeTraceLogger:
    """Trace logger wrapper whose failures never abort a render."""

    def __init__(self, path: Path) -> None:
        self._logger: TraceLogger | None = None
        try:
            self._logger = TraceLogger(path)
        except Exception as exc:
            print(f"WARNING: trace disabled: {exc}")

    def event(self, kind: str, message: str, *, data: dict | None = None) -> None:
        if self._logger is None:
            return
        try:
            self._logger.event(kind, message, data=data)
        except Exception as exc:
            print(f"WARNING: trace append failed: {exc}")

    def close(self) -> None:
        if self._logger is None:
            return
        try:
            self._logger.close()
        except Exception as exc:
            print(f"WARNING: trace close failed: {exc}")


def _resolve_format(path: Path, requested: str) -> str:
    if requested != "auto":
        return requested
    return "json" if path.suffix.lower() == ".json" else "lp"


def load_input(path: str, input_format: str = "auto") -> LinearSystem:
    """Load a LinearSystem from JSON or LP text, picking by suffix on ``auto``."""

    in_path = Path(path)
    if _resolve_format(in_path, input_format) == "json":
        return load_system(str(in_path))
    return load_lp(str(in_path)).to_system()


def main(argv: list[str] | None = None) -> int:
    """Run the LaTeX render CLI."""

    parser = argparse.ArgumentParser(description="Render an LP system as a LaTeX document.")
    parser.add_argument("path", help="Path to a system JSON file or an LP text file.")
    parser.add_argument(
        "--out",
        default=DEFAULT_OUT_NAME,
        help=f"Output .tex path (default: {DEFAULT_OUT_NAME}).",
    )
    parser.add_argument(
        "--format",
        dest="input_format",
        choices=["auto", "json", "lp"],
        default="auto",
        help="Input format (default: auto, .json is JSON, anything else LP text).",
    )
    parser.add_argument(
        "--var-name",
        default="x",
        help=(
            "Variable symbol used in the output, as latin-1 LaTeX source "
            "(e.g. \\xi; default: x)."
        ),
    )
    parser.add_argument("--trace", help="Optional JSONL trace output path.")
    parser.add_argument(
        "--print",
        dest="print_tex",
        action="store_true",
        help="Also print the LaTeX document to stdout.",
    )
    args = parser.parse_args(argv)
    trace: _SafeTraceLogger | None = None

    try:
        if args.trace:
            trace = _SafeTraceLogger(Path(args.trace))
        if trace is not None:
            trace.event(
                "note",
                "start: read input",
                data={"source_path": args.path, "format": args.input_format},
            )
        options = RenderOptions(variable_name=args.var_name)
        system = load_input(args.path, args.input_format)
        out_path = write_tex(system, args.out, options=options, trace=trace)
        if args.print_tex:
            print(render_document(system, options), end="")
        print(f"OK: {Path(args.path).stem} -> {out_path}")
        return 0
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        if trace is not None:
            trace.event("error", "render failed", data={"error": str(exc)})
        print(f"ERROR: {exc}")
        return 1
    finally:
        if trace is not None:
            trace.close()


if __name__ == "__main__":
    raise SystemExit(main())

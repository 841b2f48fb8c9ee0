"""Atomic writer for rendered LaTeX documents."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Protocol

from lptex.core.errors import DimensionMismatch
from lptex.core.models import LinearSystem
from lptex.core.options import TEX_ENCODING, RenderOptions
from lptex.latex.document import render_document


DEFAULT_OUT_NAME = "result.tex"


class TraceSink(Protocol):
    def event(self, kind: str, message: str, *, data: dict | None = None) -> None:
        ...


def _target_mode(path: Path) -> int:
    """Mode of an existing target, else the umask-filtered default for new files."""

    if path.exists():
        return stat.S_IMODE(path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _emit(trace: TraceSink | None, kind: str, message: str, data: dict) -> None:
    if trace is not None:
        trace.event(kind, message, data=data)


def write_tex(
    system: LinearSystem,
    out_path: str | Path = DEFAULT_OUT_NAME,
    *,
    options: RenderOptions | None = None,
    trace: TraceSink | None = None,
) -> Path:
    """Render ``system`` and write it to ``out_path`` in one atomic step.

    The document is built fully in memory first; a DimensionMismatch leaves the
    filesystem untouched. The write goes to a temporary sibling that replaces
    the target only once it is complete.
    """

    path = Path(out_path)
    _emit(
        trace,
        "note",
        "start: render system",
        data={"variables": system.n_vars, "constraints": system.n_constraints},
    )
    try:
        document = render_document(system, options)
    except DimensionMismatch as exc:
        _emit(trace, "error", "dimension mismatch", data={"error": str(exc)})
        raise
    _emit(trace, "transform", "after render", data={"chars": len(document)})

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
    )
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=TEX_ENCODING, newline="\n") as fh:
            fh.write(document)
        os.chmod(tmp_path, _target_mode(path))
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise

    _emit(trace, "final", "wrote output path", data={"out": str(path)})
    return path

"""Output writers for rendered documents."""

from lptex.render.tex import DEFAULT_OUT_NAME, TEX_ENCODING, write_tex

__all__ = ["DEFAULT_OUT_NAME", "TEX_ENCODING", "write_tex"]

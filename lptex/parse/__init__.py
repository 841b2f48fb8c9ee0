"""Readers for LP text input."""

from lptex.parse.lp_text import load_lp, parse_lp, tokenize_lp

__all__ = ["load_lp", "parse_lp", "tokenize_lp"]

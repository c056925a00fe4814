"""Interval notation parsing."""

from __future__ import annotations

from numrange.notation.parser import ParsedInterval, parse_notation, parse_number

__all__ = ["ParsedInterval", "parse_notation", "parse_number"]

"""Data models for numrange."""

from __future__ import annotations

from numrange.data.range import Range

__all__ = ["Range"]

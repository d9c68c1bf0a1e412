"""Utility helpers for gym-tracker."""

from .formatting import format_long_date, format_short_date, format_weight

__all__ = ["format_long_date", "format_short_date", "format_weight"]

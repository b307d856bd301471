"""Formatting, export and charts for simulation results."""

from .formatting import format_currency, format_percentage

__all__ = ["format_currency", "format_percentage"]

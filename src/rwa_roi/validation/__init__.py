"""Validation and sanity checks for ROI simulations."""

from .sanity_checks import SanityChecker, ValidationWarning, validate_simulation

__all__ = [
    "SanityChecker",
    "ValidationWarning",
    "validate_simulation"
]

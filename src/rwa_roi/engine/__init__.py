"""Benefit calculation engine: pure calculators with no state and no I/O."""

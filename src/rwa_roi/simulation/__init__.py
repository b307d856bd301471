"""Simulation entry points."""

from .runner import SimulationRunner, aggregate_results, compute_simulation

__all__ = ["SimulationRunner", "aggregate_results", "compute_simulation"]

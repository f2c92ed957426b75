"""Plant sweep simulation."""

from pvplant.simulation.sweep import SweepResult, flattened_plant, run_sweep, uniform_plant

__all__ = ["SweepResult", "run_sweep", "uniform_plant", "flattened_plant"]

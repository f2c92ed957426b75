"""Light source sweep over a plant.

Moves the light source across the sky in fixed steps and samples plant
output, giving the daily power curve of a plant layout.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from pvplant.config import get_config
from pvplant.power.incidence import mount_incidence
from pvplant.power.light_source import LightSource
from pvplant.power.module import PhotovoltaicModule
from pvplant.power.mount import ModuleMount
from pvplant.power.plant import PLANT_CAPACITY, Plant

logger = logging.getLogger(__name__)

# Fraction of a step by which the last sample may overshoot end
END_TOLERANCE = 1e-9


@dataclass
class SweepResult:
    """Sampled power curve.

    Attributes:
        angles: Light source angle of each sample (rad)
        outputs: Plant output of each sample (W)
        probe_powers: Probe mount power of each sample (W), empty without probe
        step: Source movement between samples (rad)
    """

    angles: NDArray[np.float64]
    outputs: NDArray[np.float64]
    probe_powers: NDArray[np.float64]
    step: float

    def total_energy(self) -> float:
        """Output integrated over the sweep (W*rad, rectangle rule)."""
        return float(self.outputs.sum() * self.step)

    def peak_output(self) -> float:
        """Highest sampled output (W)."""
        return float(self.outputs.max()) if self.outputs.size else 0.0

    def mean_output(self) -> float:
        """Mean sampled output (W)."""
        return float(self.outputs.mean()) if self.outputs.size else 0.0

    def output_std(self) -> float:
        """Standard deviation of sampled output (W).

        Lower values mean a flatter daily curve.
        """
        return float(self.outputs.std()) if self.outputs.size else 0.0

    def rows(self) -> list[tuple[float, float, float]]:
        """(angle, probe power, plant output) per sample."""
        probe = self.probe_powers if self.probe_powers.size else np.zeros_like(self.outputs)
        return [
            (float(a), float(p), float(o))
            for a, p, o in zip(self.angles, probe, self.outputs)
        ]


def run_sweep(
    plant: Plant,
    source: Optional[LightSource] = None,
    start: Optional[float] = None,
    end: Optional[float] = None,
    step: Optional[float] = None,
    probe: Optional[ModuleMount] = None,
) -> SweepResult:
    """Sweep the light source from start to end and sample plant output.

    The source is set to start and advanced by step until it passes end.
    The end bound is included when it lies on the step grid, within a small
    tolerance that absorbs rounding from repeated increments.

    Args:
        plant: Plant to sample
        source: Light source to move (a new one if None); left at the last
            sampled position plus one step
        start: First source angle (rad), from config if None
        end: Last source angle (rad), from config if None
        step: Source movement per sample (rad), from config if None
        probe: Optional single mount sampled alongside the plant

    Returns:
        Sampled power curve

    Raises:
        ValueError: If step is not positive
    """
    sweep_cfg = get_config().sweep
    start = sweep_cfg.start_angle if start is None else start
    end = sweep_cfg.end_angle if end is None else end
    step = sweep_cfg.step if step is None else step

    if step <= 0:
        raise ValueError("step must be positive")

    if source is None:
        source = LightSource()

    angles = []
    outputs = []
    probe_powers = []

    source.set_angle(start)
    limit = end + END_TOLERANCE * step
    while source.angle <= limit:
        angles.append(source.angle)
        outputs.append(plant.current_output(source))
        if probe is not None:
            probe_powers.append(probe.current_power(mount_incidence(probe, source)))
        source.move_by(step)

    result = SweepResult(
        angles=np.array(angles, dtype=np.float64),
        outputs=np.array(outputs, dtype=np.float64),
        probe_powers=np.array(probe_powers, dtype=np.float64),
        step=step,
    )
    logger.info(
        "Swept %d samples: peak %.1f W, mean %.1f W, std %.1f W",
        len(angles),
        result.peak_output(),
        result.mean_output(),
        result.output_std(),
    )
    return result


def uniform_plant(
    orientation: float,
    module: Optional[PhotovoltaicModule] = None,
) -> Plant:
    """Plant with every mount at the same orientation and module size."""
    mount = ModuleMount(orientation, module)
    return Plant([mount] * PLANT_CAPACITY)


def flattened_plant(module: Optional[PhotovoltaicModule] = None) -> Plant:
    """Plant arranged to flatten the daily output curve.

    Slots 0-3 face +pi/4, slots 4-5 face +pi/2 and slots 6-9 face -pi/4,
    so morning, noon and evening light each hit a group of modules
    head-on::

                          noon
                    morning     evening

                  \\ \\ \\ \\ _ _ / / / /
    """
    plant = Plant()
    for index in (0, 1, 2, 3):
        plant.install_mount(ModuleMount(np.pi / 4, module), index)
    for index in (4, 5):
        plant.install_mount(ModuleMount(np.pi / 2, module), index)
    for index in (6, 7, 8, 9):
        plant.install_mount(ModuleMount(-np.pi / 4, module), index)
    return plant

"""Solar plant aggregating a fixed number of module mounts."""

import logging
import operator
from collections.abc import Iterator, Sequence
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from pvplant.power.errors import PlantBoundsError
from pvplant.power.incidence import mount_incidence
from pvplant.power.light_source import LightSource
from pvplant.power.mount import ModuleMount

logger = logging.getLogger(__name__)

# Number of mount slots in a plant
PLANT_CAPACITY = 10


class Plant:
    """Fixed-capacity plant of module mounts.

    Slots are addressed by index 0..PLANT_CAPACITY-1. Every slot always
    holds a mount; installing replaces the slot with a copy of the given
    mount, so the plant never shares mounts or modules with the caller.
    """

    def __init__(self, mounts: Optional[Sequence[ModuleMount]] = None):
        """Initialize plant.

        Args:
            mounts: Exactly PLANT_CAPACITY mounts to copy in. If None, every
                slot gets a default mount (orientation 0, default module).

        Raises:
            ValueError: If mounts does not have exactly PLANT_CAPACITY entries
        """
        if mounts is None:
            self._mounts = [ModuleMount() for _ in range(PLANT_CAPACITY)]
            return

        if len(mounts) != PLANT_CAPACITY:
            raise ValueError(
                f"Plant needs exactly {PLANT_CAPACITY} mounts, got {len(mounts)}"
            )
        self._mounts = [mount.copy() for mount in mounts]

    def _check_index(self, index: int) -> int:
        """Validate a slot index.

        Raises:
            PlantBoundsError: If index is outside 0..PLANT_CAPACITY-1
        """
        index = operator.index(index)
        if not 0 <= index < PLANT_CAPACITY:
            raise PlantBoundsError(
                f"Slot index {index} out of range 0..{PLANT_CAPACITY - 1}"
            )
        return index

    def install_mount(self, mount: ModuleMount, index: int) -> None:
        """Install a copy of mount into slot index.

        Args:
            mount: Mount to install (copied)
            index: Slot index (0..PLANT_CAPACITY-1)

        Raises:
            PlantBoundsError: If index is out of range
        """
        index = self._check_index(index)
        self._mounts[index] = mount.copy()
        logger.debug("Installed %r in slot %d", self._mounts[index], index)

    def resize_module(self, index: int, elements_x: int, elements_y: int) -> None:
        """Resize the module of the mount in slot index in place."""
        index = self._check_index(index)
        self._mounts[index].resize_module(elements_x, elements_y)

    def __getitem__(self, index: int) -> ModuleMount:
        return self._mounts[self._check_index(index)]

    def __len__(self) -> int:
        return PLANT_CAPACITY

    def __iter__(self) -> Iterator[ModuleMount]:
        return iter(self._mounts)

    def mount_powers(self, source: LightSource) -> NDArray[np.float64]:
        """Power of each slot for the light source position.

        Args:
            source: Light source

        Returns:
            Array of per-slot power in Watts, in slot order
        """
        return np.array(
            [mount.current_power(mount_incidence(mount, source)) for mount in self._mounts],
            dtype=np.float64,
        )

    def current_output(self, source: LightSource) -> float:
        """Total plant power for the light source position.

        Args:
            source: Light source

        Returns:
            Sum of all mount powers in Watts
        """
        return sum(
            mount.current_power(mount_incidence(mount, source))
            for mount in self._mounts
        )

    def peak_power(self) -> float:
        """Sum of module peak powers (W)."""
        return sum(mount.module.peak_power() for mount in self._mounts)

    def report(self) -> list[str]:
        """Describe each slot as "<index> angle=<rad> area=<cm^2>"."""
        return [
            f"{i} angle={mount.orientation:.4f} area={mount.module.area():g}"
            for i, mount in enumerate(self._mounts)
        ]

    def get_state(self, source: LightSource) -> dict:
        """Get plant state for display.

        Args:
            source: Light source

        Returns:
            Dictionary with plant state
        """
        powers = self.mount_powers(source)
        return {
            "sourceAngle": source.angle,
            "output": float(powers.sum()),
            "peakPower": self.peak_power(),
            "mounts": [
                {
                    "index": i,
                    "orientation": mount.orientation,
                    "area": mount.module.area(),
                    "peakPower": mount.module.peak_power(),
                    "power": float(powers[i]),
                }
                for i, mount in enumerate(self._mounts)
            ],
        }

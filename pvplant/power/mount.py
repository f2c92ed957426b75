"""Module mount: a photovoltaic module fixed at an orientation angle."""

import logging
import math
from typing import Optional

from pvplant.power.errors import InvalidStateError
from pvplant.power.module import PhotovoltaicModule, default_module

logger = logging.getLogger(__name__)

# Cosines this close to zero count as grazing light (cos(pi/2) is ~6e-17)
GRAZING_COSINE_TOLERANCE = 1e-12


class ModuleMount:
    """A module mounted at a fixed orientation.

    The mount owns its module exclusively: a module passed to the
    constructor is copied, and copying a mount copies its module.
    Orientation is an unrestricted signed angle (rad).

    Attributes:
        orientation: Mount orientation angle (rad)
        module: The owned module (editable in place)
    """

    def __init__(
        self,
        orientation: float = 0.0,
        module: Optional[PhotovoltaicModule] = None,
    ):
        """Initialize mount.

        Args:
            orientation: Orientation angle (rad), default 0
            module: Module to mount (copied); default medium-size module if None
        """
        self._orientation = float(orientation)
        self._module = module.copy() if module is not None else default_module()

    @property
    def orientation(self) -> float:
        """Orientation angle (rad)."""
        return self._orientation

    @orientation.setter
    def orientation(self, angle: float) -> None:
        self._orientation = float(angle)

    def get_orientation(self) -> float:
        return self._orientation

    def set_orientation(self, angle: float) -> None:
        self._orientation = float(angle)

    @property
    def module(self) -> PhotovoltaicModule:
        """The owned module.

        Returned by reference so its size can be edited in place. The
        module itself cannot be replaced.
        """
        return self._module

    def current_power(self, incidence: float) -> float:
        """Calculate power output for an incidence angle.

        Args:
            incidence: Incidence angle (rad)

        Returns:
            Power output in Watts, zero when light does not reach the front face
        """
        cos_angle = math.cos(incidence)
        if cos_angle <= GRAZING_COSINE_TOLERANCE:
            return 0.0
        return self._module.peak_power() * cos_angle

    def efficiency(self, incidence: float) -> float:
        """Power produced as a percentage of the module's peak power.

        Args:
            incidence: Incidence angle (rad)

        Returns:
            Efficiency in percent (0-100)

        Raises:
            InvalidStateError: If the module is lit but has zero peak power
        """
        if math.cos(incidence) <= GRAZING_COSINE_TOLERANCE:
            return 0.0
        peak = self._module.peak_power()
        if peak == 0:
            raise InvalidStateError(
                f"Efficiency undefined for zero peak power module {self._module!r}"
            )
        return 100.0 * self.current_power(incidence) / peak

    def resize_module(self, elements_x: int, elements_y: int) -> None:
        """Resize the owned module in place."""
        self._module.resize(elements_x, elements_y)
        logger.debug(
            "Resized module to %dx%d elements (area %.1f cm^2)",
            elements_x,
            elements_y,
            self._module.area(),
        )

    def copy(self) -> "ModuleMount":
        """Return an independent mount with its own module copy."""
        return ModuleMount(self._orientation, self._module)

    def __repr__(self) -> str:
        return f"ModuleMount(orientation={self._orientation!r}, module={self._module!r})"

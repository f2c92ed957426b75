"""Photovoltaic module made of identical rectangular elements."""

import operator

from pvplant.config import get_config

# Physical constants shared by all modules
ELEMENT_WIDTH_CM = 6.0
ELEMENT_HEIGHT_CM = 10.0
ELEMENT_PEAK_POWER_W = 15.0  # Max power of a single element


class PhotovoltaicModule:
    """Rectangular panel described by element counts.

    Element counts are plain integers. A zero count is a valid degenerate
    module (zero area and power); negative counts are not rejected and give
    negative derived values.

    Attributes:
        elements_x: Number of elements along X
        elements_y: Number of elements along Y
    """

    def __init__(self, elements_x: int, elements_y: int):
        """Initialize module.

        Args:
            elements_x: Number of elements along X
            elements_y: Number of elements along Y
        """
        self.elements_x = operator.index(elements_x)
        self.elements_y = operator.index(elements_y)

    @property
    def width_cm(self) -> float:
        """Module width (cm)."""
        return self.elements_x * ELEMENT_WIDTH_CM

    @property
    def height_cm(self) -> float:
        """Module height (cm)."""
        return self.elements_y * ELEMENT_HEIGHT_CM

    def area(self) -> float:
        """Module area in cm^2."""
        return self.width_cm * self.height_cm

    def peak_power(self) -> float:
        """Power when light is perpendicular to the module (W)."""
        return self.elements_x * self.elements_y * ELEMENT_PEAK_POWER_W

    def set_element_count_x(self, count: int) -> None:
        """Set the number of elements along X.

        This is an absolute set: the module may grow or shrink.
        """
        self.elements_x = operator.index(count)

    def set_element_count_y(self, count: int) -> None:
        """Set the number of elements along Y (absolute set)."""
        self.elements_y = operator.index(count)

    def resize(self, elements_x: int, elements_y: int) -> None:
        """Set both element counts.

        Both counts are validated before either is written.
        """
        elements_x = operator.index(elements_x)
        elements_y = operator.index(elements_y)
        self.elements_x = elements_x
        self.elements_y = elements_y

    def copy(self) -> "PhotovoltaicModule":
        """Return an independent module of the same size."""
        return PhotovoltaicModule(self.elements_x, self.elements_y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PhotovoltaicModule):
            return NotImplemented
        return (self.elements_x, self.elements_y) == (other.elements_x, other.elements_y)

    def __repr__(self) -> str:
        return f"PhotovoltaicModule(elements_x={self.elements_x}, elements_y={self.elements_y})"


def default_module() -> PhotovoltaicModule:
    """Create a conventional medium-size module from configuration."""
    cfg = get_config().module
    return PhotovoltaicModule(cfg.default_elements_x, cfg.default_elements_y)

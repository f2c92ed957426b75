"""Incidence angle between the light source and a mounted module."""

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from pvplant.power.light_source import LightSource
    from pvplant.power.mount import ModuleMount


def incidence_angle(orientation: float, source_angle: float) -> float:
    """Resolve the incidence angle for a mount orientation.

    Negative and non-negative orientations use different branches:

        orientation < 0:  pi/2 - source_angle + orientation
        otherwise:        pi/2 + source_angle - orientation

    The branches are not mirror images around orientation == 0. Inputs are
    not validated and the result may fall outside [0, pi].

    Args:
        orientation: Mount orientation (rad)
        source_angle: Light source angle (rad)

    Returns:
        Incidence angle (rad)
    """
    if orientation < 0:
        return np.pi / 2 - source_angle + orientation
    return np.pi / 2 + source_angle - orientation


def mount_incidence(mount: "ModuleMount", source: "LightSource") -> float:
    """Incidence angle of the light source on a mount."""
    return incidence_angle(mount.orientation, source.angle)

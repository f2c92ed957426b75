"""Photovoltaic plant power model."""

from pvplant.power.errors import InvalidStateError, PlantBoundsError, PlantModelError
from pvplant.power.incidence import incidence_angle, mount_incidence
from pvplant.power.light_source import LightSource
from pvplant.power.module import PhotovoltaicModule, default_module
from pvplant.power.mount import ModuleMount
from pvplant.power.plant import PLANT_CAPACITY, Plant

__all__ = [
    "PhotovoltaicModule",
    "default_module",
    "LightSource",
    "ModuleMount",
    "incidence_angle",
    "mount_incidence",
    "Plant",
    "PLANT_CAPACITY",
    "PlantModelError",
    "InvalidStateError",
    "PlantBoundsError",
]

"""Errors raised by the plant model."""


class PlantModelError(Exception):
    """Base class for plant model errors."""


class InvalidStateError(PlantModelError, ZeroDivisionError):
    """Operation is undefined for the current object state.

    Raised when efficiency is requested for a module with zero peak power.
    """


class PlantBoundsError(PlantModelError, IndexError):
    """Plant slot index outside the fixed plant capacity."""

"""Light source (the Sun) in a one-dimensional world."""


class LightSource:
    """Position of the light source described by a single angle.

    The angle is never normalized; a sweep may move it past +/-pi.

    Attributes:
        angle: Source angle (rad)
    """

    def __init__(self, angle: float = 0.0):
        self._angle = float(angle)

    @property
    def angle(self) -> float:
        """Current source angle (rad)."""
        return self._angle

    def set_angle(self, angle: float) -> None:
        """Move the source to an absolute angle (rad)."""
        self._angle = float(angle)

    def move_by(self, delta: float) -> None:
        """Advance the source by delta (rad)."""
        self._angle += delta

    def __repr__(self) -> str:
        return f"LightSource(angle={self._angle!r})"

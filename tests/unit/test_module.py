"""Tests for photovoltaic module and light source."""

import pytest
from hypothesis import given, strategies as st

from pvplant.power.light_source import LightSource
from pvplant.power.module import (
    ELEMENT_HEIGHT_CM,
    ELEMENT_PEAK_POWER_W,
    ELEMENT_WIDTH_CM,
    PhotovoltaicModule,
    default_module,
)


class TestPhotovoltaicModule:
    """Tests for PhotovoltaicModule class."""

    def test_ten_by_ten_module(self):
        """10x10 module has 6000 cm^2 area and 1500 W peak power."""
        module = PhotovoltaicModule(10, 10)
        assert module.area() == pytest.approx(6000.0)
        assert module.peak_power() == pytest.approx(1500.0)

    def test_dimensions(self):
        """Width and height scale with element counts."""
        module = PhotovoltaicModule(3, 4)
        assert module.width_cm == pytest.approx(18.0)
        assert module.height_cm == pytest.approx(40.0)

    @given(
        st.integers(min_value=1, max_value=10_000),
        st.integers(min_value=1, max_value=10_000),
    )
    def test_area_and_power_linear_in_counts(self, nx, ny):
        """Property: area and peak power are proportional to X*Y."""
        module = PhotovoltaicModule(nx, ny)
        assert module.area() == pytest.approx(nx * ny * ELEMENT_WIDTH_CM * ELEMENT_HEIGHT_CM)
        assert module.peak_power() == pytest.approx(nx * ny * ELEMENT_PEAK_POWER_W)

    def test_zero_size_is_valid(self):
        """Zero element count gives zero area and power."""
        module = PhotovoltaicModule(0, 5)
        assert module.area() == 0.0
        assert module.peak_power() == 0.0

    def test_set_element_count_can_grow(self):
        """Setting a count is absolute, not a bounded shrink."""
        module = PhotovoltaicModule(2, 3)
        module.set_element_count_x(40)
        module.set_element_count_y(1)
        assert module.elements_x == 40
        assert module.elements_y == 1
        assert module.peak_power() == pytest.approx(40 * 1 * 15.0)

    def test_negative_count_not_guarded(self):
        """Negative counts give negative derived values."""
        module = PhotovoltaicModule(2, 3)
        module.set_element_count_x(-2)
        assert module.area() == pytest.approx(-12.0 * 30.0)
        assert module.peak_power() == pytest.approx(-90.0)

    def test_resize_sets_both_counts(self):
        """resize updates both counts."""
        module = PhotovoltaicModule(10, 10)
        module.resize(2, 3)
        assert module.peak_power() == pytest.approx(90.0)

    def test_non_integer_count_rejected(self):
        """Element counts must be integers."""
        with pytest.raises(TypeError):
            PhotovoltaicModule(2.5, 3)
        module = PhotovoltaicModule(2, 3)
        with pytest.raises(TypeError):
            module.resize(4, 1.5)
        # Failed resize leaves module untouched
        assert (module.elements_x, module.elements_y) == (2, 3)

    def test_copy_is_independent(self):
        """Copies do not share state."""
        module = PhotovoltaicModule(2, 3)
        clone = module.copy()
        assert clone == module
        clone.set_element_count_x(7)
        assert module.elements_x == 2

    def test_default_module_is_medium_size(self):
        """Default module is 20x30 elements."""
        module = default_module()
        assert (module.elements_x, module.elements_y) == (20, 30)
        assert module.peak_power() == pytest.approx(9000.0)


class TestLightSource:
    """Tests for LightSource class."""

    def test_initial_angle_is_zero(self):
        """New source starts at angle 0."""
        assert LightSource().angle == 0.0

    def test_set_angle(self):
        """set_angle moves to an absolute angle."""
        sun = LightSource()
        sun.set_angle(-1.2)
        assert sun.angle == pytest.approx(-1.2)

    def test_move_by_accumulates(self):
        """move_by is a relative increment."""
        sun = LightSource(angle=0.5)
        sun.move_by(0.25)
        sun.move_by(0.25)
        assert sun.angle == pytest.approx(1.0)

    def test_angle_not_normalized(self):
        """Angles past pi are kept as-is."""
        sun = LightSource(angle=3.0)
        sun.move_by(4.0)
        assert sun.angle == pytest.approx(7.0)

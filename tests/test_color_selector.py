import pytest

from sketchpad.color import Color
from sketchpad.color_selector import (
    Channel,
    ColorSelector,
    MissingColorInput,
    clamp,
    preset_color,
)
from sketchpad.enums import ColorName

PRESETS = [name for name in ColorName if name is not ColorName.CUSTOM]


def _type(selector, r, g, b):
    selector.set_input(Channel.RED, r)
    selector.set_input(Channel.GREEN, g)
    selector.set_input(Channel.BLUE, b)


def test_clamp():
    assert clamp(-1, 0, 255) == 0
    assert clamp(300, 0, 255) == 255
    assert clamp(42, 0, 255) == 42


@pytest.mark.parametrize("name", PRESETS)
def test_preset_round_trip_through_confirm(name):
    selector = ColorSelector()
    r, g, b = preset_color(name).to_bytes()
    _type(selector, str(r), str(g), str(b))
    selector.confirm()
    assert selector.highlighted() is name
    assert selector.using_custom_color is False
    assert selector.color() == preset_color(name)


def test_preset_values_from_table():
    assert preset_color(ColorName.ORANGE).to_bytes() == (255, 127, 0)
    assert preset_color(ColorName.INDIGO).to_bytes() == (75, 0, 130)
    assert preset_color(ColorName.BLACK) == Color()


def test_custom_is_not_a_preset():
    with pytest.raises(ValueError):
        preset_color(ColorName.CUSTOM)
    with pytest.raises(ValueError):
        ColorSelector().select_preset(ColorName.CUSTOM)


def test_initial_state_is_red():
    selector = ColorSelector()
    assert selector.highlighted() is ColorName.RED
    assert selector.color() == preset_color(ColorName.RED)
    assert selector.inputs == {Channel.RED: "255", Channel.GREEN: "0", Channel.BLUE: "0"}


def test_select_preset_updates_inputs_and_notifies():
    seen = []
    selector = ColorSelector(on_change=seen.append)
    selector.select_preset(ColorName.PINK)
    assert seen == [selector]
    assert selector.highlighted() is ColorName.PINK
    assert selector.inputs == {Channel.RED: "255", Channel.GREEN: "192", Channel.BLUE: "203"}


def test_adjust_clamps_at_bounds():
    selector = ColorSelector()
    selector.adjust(Channel.RED, 1)
    selector.adjust(Channel.GREEN, -1)
    assert selector.inputs == {Channel.RED: "255", Channel.GREEN: "0", Channel.BLUE: "0"}


def test_adjust_steps_one_channel():
    selector = ColorSelector()
    selector.adjust(Channel.BLUE, 1)
    assert selector.inputs[Channel.BLUE] == "1"
    assert selector.inputs[Channel.RED] == "255"


def test_adjust_fills_empty_fields():
    selector = ColorSelector()
    selector.clear_inputs()
    selector.adjust(Channel.RED, -1)
    assert selector.inputs == {Channel.RED: "0", Channel.GREEN: "0", Channel.BLUE: "0"}


def test_adjust_does_not_change_active_colour():
    selector = ColorSelector()
    selector.adjust(Channel.GREEN, 1)
    assert selector.color() == preset_color(ColorName.RED)


def test_clear_inputs():
    selector = ColorSelector()
    selector.clear_inputs()
    assert set(selector.inputs.values()) == {""}


def test_confirm_with_empty_field_raises_without_notifying():
    seen = []
    selector = ColorSelector(on_change=seen.append)
    selector.set_input(Channel.GREEN, "")
    with pytest.raises(MissingColorInput, match="Select or enter RGB of a color."):
        selector.confirm()
    assert seen == []
    assert selector.highlighted() is ColorName.RED


def test_missing_input_is_a_value_error():
    selector = ColorSelector()
    selector.clear_inputs()
    with pytest.raises(ValueError):
        selector.confirm()


def test_confirm_custom_colour():
    seen = []
    selector = ColorSelector(on_change=seen.append)
    _type(selector, "10", "20", "30")
    selector.confirm()
    assert seen == [selector]
    assert selector.using_custom_color is True
    assert selector.highlighted() is None
    assert selector.color().to_bytes() == (10, 20, 30)


def test_confirm_clamps_values():
    selector = ColorSelector()
    _type(selector, "300", "-5", "40")
    selector.confirm()
    assert selector.color().to_bytes() == (255, 0, 40)


def test_confirm_clamped_to_preset_selects_it():
    selector = ColorSelector()
    _type(selector, "999", "999", "999")
    selector.confirm()
    assert selector.highlighted() is ColorName.WHITE


def test_set_input_rejects_non_integers():
    selector = ColorSelector()
    with pytest.raises(ValueError):
        selector.set_input(Channel.RED, "abc")
    assert selector.inputs[Channel.RED] == "255"


def test_update_rgb_inputs_restores_active_colour():
    selector = ColorSelector()
    _type(selector, "10", "20", "30")
    selector.confirm()
    selector.clear_inputs()
    selector.update_rgb_inputs()
    assert selector.inputs == {Channel.RED: "10", Channel.GREEN: "20", Channel.BLUE: "30"}


def test_select_preset_after_custom_leaves_custom_mode():
    selector = ColorSelector()
    _type(selector, "10", "20", "30")
    selector.confirm()
    selector.select_preset(ColorName.VIOLET)
    assert selector.using_custom_color is False
    assert selector.color() == preset_color(ColorName.VIOLET)
    assert selector.inputs == {Channel.RED: "148", Channel.GREEN: "0", Channel.BLUE: "211"}
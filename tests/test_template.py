import pytest

from simple2d.examples.template import describe_mouse_press
from simple2d.input import Mouse


def test_left_button_message():
    assert describe_mouse_press(Mouse.LEFT) == "Mouse button 0 pressed"


@pytest.mark.parametrize("button", list(Mouse))
def test_message_names_button_number(button):
    message = describe_mouse_press(button)
    assert message.startswith("Mouse button ")
    assert message.endswith(" pressed")
    assert int(message.split()[2]) == int(button)


def test_aliases_share_message():
    assert describe_mouse_press(Mouse.RIGHT) == describe_mouse_press(Mouse.MB2)
import pytest

from sketchpad.enums import Action, Tool
from sketchpad.toolbar import Toolbar, ToolbarButton


def test_defaults():
    toolbar = Toolbar()
    assert toolbar.tool is Tool.PENCIL
    assert toolbar.action is Action.NONE
    assert toolbar.highlighted() is ToolbarButton.PENCIL


@pytest.mark.parametrize(
    "button, tool",
    [
        (ToolbarButton.PENCIL, Tool.PENCIL),
        (ToolbarButton.ERASER, Tool.ERASER),
        (ToolbarButton.CIRCLE, Tool.CIRCLE),
        (ToolbarButton.TRIANGLE, Tool.TRIANGLE),
        (ToolbarButton.RECTANGLE, Tool.RECTANGLE),
        (ToolbarButton.POLYGON, Tool.POLYGON),
        (ToolbarButton.SELECT, Tool.SELECT),
    ],
)
def test_tool_buttons_select_tool(button, tool):
    toolbar = Toolbar()
    toolbar.click(button)
    assert toolbar.tool is tool
    assert toolbar.action is Action.NONE
    assert toolbar.highlighted() is button


@pytest.mark.parametrize(
    "button, action",
    [
        (ToolbarButton.UNDO, Action.UNDO),
        (ToolbarButton.CLEAR, Action.CLEAR),
        (ToolbarButton.BRING_TO_FRONT, Action.BRING_TO_FRONT),
        (ToolbarButton.SEND_TO_BACK, Action.SEND_TO_BACK),
        (ToolbarButton.RESIZE_UP, Action.RESIZE_UP),
        (ToolbarButton.RESIZE_DOWN, Action.RESIZE_DOWN),
    ],
)
def test_action_buttons_keep_tool(button, action):
    toolbar = Toolbar()
    toolbar.click(ToolbarButton.SELECT)
    toolbar.click(button)
    assert toolbar.action is action
    assert toolbar.tool is Tool.SELECT
    assert toolbar.highlighted() is button


def test_tool_click_resets_action():
    toolbar = Toolbar()
    toolbar.click(ToolbarButton.UNDO)
    toolbar.click(ToolbarButton.ERASER)
    assert toolbar.action is Action.NONE
    assert toolbar.tool is Tool.ERASER


def test_clear_action_restores_tool_highlight():
    toolbar = Toolbar()
    toolbar.click(ToolbarButton.CIRCLE)
    toolbar.click(ToolbarButton.CLEAR)
    toolbar.clear_action()
    assert toolbar.action is Action.NONE
    assert toolbar.tool is Tool.CIRCLE
    assert toolbar.highlighted() is ToolbarButton.CIRCLE


def test_on_change_sees_new_state():
    seen = []
    toolbar = Toolbar(on_change=lambda tb: seen.append((tb.tool, tb.action)))
    toolbar.click(ToolbarButton.RECTANGLE)
    toolbar.click(ToolbarButton.UNDO)
    assert seen == [(Tool.RECTANGLE, Action.NONE), (Tool.RECTANGLE, Action.UNDO)]


def test_unknown_button_raises():
    toolbar = Toolbar()
    with pytest.raises(ValueError):
        toolbar.click("pencil")
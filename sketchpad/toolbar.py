"""Toolbar state: the current drawing tool and the pending action."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from .enums import Action, Tool


class ToolbarButton(Enum):
    """Buttons on the toolbar."""

    PENCIL = "pencil"
    ERASER = "eraser"
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    RECTANGLE = "rectangle"
    POLYGON = "polygon"
    SELECT = "select"
    UNDO = "undo"
    CLEAR = "clear"
    BRING_TO_FRONT = "bring-to-front"
    SEND_TO_BACK = "send-to-back"
    RESIZE_UP = "plus"
    RESIZE_DOWN = "minus"


_TOOL_BUTTONS = {
    ToolbarButton.PENCIL: Tool.PENCIL,
    ToolbarButton.ERASER: Tool.ERASER,
    ToolbarButton.CIRCLE: Tool.CIRCLE,
    ToolbarButton.TRIANGLE: Tool.TRIANGLE,
    ToolbarButton.RECTANGLE: Tool.RECTANGLE,
    ToolbarButton.POLYGON: Tool.POLYGON,
    ToolbarButton.SELECT: Tool.SELECT,
}

_ACTION_BUTTONS = {
    ToolbarButton.UNDO: Action.UNDO,
    ToolbarButton.CLEAR: Action.CLEAR,
    ToolbarButton.BRING_TO_FRONT: Action.BRING_TO_FRONT,
    ToolbarButton.SEND_TO_BACK: Action.SEND_TO_BACK,
    ToolbarButton.RESIZE_UP: Action.RESIZE_UP,
    ToolbarButton.RESIZE_DOWN: Action.RESIZE_DOWN,
}

_BUTTON_FOR_TOOL = {tool: button for button, tool in _TOOL_BUTTONS.items()}
_BUTTON_FOR_ACTION = {action: button for button, action in _ACTION_BUTTONS.items()}


class Toolbar:
    """Tracks the selected tool and the action of the last click.

    ``on_change`` is called with the toolbar after every click.
    """

    def __init__(self, on_change: Optional[Callable[["Toolbar"], None]] = None) -> None:
        self.tool: Tool = Tool.PENCIL
        self.action: Action = Action.NONE
        self.on_change = on_change

    def click(self, button: ToolbarButton) -> None:
        """Handle a click: pick a tool or trigger an action, then notify."""
        self.action = Action.NONE
        if button in _TOOL_BUTTONS:
            self.tool = _TOOL_BUTTONS[button]
        elif button in _ACTION_BUTTONS:
            self.action = _ACTION_BUTTONS[button]
        else:
            raise ValueError(f"unknown toolbar button: {button!r}")
        if self.on_change is not None:
            self.on_change(self)

    def clear_action(self) -> None:
        """Drop the pending action, keeping the current tool."""
        self.action = Action.NONE

    def highlighted(self) -> ToolbarButton:
        """The button shown as active: the pending action, else the tool."""
        if self.action is not Action.NONE:
            return _BUTTON_FOR_ACTION[self.action]
        return _BUTTON_FOR_TOOL[self.tool]
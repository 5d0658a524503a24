"""Tools, preset colours and toolbar actions."""

from enum import IntEnum


class Tool(IntEnum):
    """Drawing tools selectable from the toolbar."""

    PENCIL = 0
    ERASER = 1
    CIRCLE = 2
    TRIANGLE = 3
    RECTANGLE = 4
    POLYGON = 5
    SELECT = 6


class ColorName(IntEnum):
    """Preset colours, plus a marker for a user-defined colour."""

    RED = 0
    ORANGE = 1
    YELLOW = 2
    GREEN = 3
    BLUE = 4
    INDIGO = 5
    VIOLET = 6
    PINK = 7
    WHITE = 8
    LIGHT_GREY = 9
    DARK_GREY = 10
    BLACK = 11
    CUSTOM = 12


class Action(IntEnum):
    """One-shot commands the toolbar sends to the drawing."""

    NONE = 0
    UNDO = 1
    CLEAR = 2
    BRING_TO_FRONT = 3
    SEND_TO_BACK = 4
    RESIZE_UP = 5
    RESIZE_DOWN = 6
"""Wires the toolbar and colour selector to the drawing's mouse handling."""

from __future__ import annotations

from typing import Callable, Optional

from .color_selector import ColorSelector
from .drawing import Drawing
from .enums import Action, Tool
from .toolbar import Toolbar

PENCIL_SIZE = 7


class DrawingController:
    """Turns canvas mouse events and widget changes into drawing edits.

    The toolbar's and colour selector's ``on_change`` hooks are pointed at
    this controller. ``on_redraw`` is called whenever the canvas should be
    repainted.
    """

    def __init__(
        self,
        drawing: Optional[Drawing] = None,
        toolbar: Optional[Toolbar] = None,
        color_selector: Optional[ColorSelector] = None,
        on_redraw: Optional[Callable[[], None]] = None,
    ) -> None:
        self.drawing = drawing if drawing is not None else Drawing()
        self.toolbar = toolbar if toolbar is not None else Toolbar()
        self.color_selector = color_selector if color_selector is not None else ColorSelector()
        self.on_redraw = on_redraw
        self.last_x = 0.0
        self.last_y = 0.0
        self.toolbar.on_change = lambda _toolbar: self.toolbar_changed()
        self.color_selector.on_change = lambda _selector: self.color_changed()

    def _redraw(self) -> None:
        if self.on_redraw is not None:
            self.on_redraw()

    def mouse_down(self, mx: float, my: float) -> None:
        """Apply the current tool at the point where the button went down."""
        tool = self.toolbar.tool
        color = self.color_selector.color()
        drawing = self.drawing

        adders = {
            Tool.RECTANGLE: drawing.add_rectangle,
            Tool.CIRCLE: drawing.add_circle,
            Tool.TRIANGLE: drawing.add_triangle,
            Tool.POLYGON: drawing.add_polygon,
        }
        if tool is Tool.PENCIL:
            drawing.start_scribble(mx, my, color, PENCIL_SIZE)
            self.color_selector.update_rgb_inputs()
        elif tool is Tool.ERASER:
            drawing.erase_at(mx, my)
        elif tool is Tool.SELECT:
            drawing.select_at(mx, my)
        elif tool in adders:
            adders[tool](mx, my, color)
            self.color_selector.update_rgb_inputs()

        self.last_x, self.last_y = mx, my
        self._redraw()

    def drag(self, mx: float, my: float) -> None:
        """Continue a stroke, keep erasing, or move the selection."""
        tool = self.toolbar.tool
        color = self.color_selector.color()

        if tool is Tool.PENCIL:
            self.drawing.add_to_scribble(mx, my, color, PENCIL_SIZE)
        elif tool is Tool.ERASER:
            self.drawing.erase_at(mx, my)
        elif tool is Tool.SELECT:
            self.drawing.move_selected(mx - self.last_x, my - self.last_y)

        self.last_x, self.last_y = mx, my
        self._redraw()

    def mouse_up(self, mx: float, my: float) -> None:
        """Close the open stroke when the pencil is lifted."""
        if self.toolbar.tool is Tool.PENCIL:
            self.drawing.finish_scribble()
        self._redraw()

    def toolbar_changed(self) -> None:
        """Carry out the toolbar's pending action on the drawing."""
        drawing = self.drawing
        commands = {
            Action.CLEAR: drawing.clear,
            Action.UNDO: drawing.undo,
            Action.BRING_TO_FRONT: drawing.bring_to_front,
            Action.SEND_TO_BACK: drawing.send_to_back,
            Action.RESIZE_UP: drawing.resize_selected_up,
            Action.RESIZE_DOWN: drawing.resize_selected_down,
        }
        command = commands.get(self.toolbar.action)
        if command is not None:
            command()
        self._redraw()

    def color_changed(self) -> None:
        """Recolour the selection when the select tool is active."""
        if self.toolbar.tool is Tool.SELECT:
            self.drawing.recolor_selected(self.color_selector.color())
            self._redraw()
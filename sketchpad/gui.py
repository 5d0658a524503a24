"""Tk window hosting the toolbar, drawing canvas and colour picker."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .color import Color
from .color_selector import Channel, MissingColorInput
from .controller import DrawingController
from .drawing import BACKGROUND
from .enums import ColorName
from .shapes import Painter
from .toolbar import ToolbarButton

WINDOW_SIZE = 700
CANVAS_SIZE = 450
PANEL_COLOR = "#869ea4"
BUTTON_COLOR = "#f5e9d3"
TEXT_COLOR = "#1e292d"
HIGHLIGHT_COLOR = "#ffffff"

_TOOLBAR_LAYOUT = [
    (ToolbarButton.PENCIL, "Pencil", 10, 50),
    (ToolbarButton.ERASER, "Eraser", 70, 50),
    (ToolbarButton.SELECT, "Select", 130, 50),
    (ToolbarButton.UNDO, "Undo", 10, 110),
    (ToolbarButton.CLEAR, "Clear", 70, 110),
    (ToolbarButton.BRING_TO_FRONT, "Front", 130, 110),
    (ToolbarButton.SEND_TO_BACK, "Back", 10, 170),
    (ToolbarButton.CIRCLE, "Circle", 10, 290),
    (ToolbarButton.TRIANGLE, "Tri", 70, 290),
    (ToolbarButton.RECTANGLE, "Rect", 10, 350),
    (ToolbarButton.POLYGON, "Poly", 70, 350),
    (ToolbarButton.RESIZE_UP, "+", 170, 290),
    (ToolbarButton.RESIZE_DOWN, "-", 170, 350),
]

_PRESET_ORDER = [
    ColorName.RED, ColorName.ORANGE, ColorName.YELLOW, ColorName.GREEN,
    ColorName.BLUE, ColorName.INDIGO, ColorName.VIOLET, ColorName.PINK,
    ColorName.WHITE, ColorName.LIGHT_GREY, ColorName.DARK_GREY, ColorName.BLACK,
]

_CHANNEL_ROWS = [(Channel.RED, "R", 70), (Channel.GREEN, "G", 130), (Channel.BLUE, "B", 190)]


def pixel_to_canvas(px: float, py: float, width: float, height: float) -> tuple[float, float]:
    """Map a pixel position to canvas coordinates: x and y in [-1, 1], y up."""
    if width <= 0 or height <= 0:
        raise ValueError("canvas size must be positive")
    return 2.0 * px / width - 1.0, 1.0 - 2.0 * py / height


def _canvas_to_pixel(x: float, y: float, width: float, height: float) -> tuple[float, float]:
    return (x + 1.0) * width / 2.0, (1.0 - y) * height / 2.0


def _hex(color: Color) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color.to_bytes())


class Application:
    """The main window: toolbar on the left, canvas on the right, colours below."""

    def __init__(self) -> None:
        import tkinter as tk
        from tkinter import messagebox

        self._tk = tk
        self._messagebox = messagebox
        self.controller = DrawingController(on_redraw=self._redraw)

        self.root = tk.Tk()
        self.root.title("Sketchpad")
        self.root.geometry(f"{WINDOW_SIZE}x{WINDOW_SIZE}+100+100")
        self.root.resizable(False, False)

        self._canvas = tk.Canvas(
            self.root, bg=_hex(BACKGROUND), highlightthickness=1, highlightbackground="black"
        )
        self._canvas.place(x=250, y=0, width=CANVAS_SIZE, height=CANVAS_SIZE)
        self._canvas.bind("<ButtonPress-1>", self._on_press)
        self._canvas.bind("<B1-Motion>", self._on_motion)
        self._canvas.bind("<ButtonRelease-1>", self._on_release)

        self._tool_buttons = self._build_toolbar()
        self._color_buttons, self._entries = self._build_color_panel()
        self._refresh()

    # Construction

    def _label(self, parent, text: str, x: int, y: int) -> None:
        self._tk.Label(
            parent, text=text, bg=PANEL_COLOR, fg=TEXT_COLOR, font=("Helvetica", 14, "bold")
        ).place(x=x, y=y)

    def _build_toolbar(self) -> dict:
        tk = self._tk
        frame = tk.Frame(self.root, bg=PANEL_COLOR)
        frame.place(x=0, y=0, width=250, height=CANVAS_SIZE)
        self._label(frame, "Tools", 10, 20)
        self._label(frame, "Shapes", 10, 260)
        self._label(frame, "Size", 170, 260)
        buttons = {}
        for button, text, x, y in _TOOLBAR_LAYOUT:
            widget = tk.Button(
                frame, text=text, bg=BUTTON_COLOR, fg=TEXT_COLOR, relief="solid", bd=1,
                command=lambda b=button: self._on_tool(b),
            )
            widget.place(x=x, y=y, width=50, height=50)
            buttons[button] = widget
        return buttons

    def _build_color_panel(self) -> tuple[dict, dict]:
        tk = self._tk
        frame = tk.Frame(self.root, bg=PANEL_COLOR)
        frame.place(x=0, y=CANVAS_SIZE, width=WINDOW_SIZE, height=WINDOW_SIZE - CANVAS_SIZE)
        self._label(frame, "Colors", 10, 20)

        color_buttons = {}
        for index, name in enumerate(_PRESET_ORDER):
            row, col = divmod(index, 4)
            shade = _hex(self.controller.color_selector.color() if False else _preset_hex_color(name))
            widget = tk.Button(
                frame, text="", bg=shade, activebackground=shade, fg="white",
                command=lambda n=name: self._on_preset(n),
            )
            widget.place(x=10 + 60 * col, y=50 + 60 * row, width=50, height=50)
            color_buttons[name] = widget

        entries = {}
        for channel, text, y in _CHANNEL_ROWS:
            self._label(frame, text, 300, y - 25)
            entry = tk.Entry(frame, bg=BUTTON_COLOR, font=("Helvetica", 14))
            entry.place(x=300, y=y, width=100, height=30)
            entries[channel] = entry
            for label, delta, x in (("+", 1, 415), ("-", -1, 455)):
                tk.Button(
                    frame, text=label, bg=BUTTON_COLOR, fg=TEXT_COLOR,
                    command=lambda c=channel, d=delta: self._on_adjust(c, d),
                ).place(x=x, y=y, width=30, height=30)

        for text, y, command in (("Clear", 70, self._on_clear_inputs), ("Confirm", 160, self._on_confirm)):
            tk.Button(
                frame, text=text, bg=BUTTON_COLOR, fg=TEXT_COLOR,
                font=("Helvetica", 24), command=command,
            ).place(x=510, y=y, width=175, height=60)
        return color_buttons, entries

    # Event handlers

    def _event_point(self, event) -> tuple[float, float]:
        return pixel_to_canvas(event.x, event.y, CANVAS_SIZE, CANVAS_SIZE)

    def _on_press(self, event) -> None:
        self.controller.mouse_down(*self._event_point(event))
        self._refresh()

    def _on_motion(self, event) -> None:
        self.controller.drag(*self._event_point(event))

    def _on_release(self, event) -> None:
        self.controller.mouse_up(*self._event_point(event))

    def _on_tool(self, button: ToolbarButton) -> None:
        self.controller.toolbar.click(button)
        self._refresh()

    def _on_preset(self, name: ColorName) -> None:
        self.controller.color_selector.select_preset(name)
        self._refresh()

    def _push_entries(self) -> bool:
        selector = self.controller.color_selector
        try:
            for channel, entry in self._entries.items():
                selector.set_input(channel, entry.get())
        except ValueError as error:
            self._messagebox.showinfo("Sketchpad", str(error))
            return False
        return True

    def _on_adjust(self, channel: Channel, delta: int) -> None:
        if self._push_entries():
            self.controller.color_selector.adjust(channel, delta)
        self._refresh()

    def _on_clear_inputs(self) -> None:
        self.controller.color_selector.clear_inputs()
        self._refresh()

    def _on_confirm(self) -> None:
        if self._push_entries():
            try:
                self.controller.color_selector.confirm()
            except MissingColorInput as error:
                self._messagebox.showinfo("Sketchpad", str(error))
        self._refresh()

    # Display

    def _refresh(self) -> None:
        active = self.controller.toolbar.highlighted()
        for button, widget in self._tool_buttons.items():
            widget.configure(bg=HIGHLIGHT_COLOR if button is active else BUTTON_COLOR)

        chosen = self.controller.color_selector.highlighted()
        for name, widget in self._color_buttons.items():
            widget.configure(text="\u25a0" if name is chosen else "")

        inputs = self.controller.color_selector.inputs
        for channel, entry in self._entries.items():
            entry.delete(0, "end")
            entry.insert(0, inputs.get(channel, ""))
        self._redraw()

    def _redraw(self) -> None:
        canvas = self._canvas
        canvas.delete("all")
        painter = Painter()
        self.controller.drawing.render(painter)
        for operation in painter.operations:
            if operation[0] == "polygon":
                _, vertices, color = operation
                coords = [
                    value
                    for x, y in vertices
                    for value in _canvas_to_pixel(x, y, CANVAS_SIZE, CANVAS_SIZE)
                ]
                canvas.create_polygon(coords, fill=_hex(color), outline="")
            else:
                _, (x, y), size, color = operation
                px, py = _canvas_to_pixel(x, y, CANVAS_SIZE, CANVAS_SIZE)
                half = size / 2
                canvas.create_rectangle(
                    px - half, py - half, px + half, py + half, fill=_hex(color), outline=""
                )

    def run(self) -> int:
        """Show the window and process events until it is closed."""
        self.root.mainloop()
        return 0


def _preset_hex_color(name: ColorName) -> Color:
    from .color_selector import preset_color

    return preset_color(name)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the drawing window."""
    parser = argparse.ArgumentParser(prog="sketchpad", description="A small vector drawing program.")
    parser.parse_args(argv)
    return Application().run()
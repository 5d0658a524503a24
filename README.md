# sketchpad

A small vector drawing editor. Place rectangles, circles, triangles and
pentagons on a canvas, draw freehand scribbles, then select, move, resize,
recolour, restack, erase or undo them.

## Installing

```
pip install .
```

The editor window uses Tk through Python's `tkinter` module, which must be
available in your Python installation. The drawing model itself needs
nothing beyond the standard library.

## Running the editor

```
sketchpad
```

The window has three parts:

- **Tools** on the left: Pencil, Eraser, Select, Undo, Clear, Front (bring
  to front), Back (send to back), the four shape tools (Circle, Tri, Rect,
  Poly) and the size buttons `+` and `-`. The active tool or the last
  action is highlighted.
- **Canvas** on the right. Clicking with a shape tool places a shape at the
  pointer; the pencil draws a scribble while you drag; the eraser removes
  the topmost shape under the pointer (and keeps erasing as you drag); the
  select tool picks a shape, which you can then drag to move.
- **Colours** along the bottom: twelve preset colours and R, G, B fields
  with `+`/`-` buttons, plus *Clear* (empties the fields) and *Confirm*.
  Values are clamped to 0–255. Confirming values that match a preset
  selects that preset; anything else becomes a custom colour. Confirming
  with an empty field, or typing something that is not an integer, shows a
  message instead.

While the select tool is active, picking or confirming a colour recolours
the selected shape. Selection prefers solid shapes over scribbles lying
beneath them. `+` and `-` scale the selected shape by 1.1 and 0.9 (shapes
never shrink below 0.05 canvas units; scribble dots grow or shrink by one
pixel, never below 1).

## Using it as a library

The drawing model works without any window:

```python
from sketchpad.color import Color
from sketchpad.drawing import Drawing

drawing = Drawing()
drawing.add_rectangle(0.0, 0.0, Color(1.0, 0.0, 0.0))
drawing.add_circle(0.5, 0.5, Color(0.0, 0.0, 1.0))

drawing.select_at(0.0, 0.0)
drawing.move_selected(0.1, 0.1)
drawing.resize_selected_up()
drawing.bring_to_front()
drawing.undo()
```

Canvas coordinates run from -1 to 1 on both axes, with y pointing up;
`sketchpad.gui.pixel_to_canvas` converts window pixels to them.

Rendering goes through a `Painter` (see `sketchpad.shapes`), which records
filled polygons and points in its `operations` list;
`Drawing.render(painter)` draws every shape back to front.

Other pieces:

- `sketchpad.toolbar.Toolbar` tracks the current `Tool` and pending
  `Action` (from `sketchpad.enums`); `click(ToolbarButton...)` changes
  them.
- `sketchpad.color_selector.ColorSelector` holds the preset or custom
  colour and the RGB field text; `confirm()` raises `MissingColorInput`
  when a field is empty.
- `sketchpad.controller.DrawingController` ties a `Drawing`, a `Toolbar`
  and a `ColorSelector` together and turns mouse events (`mouse_down`,
  `drag`, `mouse_up`) into edits, so the whole editor can be driven from
  code or tests.

## What it does not do

Drawings live only in memory: there is no saving, loading or exporting, and
closing the window discards the drawing. Undo removes the most recently
added shape; it does not reverse moves, resizes, recolouring, erasing or
clearing.

## Running the tests

```
pip install ".[test]"
pytest
```
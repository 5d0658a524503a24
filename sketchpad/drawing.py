"""The drawing model: an ordered stack of shapes with selection and editing."""

from __future__ import annotations

from .color import Color
from .shapes import Circle, Painter, Polygon, Rectangle, Scribble, Shape, Triangle

BACKGROUND = Color(213 / 255, 231 / 255, 239 / 255)
RESIZE_UP_FACTOR = 1.1
RESIZE_DOWN_FACTOR = 0.9


class Drawing:
    """Shapes stacked bottom to top, an optional selection and an open scribble."""

    background: Color = BACKGROUND

    def __init__(self) -> None:
        self._shapes: list[Shape] = []
        self._current_scribble: Scribble | None = None
        self._selected: Shape | None = None

    @property
    def shapes(self) -> tuple[Shape, ...]:
        """The shapes from bottom to top."""
        return tuple(self._shapes)

    @property
    def selected(self) -> Shape | None:
        """The selected shape, if any."""
        return self._selected

    def __len__(self) -> int:
        return len(self._shapes)

    def _index_of(self, shape: Shape) -> int | None:
        return next((i for i, s in enumerate(self._shapes) if s is shape), None)

    def _forget(self, shape: Shape) -> None:
        if self._current_scribble is shape:
            self._current_scribble = None

    # Freehand strokes

    def start_scribble(self, x: float, y: float, color: Color, size: int) -> None:
        """Begin a new scribble with its first point at (x, y)."""
        scribble = Scribble()
        scribble.add_point(x, y, color, size)
        self._shapes.append(scribble)
        self._current_scribble = scribble

    def add_to_scribble(self, x: float, y: float, color: Color, size: int) -> None:
        """Extend the open scribble, if there is one."""
        if self._current_scribble is not None:
            self._current_scribble.add_point(x, y, color, size)

    def finish_scribble(self) -> None:
        """Close the open scribble so the next stroke starts a new one."""
        self._current_scribble = None

    # Shapes

    def add_rectangle(self, x: float, y: float, color: Color) -> None:
        self._shapes.append(Rectangle(x, y, color))

    def add_circle(self, x: float, y: float, color: Color) -> None:
        self._shapes.append(Circle(x, y, color))

    def add_triangle(self, x: float, y: float, color: Color) -> None:
        self._shapes.append(Triangle(x, y, color))

    def add_polygon(self, x: float, y: float, color: Color) -> None:
        self._shapes.append(Polygon(x, y, color))

    # Selection

    def select_at(self, mx: float, my: float) -> Shape | None:
        """Select the topmost non-scribble under (mx, my), else the topmost scribble."""
        stack = list(reversed(self._shapes))
        hit = next(
            (s for s in stack if not s.is_scribble and s.contains(mx, my)),
            None,
        )
        if hit is None:
            hit = next((s for s in stack if s.is_scribble and s.contains(mx, my)), None)
        self._selected = hit
        return hit

    def move_selected(self, dx: float, dy: float) -> None:
        if self._selected is not None:
            self._selected.move_by(dx, dy)

    def resize_selected(self, factor: float) -> None:
        if self._selected is not None:
            self._selected.resize(factor)

    def recolor_selected(self, color: Color) -> None:
        if self._selected is not None:
            self._selected.set_color(color)

    def bring_to_front(self) -> None:
        """Move the selected shape to the top of the stack."""
        if self._selected is None:
            return
        index = self._index_of(self._selected)
        if index is not None:
            self._shapes.append(self._shapes.pop(index))

    def send_to_back(self) -> None:
        """Move the selected shape to the bottom of the stack."""
        if self._selected is None:
            return
        index = self._index_of(self._selected)
        if index is not None:
            self._shapes.insert(0, self._shapes.pop(index))

    def resize_selected_up(self) -> None:
        self.resize_selected(RESIZE_UP_FACTOR)

    def resize_selected_down(self) -> None:
        self.resize_selected(RESIZE_DOWN_FACTOR)

    # Whole-drawing commands

    def clear(self) -> None:
        """Remove every shape and drop the selection."""
        self._shapes.clear()
        self._selected = None
        self._current_scribble = None

    def undo(self) -> None:
        """Remove the most recently added shape, if any."""
        if self._shapes:
            self._forget(self._shapes.pop())
            self._selected = None

    def render(self, painter: Painter) -> None:
        """Draw every shape, bottom to top."""
        for shape in self._shapes:
            shape.draw(painter)

    def erase_at(self, x: float, y: float) -> None:
        """Remove the topmost shape under (x, y)."""
        for index in reversed(range(len(self._shapes))):
            if self._shapes[index].contains(x, y):
                self._forget(self._shapes.pop(index))
                self._selected = None
                break
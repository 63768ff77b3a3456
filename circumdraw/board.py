"""Interactive state of a three-point circumcircle drawing board."""

from __future__ import annotations

import operator
from dataclasses import dataclass

from circumdraw.geometry import (
    Circle,
    CollinearPointsError,
    Point,
    circumcircle,
    is_point_in_circle,
)

MAX_POINTS = 3
DEFAULT_POINT_RADIUS = 5
DEFAULT_CIRCLE_THICKNESS = 3
DEFAULT_LABEL_FORMAT = "Point {index}: ({x}, {y})"


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; ``right`` and ``bottom`` are exclusive."""

    left: int
    top: int
    right: int
    bottom: int

    def contains(self, point: Point) -> bool:
        """Return True if the point lies inside the rectangle."""
        return self.left <= point.x < self.right and self.top <= point.y < self.bottom

    def to_local(self, point: Point) -> Point:
        """Translate a point into coordinates relative to the top-left corner."""
        return Point(point.x - self.left, point.y - self.top)


def _parse_int(value: int | str) -> int:
    if isinstance(value, str):
        return int(value.strip())
    try:
        return operator.index(value)
    except TypeError as exc:
        raise ValueError(f"not an integer: {value!r}") from exc


class CircleBoard:
    """Collects three clicked points and lets them be dragged afterwards.

    Coordinates given to :meth:`press` and :meth:`move` are in window space;
    stored points are relative to ``draw_area``.  ``needs_repaint`` is set
    whenever the visible state changes; the caller clears it after drawing.
    """

    def __init__(
        self,
        draw_area: Rect,
        *,
        point_radius: int = DEFAULT_POINT_RADIUS,
        circle_thickness: int = DEFAULT_CIRCLE_THICKNESS,
        label_format: str = DEFAULT_LABEL_FORMAT,
    ) -> None:
        self.draw_area = draw_area
        self.point_radius = point_radius
        self.circle_thickness = circle_thickness
        self.label_format = label_format
        self.dragging = False
        self.need_redraw = False
        self.needs_repaint = False
        self._points: list[Point] = []
        self._selected: int | None = None

    @property
    def points(self) -> tuple[Point, ...]:
        """The clicked points, in click order, in draw-area coordinates."""
        return tuple(self._points)

    @property
    def selected_index(self) -> int | None:
        """Index of the point picked for dragging, if any."""
        return self._selected

    def press(self, point: Point) -> bool:
        """Handle a button press; return True if a point was added or picked."""
        if not self.draw_area.contains(point):
            return False
        local = self.draw_area.to_local(point)

        if len(self._points) < MAX_POINTS:
            if local in self._points:
                return False
            self._points.append(local)
            self.needs_repaint = True
            return True

        picked = False
        for index, existing in enumerate(self._points):
            if is_point_in_circle(local, existing, self.point_radius):
                self.dragging = True
                self._selected = index
                picked = True
        return picked

    def move(self, point: Point) -> None:
        """Handle pointer motion: move the picked point while dragging."""
        if not self.dragging or self._selected is None:
            return
        self._points[self._selected] = self.draw_area.to_local(point)
        self.need_redraw = True

    def release(self) -> None:
        """Handle a button release: end any drag in progress."""
        if self.dragging:
            self.dragging = False
            self.need_redraw = False

    def tick(self) -> bool:
        """Handle a redraw timer tick; return True if a repaint was requested."""
        if self.dragging and self.need_redraw:
            self.needs_repaint = True
            self.need_redraw = False
            return True
        return False

    def set_point_radius(self, value: int | str) -> None:
        """Set the radius of the point markers; zero becomes one."""
        self.needs_repaint = True
        radius = _parse_int(value)
        self.point_radius = 1 if radius == 0 else radius

    def set_circle_thickness(self, value: int | str) -> None:
        """Set the line thickness of the circumcircle."""
        self.needs_repaint = True
        self.circle_thickness = _parse_int(value)

    def circle(self) -> Circle | None:
        """Return the circle through the three points, or None if there is none."""
        if len(self._points) != MAX_POINTS:
            return None
        try:
            return circumcircle(*self._points)
        except CollinearPointsError:
            return None

    def point_labels(self) -> list[str]:
        """Return one coordinate label per clicked point, numbered from 1."""
        return [
            self.label_format.format(index=index, x=p.x, y=p.y)
            for index, p in enumerate(self._points, start=1)
        ]
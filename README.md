# circumdraw

Circumcircle geometry on integer points, plus a small state model for a
board on which three points are placed and then dragged around while the
circle through them is kept up to date.

## Installation

```
pip install circumdraw
```

To run the tests:

```
pip install "circumdraw[test]"
pytest
```

## Geometry

`circumdraw.geometry` works on `Point(x, y)` values with integer
coordinates. Both `Point` and `Circle` are frozen dataclasses.

```python
from circumdraw.geometry import Point, circumcircle, distance, is_point_in_circle

circle = circumcircle(Point(0, 0), Point(10, 0), Point(0, 10))
print(circle.center, circle.radius)

distance(Point(0, 0), Point(3, 4))               # 5.0
is_point_in_circle(Point(1, 1), Point(0, 0), 2)  # True
```

- `circumcircle(p1, p2, p3)` returns a `Circle(center, radius)`. The centre
  is rounded half up to whole pixels; the radius is measured from the
  truncated centre to `p1` and then rounded half up. Three points on one
  line have no circumcircle: `CollinearPointsError` (a `ValueError`) is
  raised for them.
- `distance(p1, p2)` returns the Euclidean distance as a float.
- `is_point_in_circle(test_point, center, radius)` is true for points inside
  the circle or on its edge.

## The board

`circumdraw.board.CircleBoard` models the interaction. It is built around a
`Rect(left, top, right, bottom)`, the drawing area in window coordinates;
`right` and `bottom` are exclusive. `Rect.contains(point)` tests whether a
point lies in it and `Rect.to_local(point)` turns a window point into one
relative to its top-left corner.

```python
from circumdraw.board import CircleBoard, Rect
from circumdraw.geometry import Point

board = CircleBoard(Rect(10, 10, 410, 310))
board.press(Point(20, 20))
board.press(Point(120, 20))
board.press(Point(20, 120))
board.circle()        # Circle through the three points, in area coordinates
board.point_labels()  # ['Point 1: (10, 10)', 'Point 2: (110, 10)', 'Point 3: (10, 110)']
```

- `press(point)` ignores presses outside the drawing area. While fewer than
  three points are placed, it adds the point unless an identical point is
  already there. Once three are placed, a press within `point_radius` of a
  point picks it and starts a drag. It returns True if a point was added or
  picked.
- `move(point)` moves the picked point while dragging and marks that a
  redraw is due.
- `tick()` is meant to be called from a redraw timer: while dragging, if a
  redraw is due it sets `needs_repaint`, clears the pending redraw and
  returns True.
- `release()` ends a drag.
- `set_point_radius(value)` and `set_circle_thickness(value)` take an int or
  a numeric string; a point radius of zero becomes one. A value that is not
  an integer raises `ValueError`.
- `circle()` returns the circumcircle of the three points, or `None` if
  fewer than three are placed or they are collinear.
- `point_labels()` returns one label per placed point, numbered from 1,
  using `label_format` (default `"Point {index}: ({x}, {y})"`).
- `points` and `selected_index` expose the placed points and the picked
  point's index; `dragging` and `needs_repaint` expose the state. The caller
  clears `needs_repaint` after drawing.

The constructor also takes `point_radius` (default 5), `circle_thickness`
(default 3) and `label_format` as keyword arguments.

## What it does not do

The package draws nothing and opens no window. It keeps the board's state
and computes the circle; rendering the points and the circle, and feeding in
mouse and timer events, is up to the caller. There is no command-line
program.
import pytest

from circumdraw.board import CircleBoard, Rect
from circumdraw.geometry import Circle, Point, circumcircle


@pytest.fixture
def board():
    return CircleBoard(Rect(10, 20, 410, 320))


def fill(board, *local_points):
    for x, y in local_points:
        assert board.press(Point(x + 10, y + 20))


def test_rect_contains_is_half_open():
    rect = Rect(10, 20, 410, 320)
    assert rect.contains(Point(10, 20))
    assert not rect.contains(Point(410, 100))
    assert not rect.contains(Point(100, 320))


def test_rect_to_local_offsets_by_corner():
    rect = Rect(10, 20, 410, 320)
    assert rect.to_local(Point(15, 27)) == Point(5, 7)


def test_press_inside_adds_local_point(board):
    assert board.press(Point(60, 70))
    assert board.points == (Point(50, 50),)
    assert board.needs_repaint


def test_press_outside_ignored(board):
    assert not board.press(Point(0, 0))
    assert board.points == ()


def test_duplicate_point_ignored(board):
    fill(board, (50, 50))
    assert not board.press(Point(60, 70))
    assert board.points == (Point(50, 50),)


def test_fourth_click_does_not_add(board):
    fill(board, (0, 0), (100, 0), (0, 100))
    board.press(Point(200, 200))
    assert len(board.points) == 3


def test_circle_none_until_three_points(board):
    fill(board, (0, 0), (100, 0))
    assert board.circle() is None


def test_circle_matches_circumcircle(board):
    fill(board, (-5 + 5, 0), (15, 0), (10, 5))
    expected = circumcircle(Point(0, 0), Point(15, 0), Point(10, 5))
    assert board.circle() == expected
    assert isinstance(board.circle(), Circle)


def test_collinear_points_give_no_circle(board):
    fill(board, (0, 0), (10, 10), (20, 20))
    assert board.circle() is None


def test_drag_moves_selected_point(board):
    fill(board, (50, 50), (150, 50), (50, 150))
    assert board.press(Point(62, 71))
    assert board.dragging
    assert board.selected_index == 0
    board.move(Point(30, 40))
    assert board.points[0] == Point(20, 20)
    assert board.need_redraw


def test_press_away_from_points_does_not_drag(board):
    fill(board, (50, 50), (150, 50), (50, 150))
    assert not board.press(Point(300, 300))
    assert not board.dragging


def test_move_without_drag_changes_nothing(board):
    fill(board, (50, 50), (150, 50), (50, 150))
    board.move(Point(30, 40))
    assert board.points == (Point(50, 50), Point(150, 50), Point(50, 150))


def test_tick_requests_repaint_once(board):
    fill(board, (50, 50), (150, 50), (50, 150))
    board.press(Point(60, 70))
    board.needs_repaint = False
    board.move(Point(100, 100))
    assert board.tick()
    assert board.needs_repaint
    assert not board.tick()


def test_release_ends_drag(board):
    fill(board, (50, 50), (150, 50), (50, 150))
    board.press(Point(60, 70))
    board.move(Point(100, 100))
    board.release()
    assert not board.dragging
    assert not board.tick()


def test_point_radius_zero_becomes_one(board):
    board.set_point_radius(0)
    assert board.point_radius == 1


def test_point_radius_from_text(board):
    board.set_point_radius(" 12 ")
    assert board.point_radius == 12


def test_invalid_point_radius_raises_and_keeps_value(board):
    with pytest.raises(ValueError):
        board.set_point_radius("abc")
    assert board.point_radius == 5


def test_circle_thickness_zero_is_kept(board):
    board.set_circle_thickness(0)
    assert board.circle_thickness == 0


def test_circle_thickness_set(board):
    board.set_circle_thickness("7")
    assert board.circle_thickness == 7


def test_point_labels_numbered_from_one():
    board = CircleBoard(Rect(0, 0, 100, 100), label_format="{index}:{x},{y}")
    board.press(Point(4, 9))
    board.press(Point(30, 2))
    assert board.point_labels() == ["1:4,9", "2:30,2"]


def test_larger_point_radius_widens_pick_area(board):
    fill(board, (50, 50), (150, 50), (50, 150))
    board.set_point_radius(20)
    assert board.press(Point(75, 70))
    assert board.selected_index == 0
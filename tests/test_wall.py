from houseplanner.geometry import Line, Point, Rect
from houseplanner.wall import Wall


def test_default_wall_sits_at_origin():
    wall = Wall()
    assert wall.start == Point(0, 0)
    assert wall.end == Point(0, 0)


def test_line_joins_the_ends():
    wall = Wall(Point(1, 2), Point(30, 40))
    assert wall.line() == Line(Point(1, 2), Point(30, 40))


def test_ends_can_be_moved():
    wall = Wall(Point(0, 0), Point(10, 0))
    wall.end = Point(10, 50)
    assert wall.line().p2 == Point(10, 50)
    assert not wall.is_horizontal()


def test_horizontal_threshold():
    assert Wall(Point(0, 0), Point(100, 4)).is_horizontal()
    assert not Wall(Point(0, 0), Point(100, 5)).is_horizontal()


def test_vertical_threshold():
    assert Wall(Point(0, 0), Point(4, 100)).is_vertical()
    assert not Wall(Point(0, 0), Point(5, 100)).is_vertical()


def test_wall_crossing_rect_intersects():
    rect = Rect(10, 10, 20, 20)
    wall = Wall(Point(0, 20), Point(50, 20))
    assert wall.intersects(rect)
    assert wall.is_in_rect(rect)


def test_wall_inside_rect_intersects():
    rect = Rect(0, 0, 100, 100)
    wall = Wall(Point(20, 20), Point(80, 30))
    assert wall.intersects(rect)
    assert wall.is_in_rect(rect)


def test_wall_outside_rect_does_not_intersect():
    rect = Rect(0, 0, 10, 10)
    wall = Wall(Point(50, 0), Point(50, 100))
    assert not wall.intersects(rect)
    assert not wall.is_in_rect(rect)


def test_wall_with_one_end_inside_reaches_rect():
    rect = Rect(0, 0, 10, 10)
    wall = Wall(Point(5, 5), Point(50, 5))
    assert wall.intersects(rect)
    assert wall.is_in_rect(rect)
import math

from usblview.decoder import Fix
from usblview.trajectory import (
    Point3,
    circle_trajectory,
    guide_trajectory,
    recycle_trajectory,
    trajectory_from_fixes,
)


def test_to_message_format():
    assert Point3(1, -2, 3).to_message() == "1+-2#3*"


def test_fix_at_origin_maps_to_centre():
    fixes = [Fix(x=0.0, y=0.0, z=0.0, status=1, time="")]
    assert trajectory_from_fixes(fixes) == [Point3(23915, 23915, 0)]


def test_invalid_fixes_are_dropped():
    fixes = [Fix(x=1.0, y=1.0, z=1.0, status=0, time="")]
    assert trajectory_from_fixes(fixes) == []


def test_fix_values_truncate_toward_zero():
    fixes = [Fix(x=-0.01, y=0.0, z=-0.01, status=2, time="")]
    (point,) = trajectory_from_fixes(fixes)
    assert point.x == 23914
    assert point.z == 0


def test_order_of_fixes_kept():
    fixes = [
        Fix(x=0.0, y=0.0, z=0.0, status=1, time=""),
        Fix(x=0.0, y=0.0, z=0.0, status=0, time=""),
        Fix(x=1.0, y=0.0, z=0.0, status=1, time=""),
    ]
    points = trajectory_from_fixes(fixes)
    assert len(points) == 2
    assert points[0].x < points[1].x


def test_recycle_endpoints():
    points = recycle_trajectory()
    assert points[0] == Point3(-4820, 5940, 2430)
    assert points[-1] == Point3(15220, 5940, -2000)
    assert Point3(9000, 5940, -2000) in points
    assert all(p.y == 5940 for p in points)


def test_circle_descends_and_stays_on_radius():
    points = circle_trajectory()
    zs = [p.z for p in points]
    assert all(b - a == -20 for a, b in zip(zs, zs[1:]))
    for p in points:
        distance = math.hypot(p.x - 4390, p.y + 7390)
        assert abs(distance - 3000) < 2


def test_guide_contains_straight_run():
    points = guide_trajectory()
    assert Point3(6000, 8799, -2030) in points
    assert Point3(20000, 8799, -2030) in points


def test_guide_z_bounds():
    points = guide_trajectory()
    assert all(-2060 < p.z < 15610 for p in points)
    assert points[0].z < 15610


def test_guide_descent_then_ascent():
    points = guide_trajectory()
    start = points.index(Point3(6000, 8799, -2030))
    descent = [p.z for p in points[:start]]
    assert all(b - a == -30 for a, b in zip(descent, descent[1:]))
    end = points.index(Point3(20000, 8799, -2030))
    ascent = [p.z for p in points[end + 1:]]
    assert ascent
    assert all(b - a == 30 for a, b in zip(ascent, ascent[1:]))
import math

import pytest

from raycube.raycast import (
    FOV,
    Ray,
    cast_ray,
    cast_rays,
    initial_rotation,
    normalize_rotation,
)

ROOM = ["11111", "10001", "10N01", "10001", "11111"]


@pytest.mark.parametrize(
    "marker, expected",
    [("N", -math.pi / 2), ("S", math.pi / 2), ("E", 0.0), ("W", math.pi)],
)
def test_initial_rotation(marker, expected):
    assert initial_rotation(marker) == pytest.approx(expected)


def test_initial_rotation_rejects_unknown_marker():
    with pytest.raises(ValueError):
        initial_rotation("Q")


def test_normalize_rotation_wraps_both_ways():
    assert normalize_rotation(2 * math.pi + 0.25) == pytest.approx(0.25)
    assert normalize_rotation(-2 * math.pi - 0.25) == pytest.approx(-0.25)
    assert normalize_rotation(1.0) == 1.0


def test_cast_ray_east_hits_wall_column():
    ray = cast_ray(ROOM, 2.5, 2.5, 0.0, "N")
    assert ray.x == pytest.approx(4.0)
    assert ray.y == pytest.approx(2.5)
    assert ray.hyp == pytest.approx(math.hypot(ray.x - 2.5, ray.y - 2.5))
    assert ray.door is False


def test_cast_ray_north_hits_wall_row():
    ray = cast_ray(ROOM, 2.5, 2.5, -math.pi / 2, "N")
    assert ray.y == pytest.approx(1.0)
    assert ray.x == pytest.approx(2.5)
    assert ROOM[round(ray.y) - 1][math.floor(ray.x)] == "1"


def test_cast_ray_from_inside_wall_has_zero_length():
    ray = cast_ray(["111", "111"], 0.5, 0.5, 0.3, "N")
    assert ray.hyp == 0
    assert (ray.x, ray.y) == (0.5, 0.5)


def test_cast_ray_keeps_angle():
    ray = cast_ray(ROOM, 2.5, 2.5, 0.7, "N")
    assert ray.angle == 0.7


def test_cast_rays_cover_field_of_view():
    rays = cast_rays(ROOM, 2.5, 2.5, 0.0, "N")
    angles = [ray.angle for ray in rays]
    assert angles == sorted(angles)
    assert angles[0] == pytest.approx(-FOV / 2)
    assert angles[-1] <= FOV / 2
    for ray in rays:
        assert isinstance(ray, Ray)
        assert ray.hyp == pytest.approx(math.hypot(ray.x - 2.5, ray.y - 2.5))
        assert 1.0 - 1e-9 <= ray.x <= 4.0 + 1e-9
        assert 1.0 - 1e-9 <= ray.y <= 4.0 + 1e-9


def test_cast_rays_normalizes_rotation():
    full_turn = cast_rays(ROOM, 2.5, 2.5, 2 * math.pi, "N")
    none = cast_rays(ROOM, 2.5, 2.5, 0.0, "N")
    assert full_turn[0].angle == pytest.approx(none[0].angle)
    assert len(full_turn) == len(none)


def test_cast_ray_passes_through_open_door_and_markers():
    grid = ["111111", "1NoAX1", "111111"]
    ray = cast_ray(grid, 1.5, 1.5, 0.0, "N")
    assert grid[1][math.floor(ray.x)] == "1"
    assert ray.hyp == pytest.approx(ray.x - 1.5)
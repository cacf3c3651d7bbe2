import pytest

from polybow.game import screen_to_world, world_to_screen
from polybow.physics import Vec2


def test_camera_point_maps_to_screen_centre():
    assert world_to_screen(Vec2(0.0, 0.0), Vec2(0.0, 0.0), (800, 600)) == Vec2(400.0, 300.0)


def test_camera_position_is_always_centre():
    camera = Vec2(123.5, -42.0)
    assert world_to_screen(camera, camera, (640, 480)) == Vec2(320.0, 240.0)


def test_world_up_is_screen_up():
    camera = Vec2(10.0, 10.0)
    below = world_to_screen(Vec2(10.0, 0.0), camera, (800, 600))
    above = world_to_screen(Vec2(10.0, 50.0), camera, (800, 600))
    assert above.y < below.y
    assert above.x == below.x


def test_world_right_is_screen_right():
    camera = Vec2(0.0, 0.0)
    left = world_to_screen(Vec2(-5.0, 0.0), camera, (800, 600))
    right = world_to_screen(Vec2(5.0, 0.0), camera, (800, 600))
    assert right.x - left.x == pytest.approx(10.0)
    assert right.y == left.y


def test_screen_centre_is_camera():
    camera = Vec2(-300.0, 75.0)
    assert screen_to_world(Vec2(400.0, 300.0), camera, (800, 600)) == camera


@pytest.mark.parametrize(
    "point,camera,size",
    [
        (Vec2(0.0, 0.0), Vec2(0.0, 0.0), (800, 600)),
        (Vec2(17.5, -3.25), Vec2(100.0, 200.0), (1280, 720)),
        (Vec2(-999.0, 512.0), Vec2(-4.0, 8.0), (333, 777)),
    ],
)
def test_world_screen_round_trip(point, camera, size):
    screen = world_to_screen(point, camera, size)
    back = screen_to_world(screen, camera, size)
    assert back.x == pytest.approx(point.x)
    assert back.y == pytest.approx(point.y)


@pytest.mark.parametrize(
    "pixel,camera,size",
    [
        (Vec2(0.0, 0.0), Vec2(5.0, 5.0), (800, 600)),
        (Vec2(799.0, 599.0), Vec2(-50.0, 20.0), (800, 600)),
    ],
)
def test_screen_world_round_trip(pixel, camera, size):
    world_point = screen_to_world(pixel, camera, size)
    back = world_to_screen(world_point, camera, size)
    assert back.x == pytest.approx(pixel.x)
    assert back.y == pytest.approx(pixel.y)


def test_moving_camera_shifts_screen_position_opposite():
    point = Vec2(50.0, 50.0)
    first = world_to_screen(point, Vec2(0.0, 0.0), (800, 600))
    second = world_to_screen(point, Vec2(20.0, 0.0), (800, 600))
    assert first.x - second.x == pytest.approx(20.0)
    assert first.y == second.y
import pytest

from pacmaze.collision import (
    CapsuleCollision,
    CircleCollision,
    ObjectType,
    capsule_circle_collide,
    capsules_collide,
    check_collision,
    circles_collide,
    nearest_point,
)
from pacmaze.vector2d import Vector2D


def horizontal_capsule(length=10.0, radius=1.0):
    return CapsuleCollision(radius=radius, point=(Vector2D(0.0, 0.0), Vector2D(length, 0.0)))


def test_is_hit_target():
    capsule = CapsuleCollision(hit_object_type=[ObjectType.PLAYER, ObjectType.WALL])
    assert capsule.is_hit_target(ObjectType.WALL) is True
    assert capsule.is_hit_target(ObjectType.FOOD) is False


def test_default_capsule_hits_nothing():
    capsule = CapsuleCollision()
    assert all(not capsule.is_hit_target(kind) for kind in ObjectType)
    assert capsule.object_type is ObjectType.NONE


def test_circles_overlap():
    a = CircleCollision(Vector2D(0.0, 0.0), 1.0)
    assert circles_collide(a, CircleCollision(Vector2D(1.5, 0.0), 1.0)) is True


def test_touching_circles_do_not_collide():
    a = CircleCollision(Vector2D(0.0, 0.0), 1.0)
    assert circles_collide(a, CircleCollision(Vector2D(2.0, 0.0), 1.0)) is False


def test_nearest_point_before_start_is_start():
    capsule = horizontal_capsule()
    assert nearest_point(capsule, Vector2D(-5.0, 3.0)) == capsule.point[0]


def test_nearest_point_after_end_is_end():
    capsule = horizontal_capsule()
    assert nearest_point(capsule, Vector2D(15.0, -3.0)) == capsule.point[1]


def test_nearest_point_projects_onto_segment():
    capsule = horizontal_capsule()
    assert nearest_point(capsule, Vector2D(4.0, 5.0)) == Vector2D(4.0, 0.0)


def test_nearest_point_on_degenerate_capsule_is_its_point():
    capsule = CapsuleCollision(point=(Vector2D(2.0, 3.0), Vector2D(2.0, 3.0)))
    assert nearest_point(capsule, Vector2D(7.0, -1.0)) == Vector2D(2.0, 3.0)


def test_capsule_circle_beside_segment():
    capsule = horizontal_capsule()
    assert capsule_circle_collide(capsule, CircleCollision(Vector2D(5.0, 1.5), 1.0)) is True
    assert capsule_circle_collide(capsule, CircleCollision(Vector2D(5.0, 3.0), 1.0)) is False


def test_capsule_circle_past_end():
    capsule = horizontal_capsule()
    assert capsule_circle_collide(capsule, CircleCollision(Vector2D(11.5, 0.0), 1.0)) is True
    assert capsule_circle_collide(capsule, CircleCollision(Vector2D(12.0, 0.0), 1.0)) is False


def test_parallel_capsules():
    a = horizontal_capsule()
    near = CapsuleCollision(radius=1.0, point=(Vector2D(0.0, 1.5), Vector2D(10.0, 1.5)))
    far = CapsuleCollision(radius=1.0, point=(Vector2D(0.0, 5.0), Vector2D(10.0, 5.0)))
    assert capsules_collide(a, near) is True
    assert capsules_collide(a, far) is False


def test_capsule_collision_is_symmetric():
    a = horizontal_capsule()
    b = CapsuleCollision(radius=0.5, point=(Vector2D(9.0, 1.0), Vector2D(20.0, 1.0)))
    assert capsules_collide(a, b) == capsules_collide(b, a)
    assert capsules_collide(a, b) is True


def test_crossing_thin_capsules_only_check_end_points():
    a = CapsuleCollision(radius=0.5, point=(Vector2D(-10.0, 0.0), Vector2D(10.0, 0.0)))
    b = CapsuleCollision(radius=0.5, point=(Vector2D(0.0, -10.0), Vector2D(0.0, 10.0)))
    assert capsules_collide(a, b) is False


def test_check_collision_dispatches():
    capsule = horizontal_capsule()
    circle = CircleCollision(Vector2D(5.0, 1.5), 1.0)
    assert check_collision(capsule, circle) == capsule_circle_collide(capsule, circle)
    assert check_collision(circle, capsule) == capsule_circle_collide(capsule, circle)
    assert check_collision(capsule, capsule) is True
    other = CircleCollision(Vector2D(5.0, 1.0), 1.0)
    assert check_collision(circle, other) == circles_collide(circle, other)


def test_check_collision_rejects_other_types():
    with pytest.raises(TypeError):
        check_collision("shape", 1)


def test_translated_moves_points_and_keeps_original():
    capsule = horizontal_capsule()
    capsule.hit_object_type.append(ObjectType.PLAYER)
    offset = Vector2D(3.0, 4.0)
    moved = capsule.translated(offset)
    assert moved.point == (capsule.point[0] + offset, capsule.point[1] + offset)
    assert capsule.point == (Vector2D(0.0, 0.0), Vector2D(10.0, 0.0))
    moved.hit_object_type.append(ObjectType.WALL)
    assert capsule.hit_object_type == [ObjectType.PLAYER]


def test_copy_is_independent():
    capsule = CapsuleCollision(hit_object_type=[ObjectType.ENEMY], radius=2.0)
    duplicate = capsule.copy()
    duplicate.hit_object_type.clear()
    duplicate.radius = 9.0
    assert capsule.hit_object_type == [ObjectType.ENEMY]
    assert capsule.radius == 2.0
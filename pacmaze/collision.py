"""Circle and capsule collision shapes and their intersection tests."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from pacmaze.vector2d import Vector2D


class ObjectType(Enum):
    """What kind of object a collision shape belongs to."""

    NONE = 0
    PLAYER = 1
    ENEMY = 2
    WALL = 3
    FOOD = 4
    POWER_FOOD = 5
    SPECIAL = 6


@dataclass
class CapsuleCollision:
    """A line segment with a radius; points are relative to the owner's location."""

    is_blocking: bool = False
    object_type: ObjectType = ObjectType.NONE
    hit_object_type: list[ObjectType] = field(default_factory=list)
    radius: float = 0.0
    point: tuple[Vector2D, Vector2D] = (Vector2D(), Vector2D())

    def is_hit_target(self, object_type: ObjectType) -> bool:
        """Whether this shape reacts to objects of ``object_type``."""
        return object_type in self.hit_object_type

    def copy(self) -> CapsuleCollision:
        """An independent copy of this shape."""
        return replace(self, hit_object_type=list(self.hit_object_type))

    def translated(self, offset: Vector2D) -> CapsuleCollision:
        """A copy whose segment end points are moved by ``offset``."""
        start, end = self.point
        return replace(
            self,
            hit_object_type=list(self.hit_object_type),
            point=(start + offset, end + offset),
        )


@dataclass
class CircleCollision:
    """A circle with a centre and a radius."""

    point: Vector2D = Vector2D()
    radius: float = 0.0


def circles_collide(c1: CircleCollision, c2: CircleCollision) -> bool:
    """Whether two circles overlap (touching does not count)."""
    reach = c1.radius + c2.radius
    return (c1.point - c2.point).sqr_length() < reach * reach


def nearest_point(capsule: CapsuleCollision, point: Vector2D) -> Vector2D:
    """The point on the capsule's segment closest to ``point``."""
    start, end = capsule.point
    line = end - start
    from_start = point - start
    from_end = point - end
    if Vector2D.dot(line, from_start) < 0.0:
        return start
    if Vector2D.dot(line, from_end) > 0.0:
        return end
    direction = line.normalize()
    return start + direction * Vector2D.dot(direction, from_start)


def capsule_circle_collide(capsule: CapsuleCollision, circle: CircleCollision) -> bool:
    """Whether a capsule and a circle overlap."""
    closest = CircleCollision(nearest_point(capsule, circle.point), capsule.radius)
    return circles_collide(closest, circle)


def capsules_collide(c1: CapsuleCollision, c2: CapsuleCollision) -> bool:
    """Whether either capsule touches an end point circle of the other."""
    return any(
        capsule_circle_collide(capsule, CircleCollision(end_point, other.radius))
        for capsule, other in ((c1, c2), (c2, c1))
        for end_point in other.point
    )


def check_collision(c1: object, c2: object) -> bool:
    """Intersection test for any pair of circle and capsule shapes."""
    if isinstance(c1, CircleCollision) and isinstance(c2, CircleCollision):
        return circles_collide(c1, c2)
    if isinstance(c1, CapsuleCollision) and isinstance(c2, CircleCollision):
        return capsule_circle_collide(c1, c2)
    if isinstance(c1, CircleCollision) and isinstance(c2, CapsuleCollision):
        return capsule_circle_collide(c2, c1)
    if isinstance(c1, CapsuleCollision) and isinstance(c2, CapsuleCollision):
        return capsules_collide(c1, c2)
    raise TypeError(
        f"cannot test collision between {type(c1).__name__} and {type(c2).__name__}"
    )
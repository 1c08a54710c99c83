import pygame

from pacmaze.collision import ObjectType
from pacmaze.config import OBJECT_SIZE
from pacmaze.game_object import MobilityType
from pacmaze.vector2d import Vector2D
from pacmaze.wall import Wall


def _wall():
    wall = Wall()
    wall.initialize()
    return wall


def test_initialize_sets_collision():
    wall = _wall()
    assert wall.collision.is_blocking is True
    assert wall.collision.object_type is ObjectType.WALL
    assert wall.collision.is_hit_target(ObjectType.PLAYER)
    assert wall.collision.is_hit_target(ObjectType.ENEMY)
    assert not wall.collision.is_hit_target(ObjectType.FOOD)
    assert wall.collision.radius * 2 == OBJECT_SIZE
    assert wall.mobility is MobilityType.STATIONARY


def test_vertical_run():
    wall = _wall()
    wall.set_wall_data(1, 3)
    assert wall.collision.point == (Vector2D(), Vector2D(0.0, 48.0))


def test_horizontal_run():
    wall = _wall()
    wall.set_wall_data(4, 1)
    assert wall.collision.point == (Vector2D(), Vector2D(72.0, 0.0))


def test_single_tile_is_a_point():
    wall = _wall()
    wall.set_wall_data(1, 1)
    start, end = wall.collision.point
    assert start == end == Vector2D()


def test_draw_draws_nothing():
    screen = pygame.Surface((10, 10))
    screen.fill(pygame.Color(0, 0, 0))
    wall = _wall()
    wall.image = pygame.Surface((4, 4))
    wall.image.fill(pygame.Color(255, 0, 0))
    wall.location = Vector2D(5.0, 5.0)
    wall.draw(screen, Vector2D())
    assert screen.get_at((5, 5)) == pygame.Color(0, 0, 0)
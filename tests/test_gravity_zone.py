import pygame

from entities.player import Player
from world.gravity_zone import GravityZone


def test_enter_reorients_once():
    zone = GravityZone((0, 0, 60, 60), 180)
    p = Player(30, 30)

    assert zone.update(p) is True
    assert p.gravity_dir == pygame.Vector2(0, -1)

    p.reorient(0)
    assert zone.update(p) is False  # still inside
    assert p.gravity_dir == pygame.Vector2(0, 1)


def test_reenter_triggers_again():
    zone = GravityZone((0, 0, 60, 60), 270)
    p = Player(30, 30)
    zone.update(p)

    p.rect.center = (300, 300)
    assert zone.update(p) is False

    p.reorient(0)
    p.rect.center = (30, 30)
    assert zone.update(p) is True
    assert p.gravity_dir == pygame.Vector2(1, 0)


def test_outside_does_nothing():
    zone = GravityZone((0, 0, 60, 60), 90)
    p = Player(300, 300)
    assert zone.update(p) is False
    assert p.gravity_dir == pygame.Vector2(0, 1)

"""
Unit tests for Invaders entity models.

Covers box intersection, the player cannon, projectiles and their
manager, and the enemy formation (sweep, bounce, firing, invasion).
"""

import random

import pytest

from invaders.config import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    ENEMY_COLS,
    ENEMY_DESCENT,
    ENEMY_ROWS,
    ENEMY_SHOT_INTERVAL,
    INVASION_LINE,
    PLAYER_HEIGHT,
    PLAYER_SHOT_COOLDOWN,
    PLAYER_WIDTH,
    PROJECTILE_HEIGHT,
)
from invaders.models.enemy import Enemy, Formation, build_grid
from invaders.models.geometry import Box, intersects
from invaders.models.player import Player
from invaders.models.projectile import (
    Faction,
    Projectile,
    ProjectileManager,
    enemy_projectile,
    player_projectile,
)


def make_shot(x=0.0, y=0.0, faction=Faction.PLAYER, speed=None):
    if speed is None:
        speed = -7 if faction is Faction.PLAYER else 3
    return Projectile(x=x, y=y, width=5, height=10, speed=speed, faction=faction)


def make_enemy(x=0.0, y=0.0, alive=True):
    return Enemy(x=x, y=y, width=40, height=30, alive=alive)


# ── Geometry ───────────────────────────────────────────────────────────────


class TestIntersects:
    def test_overlapping(self):
        assert intersects(Box(0, 0, 10, 10), Box(5, 5, 10, 10))

    def test_contained(self):
        assert intersects(Box(0, 0, 100, 100), Box(40, 40, 5, 5))

    def test_separate(self):
        assert not intersects(Box(0, 0, 10, 10), Box(50, 50, 10, 10))

    def test_touching_vertical_edge(self):
        assert not intersects(Box(0, 0, 10, 10), Box(10, 0, 10, 10))

    def test_touching_horizontal_edge(self):
        assert not intersects(Box(0, 0, 10, 10), Box(0, 10, 10, 10))

    def test_touching_corner(self):
        assert not intersects(Box(0, 0, 10, 10), Box(10, 10, 10, 10))

    def test_overlap_on_one_axis_only(self):
        assert not intersects(Box(0, 0, 10, 10), Box(5, 20, 10, 10))

    def test_symmetry(self):
        a, b = Box(3, 4, 10, 6), Box(9, 8, 4, 4)
        assert intersects(a, b) == intersects(b, a)

    def test_entities_are_boxes(self):
        enemy = make_enemy(100, 100)
        shot = make_shot(110, 110)
        assert intersects(shot, enemy)

    def test_box_edges(self):
        box = Box(10, 20, 30, 40)
        assert (box.left, box.right, box.top, box.bottom) == (10, 40, 20, 60)
        assert box.center_x == 25
        assert box.rect == (10, 20, 30, 40)


# ── Player ─────────────────────────────────────────────────────────────────


class TestPlayer:
    def test_spawn_position(self):
        player = Player.spawn()
        assert player.x == ARENA_WIDTH / 2 - PLAYER_WIDTH / 2
        assert player.y == ARENA_HEIGHT - PLAYER_HEIGHT - 10
        assert player.last_shot_time is None

    def test_move_right(self):
        player = Player.spawn()
        start = player.x
        player.move(1)
        assert player.x == start + player.speed

    def test_move_left(self):
        player = Player.spawn()
        start = player.x
        player.move(-1)
        assert player.x == start - player.speed

    def test_no_direction_no_move(self):
        player = Player.spawn()
        start = player.x
        player.move(0)
        assert player.x == start

    def test_clamped_left(self):
        player = Player.spawn()
        player.x = 2
        player.move(-1)
        assert player.x == 0

    def test_clamped_right(self):
        player = Player.spawn()
        player.x = ARENA_WIDTH - PLAYER_WIDTH - 2
        player.move(1)
        assert player.x == ARENA_WIDTH - PLAYER_WIDTH

    def test_first_shot_always_allowed(self):
        player = Player.spawn()
        assert player.can_fire(0.0)

    def test_fire_sets_timestamp(self):
        player = Player.spawn()
        assert player.fire(123.0) is not None
        assert player.last_shot_time == 123.0

    def test_shot_centred_above_cannon(self):
        player = Player.spawn()
        shot = player.fire(0.0)
        assert shot.center_x == pytest.approx(player.center_x)
        assert shot.bottom == player.top
        assert shot.speed < 0
        assert shot.faction is Faction.PLAYER

    def test_cooldown_blocks(self):
        player = Player.spawn()
        player.fire(0.0)
        assert player.fire(400.0) is None
        assert player.last_shot_time == 0.0

    def test_respawn_repositions_in_place(self):
        player = Player.spawn()
        player.move(1)
        player.fire(10.0)
        player.respawn()
        assert player == Player.spawn()

    def test_cooldown_is_strict(self):
        player = Player.spawn()
        player.fire(0.0)
        assert player.fire(PLAYER_SHOT_COOLDOWN) is None
        assert player.fire(PLAYER_SHOT_COOLDOWN + 1) is not None


# ── Projectiles ────────────────────────────────────────────────────────────


class TestProjectile:
    def test_update_applies_signed_speed(self):
        up = make_shot(y=100)
        down = make_shot(y=100, faction=Faction.ENEMY)
        up.update()
        down.update()
        assert up.y == 93
        assert down.y == 103

    def test_player_shot_off_screen_when_fully_above(self):
        assert make_shot(y=-PROJECTILE_HEIGHT).is_off_screen()
        assert not make_shot(y=-PROJECTILE_HEIGHT + 1).is_off_screen()

    def test_enemy_shot_off_screen_when_fully_below(self):
        assert make_shot(y=ARENA_HEIGHT, faction=Faction.ENEMY).is_off_screen()
        assert not make_shot(y=ARENA_HEIGHT - 1, faction=Faction.ENEMY).is_off_screen()

    def test_player_projectile_helper(self):
        shooter = Box(100, 500, 50, 20)
        shot = player_projectile(shooter)
        assert shot.x == 100 + 25 - 2.5
        assert shot.y == 490

    def test_enemy_projectile_helper(self):
        shot = enemy_projectile(make_enemy(50, 50))
        assert shot.x == 50 + 20 - 2.5
        assert shot.y == 80
        assert shot.speed > 0
        assert shot.faction is Faction.ENEMY


class TestProjectileManager:
    def test_add_routes_by_faction(self):
        mgr = ProjectileManager()
        mgr.add(make_shot())
        mgr.add(make_shot(faction=Faction.ENEMY))
        mgr.add(make_shot(faction=Faction.ENEMY))
        assert mgr.player_count == 1
        assert mgr.enemy_count == 2
        assert mgr.total_count == 3

    def test_update_all(self):
        mgr = ProjectileManager()
        up, down = make_shot(y=50), make_shot(y=50, faction=Faction.ENEMY)
        mgr.add(up)
        mgr.add(down)
        mgr.update_all()
        assert (up.y, down.y) == (43, 53)

    def test_cull(self):
        mgr = ProjectileManager()
        mgr.add(make_shot(y=-20))
        mgr.add(make_shot(y=300))
        mgr.add(make_shot(y=ARENA_HEIGHT + 5, faction=Faction.ENEMY))
        mgr.add(make_shot(y=300, faction=Faction.ENEMY))
        assert mgr.cull() == 2
        assert mgr.player_count == 1
        assert mgr.enemy_count == 1

    def test_discard_matches_identity(self):
        mgr = ProjectileManager()
        a, b = make_shot(10, 10), make_shot(10, 10)
        mgr.add(a)
        mgr.add(b)
        mgr.discard([a])
        assert len(mgr.player_projectiles) == 1
        assert mgr.player_projectiles[0] is b

    def test_discard_nothing(self):
        mgr = ProjectileManager()
        mgr.add(make_shot())
        mgr.discard([])
        assert mgr.player_count == 1

    def test_reset(self):
        mgr = ProjectileManager()
        mgr.add(make_shot())
        mgr.add(make_shot(faction=Faction.ENEMY))
        mgr.reset()
        assert mgr.total_count == 0


# ── Enemies ────────────────────────────────────────────────────────────────


class TestEnemy:
    def test_kill_once(self):
        enemy = make_enemy()
        assert enemy.kill() is True
        assert enemy.kill() is False
        assert not enemy.alive


class TestFormationLayout:
    def test_grid_size(self):
        assert len(build_grid()) == ENEMY_ROWS * ENEMY_COLS

    def test_grid_corners(self):
        grid = build_grid()
        assert (grid[0].x, grid[0].y) == (50, 50)
        assert (grid[-1].x, grid[-1].y) == (50 + 9 * 60, 50 + 4 * 40)

    def test_all_alive(self):
        formation = Formation()
        assert formation.alive_count == ENEMY_ROWS * ENEMY_COLS
        assert not formation.all_destroyed

    def test_reset(self):
        formation = Formation()
        formation.enemies[3].kill()
        formation.direction = -1
        formation.last_shot_time = 999.0
        formation.update()
        formation.reset()
        assert formation.enemies == build_grid()
        assert formation.direction == 1
        assert formation.last_shot_time == 0.0


class TestFormationMovement:
    def test_sweep_moves_every_enemy(self):
        formation = Formation()
        formation.enemies[0].kill()
        before = [e.x for e in formation.enemies]
        formation.update()
        assert [e.x for e in formation.enemies] == [x + 1 for x in before]

    def test_right_edge_touch_is_not_a_bounce(self):
        formation = Formation(enemies=[make_enemy(x=ARENA_WIDTH - 41)])
        assert formation.update() is False
        assert formation.enemies[0].right == ARENA_WIDTH
        assert formation.direction == 1

    def test_bounce_on_right_edge(self):
        formation = Formation(enemies=[make_enemy(x=ARENA_WIDTH - 40)])
        assert formation.update() is True
        assert formation.direction == -1
        assert formation.enemies[0].y == ENEMY_DESCENT

    def test_bounce_on_left_edge(self):
        formation = Formation(enemies=[make_enemy(x=0)], direction=-1)
        assert formation.update() is True
        assert formation.direction == 1
        assert formation.enemies[0].y == ENEMY_DESCENT

    def test_dead_enemies_ignored_for_bounds(self):
        formation = Formation(enemies=[
            make_enemy(x=ARENA_WIDTH - 10, alive=False),
            make_enemy(x=100),
        ])
        assert formation.update() is False
        assert formation.enemies[0].x == ARENA_WIDTH - 9

    def test_dead_enemies_descend_too(self):
        formation = Formation(enemies=[
            make_enemy(x=ARENA_WIDTH - 40),
            make_enemy(x=0, y=100, alive=False),
        ])
        formation.update()
        assert formation.enemies[0].y == ENEMY_DESCENT
        assert formation.enemies[1].y == 100 + ENEMY_DESCENT

    def test_no_alive_no_bounce(self):
        formation = Formation(enemies=[make_enemy(x=ARENA_WIDTH, alive=False)])
        assert formation.update() is False
        assert formation.direction == 1
        assert formation.enemies[0].y == 0


class TestFormationFiring:
    def test_waits_for_interval(self):
        formation = Formation()
        assert formation.try_fire(ENEMY_SHOT_INTERVAL, random.Random(0)) is None
        assert formation.last_shot_time == 0.0

    def test_fires_after_interval(self):
        formation = Formation()
        shot = formation.try_fire(ENEMY_SHOT_INTERVAL + 1, random.Random(0))
        assert shot is not None
        assert shot.faction is Faction.ENEMY
        assert formation.last_shot_time == ENEMY_SHOT_INTERVAL + 1

    def test_interval_restarts_after_shot(self):
        formation = Formation()
        rng = random.Random(0)
        formation.try_fire(1001.0, rng)
        assert formation.try_fire(1500.0, rng) is None
        assert formation.try_fire(2002.0, rng) is not None

    def test_no_alive_no_shot_and_timer_untouched(self):
        formation = Formation()
        for enemy in formation.enemies:
            enemy.kill()
        assert formation.try_fire(5000.0, random.Random(0)) is None
        assert formation.last_shot_time == 0.0

    def test_only_alive_enemies_fire(self):
        for seed in range(10):
            formation = Formation()
            for i, enemy in enumerate(formation.enemies):
                if i != 7:
                    enemy.kill()
            shooter = formation.enemies[7]
            shot = formation.try_fire(1001.0, random.Random(seed))
            assert shot.center_x == pytest.approx(shooter.center_x)
            assert shot.top == shooter.bottom

    def test_seeded_selection_is_reproducible(self):
        a, b = Formation(), Formation()
        rng_a, rng_b = random.Random(42), random.Random(42)
        xs_a = [a.try_fire(1001.0 * n, rng_a).x for n in range(1, 6)]
        xs_b = [b.try_fire(1001.0 * n, rng_b).x for n in range(1, 6)]
        assert xs_a == xs_b


class TestInvasion:
    def test_above_line(self):
        formation = Formation(enemies=[make_enemy(y=INVASION_LINE - 30)])
        assert not formation.has_invaded()

    def test_past_line(self):
        formation = Formation(enemies=[make_enemy(y=INVASION_LINE - 29)])
        assert formation.has_invaded()

    def test_dead_enemy_does_not_invade(self):
        formation = Formation(enemies=[make_enemy(y=ARENA_HEIGHT, alive=False)])
        assert not formation.has_invaded()

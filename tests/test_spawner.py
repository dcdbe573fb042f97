import random
import unittest

from plinko.colors import ColorCycleController
from plinko.config import (
    BALL_COLLISION_TYPE,
    BALL_RADIUS,
    SPAWN_INTERVAL,
    SPAWN_JITTER,
    ConfigError,
)
from plinko.spawner import BallSpawner
from plinko.world import World

SPAWN_POINT = (400.0, 20.0)


class TestBallSpawner(unittest.TestCase):
    def setUp(self):
        self.world = World.create()
        self.colors = ColorCycleController()
        self.spawner = BallSpawner(self.colors, rng=random.Random(7))

    def test_schedule_offsets(self):
        self.spawner.spawn(self.world, 5, SPAWN_POINT)
        pending = self.world.scheduler.pending()
        self.assertEqual(len(pending), 5)
        for i, due in enumerate(pending):
            self.assertAlmostEqual(due, i * SPAWN_INTERVAL)
        self.assertEqual(self.world.count("ball"), 0)

    def test_balls_arrive_one_interval_apart(self):
        self.spawner.spawn(self.world, 5, SPAWN_POINT)
        counts = []
        self.world.scheduler.advance(0.0)
        counts.append(self.world.count("ball"))
        for _ in range(4):
            self.world.scheduler.advance(SPAWN_INTERVAL / 2)
            counts.append(self.world.count("ball"))
            self.world.scheduler.advance(SPAWN_INTERVAL / 2)
            counts.append(self.world.count("ball"))
        self.assertEqual(counts, [1, 1, 2, 2, 3, 3, 4, 4, 5])

    def test_ball_properties(self):
        self.spawner.spawn(self.world, 20, SPAWN_POINT)
        self.world.scheduler.advance(1.0)
        balls = self.world.entities("ball")
        self.assertEqual(len(balls), 20)
        for ball in balls:
            x, y = ball.body.position
            self.assertLessEqual(abs(x - SPAWN_POINT[0]), SPAWN_JITTER)
            self.assertEqual(y, SPAWN_POINT[1])
            self.assertEqual(ball.shape.radius, BALL_RADIUS)
            self.assertEqual(ball.shape.collision_type, BALL_COLLISION_TYPE)
            self.assertGreater(ball.body.mass, 0)
            self.assertEqual(self.colors.color_index(ball.id), self.colors.palette.neutral_index)
            self.assertEqual(ball.style.fill, self.colors.palette.neutral)
        self.assertGreater(len({b.body.position.x for b in balls}), 1)

    def test_material_keeps_balls_lively(self):
        self.spawner.spawn(self.world, 1, SPAWN_POINT)
        self.world.scheduler.advance(0)
        material = self.world.entities("ball")[0].material
        self.assertTrue(0.3 <= material.restitution <= 0.8)
        self.assertLess(material.static_friction, 0.5)

    def test_zero_balls(self):
        self.spawner.spawn(self.world, 0, SPAWN_POINT)
        self.assertEqual(len(self.world.scheduler), 0)

    def test_negative_count_rejected(self):
        with self.assertRaises(ConfigError):
            self.spawner.spawn(self.world, -1, SPAWN_POINT)

    def test_stale_generation_is_dropped(self):
        self.spawner.spawn(self.world, 5, SPAWN_POINT)
        self.world.scheduler.advance(0)
        self.assertEqual(self.world.count("ball"), 1)
        self.world.next_generation()
        self.world.scheduler.advance(1.0)
        self.assertEqual(self.world.count("ball"), 1)
        self.assertEqual(self.spawner.dropped, 4)

    def test_pending_tracks_current_generation(self):
        self.spawner.spawn(self.world, 5, SPAWN_POINT)
        self.world.scheduler.advance(SPAWN_INTERVAL)
        self.assertEqual(self.spawner.pending(self.world), 3)
        self.world.next_generation()
        self.assertEqual(self.spawner.pending(self.world), 0)
        self.assertEqual(len(self.world.scheduler), 3)
        self.spawner.spawn(self.world, 2, SPAWN_POINT)
        self.assertEqual(self.spawner.pending(self.world), 2)
        self.world.scheduler.advance(1.0)
        self.assertEqual(self.spawner.pending(self.world), 0)
        self.assertEqual(self.spawner.dropped, 3)

    def test_seeded_jitter_repeats(self):
        positions = []
        for _ in range(2):
            world = World.create()
            spawner = BallSpawner(ColorCycleController(), rng=random.Random(3))
            spawner.spawn(world, 3, SPAWN_POINT)
            world.scheduler.advance(1.0)
            positions.append([tuple(b.body.position) for b in world.entities("ball")])
        self.assertEqual(positions[0], positions[1])


if __name__ == "__main__":
    unittest.main()

import logging
import random

from plinko import bodies
from plinko.config import (
    BALL_AIR_DRAG,
    BALL_COLLISION_TYPE,
    BALL_DENSITY,
    BALL_ELASTICITY,
    BALL_FRICTION,
    BALL_RADIUS,
    BALL_STATIC_FRICTION,
    BALL_STROKE,
    SPAWN_INTERVAL,
    SPAWN_JITTER,
    ConfigError,
)
from plinko.world import Material, Style

logger = logging.getLogger(__name__)

BALL_MATERIAL = Material(
    restitution=BALL_ELASTICITY,
    friction=BALL_FRICTION,
    static_friction=BALL_STATIC_FRICTION,
    air_drag=BALL_AIR_DRAG,
    density=BALL_DENSITY,
)


class BallSpawner:
    """Drops balls one by one through the funnel opening.

    Every ball is scheduled on the world's scheduler at i * interval seconds
    after spawn() and carries the generation that was current when it was
    scheduled. A ball whose generation is no longer current when its time
    comes is dropped instead of landing on a newer board.
    """

    def __init__(self, colors, interval=SPAWN_INTERVAL, jitter=SPAWN_JITTER, rng=None):
        self.colors = colors
        self.interval = interval
        self.jitter = jitter
        self.rng = rng or random.Random()
        self.dropped = 0
        self._pending = {}

    def spawn(self, world, count, spawn_point):
        if count < 0:
            raise ConfigError(f"ball count cannot be negative, got {count}")
        generation = world.generation
        for i in range(count):
            world.scheduler.call_later(i * self.interval, self._insert, world, generation, spawn_point)
        if count:
            self._pending[generation] = self._pending.get(generation, 0) + count
        logger.debug("Scheduled %d balls for generation %d.", count, generation)

    def pending(self, world):
        """Balls still to come for the board currently in the world."""
        return self._pending.get(world.generation, 0)

    def _insert(self, world, generation, spawn_point):
        self._pending[generation] -= 1
        if not self._pending[generation]:
            del self._pending[generation]
        if world.generation != generation:
            self.dropped += 1
            logger.debug(
                "Dropped ball from stale generation %d (current %d).", generation, world.generation
            )
            return None

        x, y = spawn_point
        x += self.rng.uniform(-self.jitter, self.jitter)
        palette = self.colors.palette
        style = Style(palette.neutral, stroke=BALL_STROKE, stroke_width=1)
        ball = bodies.dynamic_circle(
            world,
            "ball",
            (x, y),
            BALL_RADIUS,
            BALL_MATERIAL,
            style,
            collision_type=BALL_COLLISION_TYPE,
        )
        world.add([ball])
        self.colors.track(ball.id)
        return ball

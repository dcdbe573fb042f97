import logging

from plinko.builder import BoardBuilder
from plinko.colors import ColorCycleController
from plinko.config import SCREEN_HEIGHT, SCREEN_WIDTH, SUBSTEPS, BoardConfig
from plinko.drag import BallDragger
from plinko.layout import generate_layout
from plinko.spawner import BallSpawner
from plinko.world import World

logger = logging.getLogger(__name__)


class BoardController:
    """Owns the world and runs a full rebuild for each new configuration."""

    def __init__(self, width=SCREEN_WIDTH, height=SCREEN_HEIGHT, world=None,
                 colors=None, spawner=None, builder=None, dragger=None):
        self.width = width
        self.height = height
        self.world = world or World.create()
        self.colors = colors or ColorCycleController()
        self.spawner = spawner or BallSpawner(self.colors)
        self.builder = builder or BoardBuilder()
        self.dragger = dragger or BallDragger()
        self.config = None
        self.geometry = None
        self.colors.attach(self.world)

    @property
    def generation(self):
        return self.world.generation

    def rebuild(self, config=None):
        if config is None:
            config = self.config or BoardConfig()
        generation = self.world.next_generation()
        self.dragger.release(self.world)
        self.builder.clear(self.world)
        self.colors.reset()
        self.config = config
        self.geometry = generate_layout(config.level_count, self.width, self.height)
        self.builder.build(self.world, self.geometry)
        self.spawner.spawn(self.world, config.ball_count, self.geometry.spawn_point)
        logger.info(
            "Board generation %d: %d levels, %d balls.",
            generation,
            config.level_count,
            config.ball_count,
        )
        return self.geometry

    def step(self, dt, substeps=SUBSTEPS):
        self.world.scheduler.advance(dt)
        self.world.step(dt, substeps)

    def click(self, point):
        self.world.pointer_down(point)

    def press(self, point):
        """Mouse button down: cycle the color of the ball under point and grab it."""
        self.click(point)
        return self.dragger.grab(self.world, point)

    def drag_to(self, point):
        self.dragger.move(point)

    def release(self):
        return self.dragger.release(self.world)

    def pending_balls(self):
        return self.spawner.pending(self.world)

    def bin_counts(self):
        """Number of balls sitting in each bin, left to right."""
        if self.geometry is None:
            return []
        counts = [0] * self.geometry.num_bins
        top = self.geometry.bin_top
        for ball in self.world.entities("ball"):
            x, y = ball.body.position
            if y < top:
                continue
            index = self.geometry.bin_index(x)
            if index is not None:
                counts[index] += 1
        return counts

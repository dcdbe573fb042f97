import argparse
import logging
import random

import pygame

from plinko.colors import ColorCycleController
from plinko.config import (
    DEFAULT_BALLS,
    DEFAULT_LEVELS,
    FPS,
    SAMPLE_RATE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SUBSTEPS,
    BoardConfig,
)
from plinko.controller import BoardController
from plinko.logging_config import setup_logging
from plinko.recording import SessionRecorder
from plinko.render import draw_bin_counts, draw_hud, draw_world
from plinko.spawner import BallSpawner

logger = logging.getLogger(__name__)


class PlinkoApp:
    """pygame front end: slider values, rebuild trigger and pointer input."""

    def __init__(self, levels=DEFAULT_LEVELS, balls=DEFAULT_BALLS, width=SCREEN_WIDTH,
                 height=SCREEN_HEIGHT, fps=FPS, seed=None, recorder=None):
        self.levels = levels
        self.balls = balls
        self.fps = fps
        self.recorder = recorder

        if recorder is not None and recorder.sound:
            pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, 512)
        pygame.init()
        pygame.display.set_caption("Plinko")
        self.screen = pygame.display.set_mode((width, height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(None, 20)

        colors = ColorCycleController()
        spawner = BallSpawner(colors, rng=random.Random(seed))
        self.controller = BoardController(width, height, colors=colors, spawner=spawner)
        if recorder is not None:
            recorder.attach(self.controller.world)

    def start(self):
        config = BoardConfig.clamped(self.levels, self.balls)
        self.levels, self.balls = config.level_count, config.ball_count
        self.controller.rebuild(config)

    def adjust(self, levels=0, balls=0):
        config = BoardConfig.clamped(self.levels + levels, self.balls + balls)
        self.levels, self.balls = config.level_count, config.ball_count

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.controller.press(event.pos)
            elif event.type == pygame.MOUSEMOTION:
                self.controller.drag_to(event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.controller.release()
            elif event.type == pygame.KEYDOWN:
                step = 10 if event.mod & pygame.KMOD_SHIFT else 1
                if event.key == pygame.K_ESCAPE:
                    return False
                elif event.key == pygame.K_UP:
                    self.adjust(levels=1)
                elif event.key == pygame.K_DOWN:
                    self.adjust(levels=-1)
                elif event.key == pygame.K_RIGHT:
                    self.adjust(balls=step)
                elif event.key == pygame.K_LEFT:
                    self.adjust(balls=-step)
                elif event.key in (pygame.K_RETURN, pygame.K_SPACE, pygame.K_r):
                    self.start()
        return True

    def draw(self):
        draw_world(self.screen, self.controller.world)
        draw_bin_counts(self.screen, self.font, self.controller.geometry, self.controller.bin_counts())
        draw_hud(self.screen, self.font, self.levels, self.balls, self.controller.pending_balls())

    def run(self):
        self.start()
        running = True
        while running:
            dt = self.clock.tick(self.fps) / 1000.0
            running = self.handle_events()
            self.controller.step(dt, SUBSTEPS)
            self.draw()
            if self.recorder is not None:
                self.recorder.advance(dt)
                if self.recorder.capturing:
                    self.recorder.capture(self.screen)
            pygame.display.flip()
        pygame.quit()
        if self.recorder is not None and self.recorder.capturing:
            self.recorder.export()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Interactive Galton board")
    parser.add_argument("--levels", type=int, default=DEFAULT_LEVELS, help="number of peg rows")
    parser.add_argument("--balls", type=int, default=DEFAULT_BALLS, help="number of balls to drop")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--seed", type=int, default=None, help="seed for the drop jitter")
    parser.add_argument("--record", metavar="DIR", default=None,
                        help="capture frames and write an MP4 into DIR on exit")
    parser.add_argument("--sound", action="store_true", help="play a tick on peg collisions")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level))
    recorder = None
    if args.record or args.sound:
        recorder = SessionRecorder(args.record, fps=args.fps, sound=args.sound)
    try:
        PlinkoApp(
            levels=args.levels,
            balls=args.balls,
            width=args.width,
            height=args.height,
            fps=args.fps,
            seed=args.seed,
            recorder=recorder,
        ).run()
    except Exception as e:
        logger.exception(f"Fatal error: {e}.")
        raise


if __name__ == "__main__":
    main()

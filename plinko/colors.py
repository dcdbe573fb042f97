import logging

from plinko.palette import ColorPalette

logger = logging.getLogger(__name__)


def hit_test(entity, point):
    """True when point is inside the ball; the bounding box only pre-filters."""
    shape = entity.shape
    if not shape.cache_bb().contains_vect(point):
        return False
    return (shape.body.position - point).length < shape.radius


def ball_at(world, point):
    """First ball, in insertion order, under point."""
    for entity in world.entities("ball"):
        if hit_test(entity, point):
            return entity
    return None


class ColorCycleController:
    """Per-ball color state, advanced one palette step per click.

    The state lives here, keyed by entity id, and never on the pymunk
    objects. Only the fill color changes; the stroke stays constant.
    """

    def __init__(self, palette=None):
        self.palette = palette or ColorPalette()
        self._index = {}
        self._attached = set()

    def attach(self, world):
        if id(world) in self._attached:
            return
        world.on_pointer_down(lambda point: self.on_pointer_down(world, point))
        self._attached.add(id(world))

    def track(self, ball_id, index=None):
        self._index[ball_id] = self.palette.neutral_index if index is None else index

    def color_index(self, ball_id):
        return self._index[ball_id]

    def reset(self):
        self._index.clear()

    def on_pointer_down(self, world, point):
        ball = ball_at(world, point)
        if ball is None:
            return None
        current = self._index.get(ball.id, self.palette.neutral_index)
        index = self.palette.next_index(current)
        self._index[ball.id] = index
        ball.style.fill = self.palette.color(index)
        logger.debug("Ball %d color %d -> %d.", ball.id, current, index)
        return ball

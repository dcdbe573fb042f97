import itertools
import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import pymunk

from plinko.config import GRAVITY, SPACE_DAMPING, SPACE_ITERATIONS
from plinko.scheduler import Scheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Material:
    restitution: float
    friction: float
    # pymunk has a single Coulomb coefficient, only `friction` reaches the shape
    static_friction: float = 0.0
    # fraction of velocity lost per second on top of the space damping
    air_drag: float = 0.0
    density: float = 0.0


@dataclass
class Style:
    fill: Tuple[int, int, int]
    stroke: Optional[Tuple[int, int, int]] = None
    stroke_width: int = 0
    visible: bool = True


@dataclass(eq=False)
class Entity:
    """Application-side record of one body living in the space."""

    id: int
    label: str
    generation: int
    body: pymunk.Body
    shape: pymunk.Shape
    style: Style
    material: Any = None


class World:
    """Explicit simulation context shared by the board components.

    Holds the pymunk space, the entity table, the frame-driven scheduler,
    the pointer-down subscribers and the current board generation.
    """

    def __init__(self, gravity=GRAVITY, damping=SPACE_DAMPING):
        self.space = pymunk.Space()
        self.space.gravity = gravity
        self.space.damping = damping
        self.space.iterations = SPACE_ITERATIONS
        self.scheduler = Scheduler()
        self.generation = 0
        self._entities = {}
        self._ids = itertools.count(1)
        self._pointer_down = []
        self._constraints = []

    @classmethod
    def create(cls, **kwargs):
        return cls(**kwargs)

    def __len__(self):
        return len(self._entities)

    def entity(self, label, body, shape, style, material=None):
        """Wrap a body/shape pair; it joins the space on add()."""
        return Entity(next(self._ids), label, self.generation, body, shape, style, material)

    def add(self, entities):
        entities = list(entities)
        objects = []
        for entity in entities:
            objects.extend((entity.body, entity.shape))
        self.space.add(*objects)
        for entity in entities:
            self._entities[entity.id] = entity
        return entities

    def remove(self, entity):
        self.space.remove(entity.body, entity.shape)
        del self._entities[entity.id]

    def add_constraint(self, constraint):
        self.space.add(constraint)
        self._constraints.append(constraint)
        return constraint

    def remove_constraint(self, constraint):
        """Remove a joint; joints already dropped by clear() are ignored."""
        if constraint not in self._constraints:
            return False
        self.space.remove(constraint)
        self._constraints.remove(constraint)
        return True

    @property
    def constraints(self):
        return list(self._constraints)

    def clear(self):
        removed = len(self._entities)
        for constraint in self._constraints:
            self.space.remove(constraint)
        self._constraints.clear()
        for entity in list(self._entities.values()):
            self.space.remove(entity.body, entity.shape)
        self._entities.clear()
        logger.debug("Cleared %d bodies from the world.", removed)
        return removed

    def get(self, entity_id):
        return self._entities.get(entity_id)

    def entities(self, label=None):
        if label is None:
            return list(self._entities.values())
        return [e for e in self._entities.values() if e.label == label]

    def count(self, label=None):
        return len(self.entities(label))

    def next_generation(self):
        self.generation += 1
        return self.generation

    def step(self, dt, substeps=1):
        for _ in range(substeps):
            self.space.step(dt / substeps)

    # pointer input
    def on_pointer_down(self, callback):
        self._pointer_down.append(callback)

    def pointer_down(self, point):
        for callback in list(self._pointer_down):
            callback(point)

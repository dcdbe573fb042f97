import logging

from plinko import bodies
from plinko.config import (
    BACKGROUND_COLOR,
    BIN_COLOR,
    FUNNEL_COLOR,
    PEG_COLLISION_TYPE,
    PEG_COLOR,
    WALL_ELASTICITY,
    WALL_FRICTION,
)
from plinko.world import Material, Style

logger = logging.getLogger(__name__)

WALL_MATERIAL = Material(restitution=WALL_ELASTICITY, friction=WALL_FRICTION)

PEG_STYLE = Style(PEG_COLOR)
FUNNEL_STYLE = Style(FUNNEL_COLOR)
BIN_STYLE = Style(BIN_COLOR)
HIDDEN_STYLE = Style(BACKGROUND_COLOR, visible=False)


class BoardBuilder:
    """Turns a BoardGeometry into static bodies in a World."""

    def clear(self, world):
        return world.clear()

    def build(self, world, geometry):
        entities = []
        for peg in geometry.pegs:
            material = Material(restitution=peg.restitution, friction=peg.friction)
            entities.append(
                bodies.static_circle(
                    world,
                    "peg",
                    (peg.x, peg.y),
                    peg.radius,
                    material,
                    PEG_STYLE,
                    collision_type=PEG_COLLISION_TYPE,
                )
            )
        for spec in geometry.funnel:
            entities.append(bodies.static_rect(world, "funnel", spec, WALL_MATERIAL, FUNNEL_STYLE))
        for spec in geometry.guides:
            entities.append(bodies.static_rect(world, "guide", spec, WALL_MATERIAL, FUNNEL_STYLE))
        for spec in geometry.bin_walls:
            entities.append(bodies.static_rect(world, "bin_wall", spec, WALL_MATERIAL, BIN_STYLE))
        entities.append(bodies.static_rect(world, "floor", geometry.floor, WALL_MATERIAL, BIN_STYLE))
        for spec in geometry.boundaries:
            entities.append(bodies.static_rect(world, "boundary", spec, WALL_MATERIAL, HIDDEN_STYLE))

        world.add(entities)
        logger.debug(
            "Built board: %d pegs, %d bin walls, %d bodies total.",
            len(geometry.pegs),
            len(geometry.bin_walls),
            len(entities),
        )
        return entities

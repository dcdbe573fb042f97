"""Board geometry for a given level count.

Everything here is plain data: no pymunk objects are created, so the same
inputs always produce the same geometry.
"""
import math
from dataclasses import dataclass
from typing import Tuple

from plinko.config import (
    BIN_WALL_WIDTH,
    FLOOR_THICKNESS,
    FUNNEL_ANGLE,
    FUNNEL_GAP,
    FUNNEL_LENGTH,
    FUNNEL_THICKNESS,
    FUNNEL_Y,
    GUIDE_OFFSET,
    GUIDE_THICKNESS,
    MAX_PEG_SPACING,
    PEG_ELASTICITY,
    PEG_FIELD_FRACTION,
    PEG_FRICTION,
    PEG_RADIUS,
    PEG_START_FRACTION,
    SPAWN_Y,
    WALL_THICKNESS,
    ConfigError,
)


@dataclass(frozen=True)
class PegSpec:
    x: float
    y: float
    radius: float = PEG_RADIUS
    restitution: float = PEG_ELASTICITY
    friction: float = PEG_FRICTION


@dataclass(frozen=True)
class RectSpec:
    """Static rectangle centered on (x, y), rotated by angle radians."""

    x: float
    y: float
    width: float
    height: float
    angle: float = 0.0


@dataclass(frozen=True)
class BoardGeometry:
    level_count: int
    num_bins: int
    spacing: float
    vertical_spacing: float
    pegs: Tuple[PegSpec, ...]
    funnel: Tuple[RectSpec, RectSpec]
    guides: Tuple[RectSpec, RectSpec]
    bin_walls: Tuple[RectSpec, ...]
    floor: RectSpec
    boundaries: Tuple[RectSpec, ...]
    spawn_point: Tuple[float, float]

    @property
    def bin_edges(self):
        """x coordinates of the bin dividers, left to right."""
        return tuple(wall.x for wall in self.bin_walls)

    @property
    def bin_top(self):
        return self.bin_walls[0].y - self.bin_walls[0].height / 2

    def bin_index(self, x):
        """Index of the bin that x falls into, or None outside the bins."""
        edges = self.bin_edges
        if not edges[0] <= x < edges[-1]:
            return None
        return min(int((x - edges[0]) // self.spacing), self.num_bins - 1)


def peg_spacing(level_count, width):
    return min(0.9 * width / (level_count + 1), MAX_PEG_SPACING)


def layout_pegs(level_count, width, height, spacing, vertical_spacing):
    start_y = height * PEG_START_FRACTION
    pegs = []
    for row in range(level_count):
        y = start_y + row * vertical_spacing
        row_width = row * spacing
        x_start = (width - row_width) / 2
        for i in range(row + 1):
            pegs.append(PegSpec(x_start + i * spacing, y))
    return tuple(pegs)


def layout_bins(level_count, width, height, spacing, vertical_spacing):
    num_bins = level_count + 1
    last_row_y = height * PEG_START_FRACTION + (level_count - 1) * vertical_spacing
    bin_top = last_row_y + vertical_spacing / 2
    bin_bottom = height - WALL_THICKNESS
    bin_height = bin_bottom - bin_top

    block_width = num_bins * spacing
    left = (width - block_width) / 2
    walls = tuple(
        RectSpec(left + i * spacing, bin_top + bin_height / 2, BIN_WALL_WIDTH, bin_height)
        for i in range(num_bins + 1)
    )
    floor = RectSpec(width / 2, bin_bottom, block_width + BIN_WALL_WIDTH, FLOOR_THICKNESS)
    return walls, floor


def layout_funnel(width):
    # inner ends of the two ramps sit FUNNEL_GAP apart
    offset = FUNNEL_GAP / 2 + (FUNNEL_LENGTH / 2) * math.cos(FUNNEL_ANGLE)
    center = width / 2
    left = RectSpec(center - offset, FUNNEL_Y, FUNNEL_LENGTH, FUNNEL_THICKNESS, FUNNEL_ANGLE)
    right = RectSpec(center + offset, FUNNEL_Y, FUNNEL_LENGTH, FUNNEL_THICKNESS, -FUNNEL_ANGLE)
    return left, right


def segment_rect(start, end, thickness):
    (x0, y0), (x1, y1) = start, end
    return RectSpec(
        (x0 + x1) / 2,
        (y0 + y1) / 2,
        math.hypot(x1 - x0, y1 - y0),
        thickness,
        math.atan2(y1 - y0, x1 - x0),
    )


def layout_guides(level_count, width, height, spacing, vertical_spacing):
    """Walls running parallel to the sides of the peg triangle.

    Each guide keeps GUIDE_OFFSET spacings of clearance from the outermost
    peg of every row and ends on top of an outer bin wall, so balls leaving
    the triangle sideways still land in the bins.
    """
    center = width / 2
    start_y = height * PEG_START_FRACTION
    bin_top = start_y + (level_count - 0.5) * vertical_spacing
    # reach up to the inner ends of the funnel ramps, never above them
    funnel_end_y = FUNNEL_Y + (FUNNEL_LENGTH / 2) * math.sin(FUNNEL_ANGLE)
    lead = max(0.0, min(vertical_spacing / 2, start_y - funnel_end_y))
    top_offset = GUIDE_OFFSET * spacing - (lead / vertical_spacing) * spacing / 2
    bottom_offset = (level_count + 1) * spacing / 2
    guides = []
    for side in (-1, 1):
        top = (center + side * top_offset, start_y - lead)
        bottom = (center + side * bottom_offset, bin_top)
        guides.append(segment_rect(top, bottom, GUIDE_THICKNESS))
    return tuple(guides)


def layout_boundaries(width, height):
    return (
        RectSpec(0, height / 2, WALL_THICKNESS, height),
        RectSpec(width, height / 2, WALL_THICKNESS, height),
        RectSpec(width / 2, height, width, WALL_THICKNESS),
    )


def generate_layout(level_count, width, height):
    """Compute pegs, funnel, guides, bins, floor and boundaries for a board."""
    if level_count < 1:
        raise ConfigError(f"level_count must be at least 1, got {level_count}")
    if width <= 0 or height <= 0:
        raise ConfigError(f"canvas must have a positive size, got {width}x{height}")

    spacing = peg_spacing(level_count, width)
    vertical_spacing = height * PEG_FIELD_FRACTION / level_count
    bin_walls, floor = layout_bins(level_count, width, height, spacing, vertical_spacing)

    return BoardGeometry(
        level_count=level_count,
        num_bins=level_count + 1,
        spacing=spacing,
        vertical_spacing=vertical_spacing,
        pegs=layout_pegs(level_count, width, height, spacing, vertical_spacing),
        funnel=layout_funnel(width),
        guides=layout_guides(level_count, width, height, spacing, vertical_spacing),
        bin_walls=bin_walls,
        floor=floor,
        boundaries=layout_boundaries(width, height),
        spawn_point=(width / 2, SPAWN_Y),
    )

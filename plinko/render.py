import pygame
import pymunk

from plinko.config import BACKGROUND_COLOR, HUD_ACCENT, HUD_COLOR, MAX_BALLS, MAX_LEVELS

SLIDER_WIDTH = 140
SLIDER_HEIGHT = 6


def draw_entity(screen, entity):
    style = entity.style
    if not style.visible:
        return
    shape = entity.shape
    if isinstance(shape, pymunk.Circle):
        center = shape.body.local_to_world(shape.offset)
        pos = (round(center.x), round(center.y))
        radius = max(1, round(shape.radius))
        pygame.draw.circle(screen, style.fill, pos, radius)
        if style.stroke is not None and style.stroke_width:
            pygame.draw.circle(screen, style.stroke, pos, radius, style.stroke_width)
    else:
        points = [shape.body.local_to_world(v) for v in shape.get_vertices()]
        pygame.draw.polygon(screen, style.fill, points)
        if style.stroke is not None and style.stroke_width:
            pygame.draw.polygon(screen, style.stroke, points, style.stroke_width)


def draw_world(screen, world):
    screen.fill(BACKGROUND_COLOR)
    for entity in world.entities():
        draw_entity(screen, entity)


def draw_slider(screen, font, label, value, maximum, topleft):
    x, y = topleft
    text = font.render(f"{label}: {value}", True, HUD_COLOR)
    screen.blit(text, (x, y))
    track = pygame.Rect(x, y + text.get_height() + 4, SLIDER_WIDTH, SLIDER_HEIGHT)
    pygame.draw.rect(screen, HUD_COLOR, track, 1)
    filled = track.copy()
    filled.width = max(1, round(SLIDER_WIDTH * value / maximum))
    pygame.draw.rect(screen, HUD_ACCENT, filled)


def draw_hud(screen, font, levels, balls, pending):
    draw_slider(screen, font, "Levels", levels, MAX_LEVELS, (10, 8))
    draw_slider(screen, font, "Balls", balls, MAX_BALLS, (10, 44))
    help_text = font.render("Up/Down levels  Left/Right balls  Enter start  Click a ball", True, HUD_COLOR)
    screen.blit(help_text, (screen.get_width() - help_text.get_width() - 10, 8))
    if pending:
        queued = font.render(f"queued: {pending}", True, HUD_ACCENT)
        screen.blit(queued, (screen.get_width() - queued.get_width() - 10, 28))


def draw_bin_counts(screen, font, geometry, counts):
    if geometry is None:
        return
    edges = geometry.bin_edges
    for i, count in enumerate(counts):
        if not count:
            continue
        text = font.render(str(count), True, HUD_COLOR)
        cx = (edges[i] + edges[i + 1]) / 2
        screen.blit(text, (cx - text.get_width() / 2, geometry.bin_top - text.get_height() - 2))

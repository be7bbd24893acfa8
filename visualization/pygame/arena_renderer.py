import math
import pygame
import numpy as np
from .colors import COLORS

# Sweeper outline in model space: left track, right track, body (nose along +y)
SWEEPER_SHAPE = np.array([
    (-1, -1), (-1, 1), (-0.5, 1), (-0.5, -1),
    (0.5, -1), (1, -1), (1, 1), (0.5, 1),
    (-0.5, -0.5), (0.5, -0.5),
    (-0.5, 0.5), (-0.25, 0.5), (-0.25, 1.75), (0.25, 1.75), (0.25, 0.5), (0.5, 0.5),
], dtype=float)


def world_transform(shape, scale, rotation, x, y):
    """Scale, rotate (radians) and translate model vertices into arena space."""
    c, s = math.cos(rotation), math.sin(rotation)
    rot = np.array([[c, -s], [s, c]])
    return (shape * scale) @ rot.T + np.array([x, y])


def draw_arena(monitor, frame):
    """Draw mines and sweepers inside the arena rectangle"""
    ox, oy = monitor.arena_x, monitor.arena_y
    arena = pygame.Rect(ox, oy, frame.width, frame.height)
    pygame.draw.rect(monitor.screen, COLORS['ARENA_BG'], arena)
    pygame.draw.rect(monitor.screen, COLORS['ARENA_BORDER'], arena, 2)

    # Mines: small squares
    half = frame.mine_scale
    for mx, my in frame.mines:
        rect = pygame.Rect(ox + mx - half, oy + my - half, 2 * half, 2 * half)
        pygame.draw.rect(monitor.screen, COLORS['MINE'], rect, 1)

    # Sweepers
    for view in frame.sweepers:
        color = COLORS['SWEEPER_ELITE'] if view.is_elite else COLORS['SWEEPER']
        pts = world_transform(SWEEPER_SHAPE, frame.sweeper_scale, view.rotation, ox + view.x, oy + view.y)
        pts = [(float(px), float(py)) for px, py in pts]
        pygame.draw.polygon(monitor.screen, color, pts[0:4])
        pygame.draw.polygon(monitor.screen, color, pts[4:8])
        pygame.draw.polygon(monitor.screen, color, pts[8:16], 1)

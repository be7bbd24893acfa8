import pygame
from .colors import COLORS

def update_chart_data(monitor, frame):
    """Update chart data from the frame's fitness history"""
    for key, values in (('best', frame.best_history), ('average', frame.average_history)):
        chart = monitor.charts[key]
        chart.values = values
        if values:
            chart.max_value = max(values)
            chart.min_value = min(values)

    # both lines share the best-fitness scale
    top = max(monitor.charts['best'].max_value, 1.0)
    for chart in monitor.charts.values():
        chart.max_value = top
        chart.min_value = 0.0


# ========== Drawing helpers ==========

def _draw_line(monitor, x, y, width, height, data, generations):
    if len(data.values) < 1:
        return
    span = data.max_value - data.min_value
    points = [(x, y + height)]
    for i, value in enumerate(data.values):
        norm = (value - data.min_value) / span if span > 0 else 0.5
        px = x + (i + 1) * width / max(1, generations)
        py = y + height - norm * height
        points.append((px, py))
    pygame.draw.lines(monitor.screen, data.color, False, points, 2)


def draw_fitness_chart(monitor, x, y, width, height, title, light=False):
    """Best and average fitness per generation."""
    generations = len(monitor.charts['best'].values)

    if not light:
        rect = pygame.Rect(x, y, width, height)
        pygame.draw.rect(monitor.screen, COLORS['UI_CHART_BG'], rect)
        pygame.draw.rect(monitor.screen, COLORS['UI_BORDER'], rect, 2)
    text_color = COLORS['UI_TEXT_LIGHT'] if light else COLORS['UI_TEXT']
    monitor.screen.blit(monitor.fonts['small'].render(title, True, text_color), (x + 5, y + 5))

    # Grid lines
    inner_x, inner_y, inner_w, inner_h = x + 10, y + 25, width - 20, height - 35
    for i in range(5):
        grid_y = inner_y + i * inner_h // 4
        pygame.draw.line(monitor.screen, COLORS['UI_CHART_GRID'], (inner_x, grid_y), (inner_x + inner_w, grid_y), 1)

    _draw_line(monitor, inner_x, inner_y, inner_w, inner_h, monitor.charts['best'], generations)
    _draw_line(monitor, inner_x, inner_y, inner_w, inner_h, monitor.charts['average'], generations)


# ========== Main drawing orchestrator ==========

def draw_charts(monitor, frame):
    if frame.fast_mode:
        # presentation skipped: the arena area becomes the fitness graph
        draw_fitness_chart(monitor, monitor.arena_x, monitor.arena_y + 90, frame.width, frame.height - 90,
                           "Fitness per generation (red = best, green = average)", light=True)
    draw_fitness_chart(monitor, monitor.panel_x, monitor.panel_y + 200, monitor.panel_width, 180, "Fitness History")

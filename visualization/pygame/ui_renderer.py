import pygame
from .colors import COLORS

def draw_legend(monitor):
    rect = pygame.Rect(monitor.panel_x, monitor.panel_y, monitor.panel_width, 110)
    pygame.draw.rect(monitor.screen, COLORS['UI_CHART_BG'], rect)
    pygame.draw.rect(monitor.screen, COLORS['UI_BORDER'], rect, 2)

    title_surface = monitor.fonts['medium'].render("Legend", True, COLORS['UI_TEXT'])
    monitor.screen.blit(title_surface, (monitor.panel_x + 10, monitor.panel_y + 10))

    y_offset = 40
    for item in monitor.legend:
        item_y = monitor.panel_y + y_offset
        if item['type'] == 'mine':
            pygame.draw.rect(monitor.screen, item['color'], pygame.Rect(monitor.panel_x + 14, item_y + 4, 12, 12), 2)
        else:
            pygame.draw.circle(monitor.screen, item['color'], (monitor.panel_x + 20, item_y + 10), 8)

        label = monitor.fonts['small'].render(item['label'], True, COLORS['UI_TEXT'])
        monitor.screen.blit(label, (monitor.panel_x + 40, item_y + 3))
        y_offset += 22


def draw_buttons(monitor):
    for button in monitor.buttons.values():
        color = button['hover_color'] if button['rect'].collidepoint(monitor.mouse_pos) else button['color']
        pygame.draw.rect(monitor.screen, color, button['rect'])
        pygame.draw.rect(monitor.screen, COLORS['UI_BORDER'], button['rect'], 2)
        text_surface = monitor.fonts['medium'].render(button['text'], True, COLORS['UI_TEXT'])
        text_rect = text_surface.get_rect(center=button['rect'].center)
        monitor.screen.blit(text_surface, text_rect)


def draw_status(monitor, frame):
    status_rect = pygame.Rect(monitor.panel_x, monitor.panel_y + 120, monitor.panel_width, 70)
    pygame.draw.rect(monitor.screen, COLORS['UI_CHART_BG'], status_rect)
    pygame.draw.rect(monitor.screen, COLORS['UI_BORDER'], status_rect, 2)

    if monitor.controller.should_stop:
        status_text, status_color = "Stopped", COLORS['UI_STOP']
    elif monitor.is_paused:
        status_text, status_color = "Paused", COLORS['UI_PAUSE']
    elif frame.fast_mode:
        status_text, status_color = "Running - accelerated", COLORS['UI_BUTTON']
    else:
        status_text, status_color = "Running", COLORS['UI_BUTTON']

    x, y = status_rect.x + 10, status_rect.y + 10
    monitor.screen.blit(monitor.fonts['medium'].render(status_text, True, status_color), (x, y))
    counts = f"Sweepers: {len(frame.sweepers)} | Mines: {len(frame.mines)}"
    monitor.screen.blit(monitor.fonts['small'].render(counts, True, COLORS['UI_TEXT']), (x, y + 25))
    keys = "F fast | SPACE pause | S stop"
    monitor.screen.blit(monitor.fonts['small'].render(keys, True, COLORS['UI_TEXT']), (x, y + 42))


def draw_stats(monitor, frame):
    """Generation, fitness and cycle counters in the arena's top-left corner."""
    lines = [
        f"Generation: {frame.generation}",
        f"Best Fitness: {frame.best_fitness:.0f}",
        f"Average Fitness: {frame.average_fitness:.2f}",
        f"Cycles: {frame.ticks}",
    ]
    x, y = monitor.arena_x + 5, monitor.arena_y + 5
    for line in lines:
        monitor.screen.blit(monitor.fonts['medium'].render(line, True, COLORS['UI_TEXT_LIGHT']), (x, y))
        y += 20


def draw_debug_line(monitor, frame):
    """Position, speed, rotation and heading of the first sweeper."""
    if not frame.sweepers:
        return
    s = frame.sweepers[0]
    msg = f"[{s.x:.1f} , {s.y:.1f}] {s.speed:.1f} {s.rotation:.1f} [{s.heading[0]:.1f} , {s.heading[1]:.1f}]"
    surf = monitor.fonts['small'].render(msg, True, COLORS['UI_TEXT_LIGHT'])
    monitor.screen.blit(surf, (monitor.arena_x + 5, monitor.arena_y + frame.height - 20))

import pygame
from .colors import COLORS
from .chart_data import ChartData
from .arena_renderer import draw_arena
from .chart_renderer import update_chart_data, draw_charts
from .ui_renderer import (
    draw_legend,
    draw_buttons,
    draw_status,
    draw_stats,
    draw_debug_line,
)
from .event_handler import handle_events
from sweepers.frame import Renderer


class PygameMonitor(Renderer):
    def __init__(self, controller, cfg):
        self.controller = controller
        self.cfg = cfg

        # --- Initialize pygame ---
        pygame.init()
        self.arena_x, self.arena_y = 20, 20
        self.panel_width = 260
        self.panel_x = self.arena_x + cfg.WIDTH + 20
        self.panel_y = self.arena_y
        self.width = self.panel_x + self.panel_width + 20
        self.height = self.arena_y + cfg.HEIGHT + 80
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Smart Sweepers - Pygame Monitor")

        # Fonts
        self.fonts = {
            "small": pygame.font.Font(None, 18),
            "medium": pygame.font.Font(None, 22),
            "large": pygame.font.Font(None, 28),
        }

        # UI state
        self.is_paused = False
        self.mouse_pos = (0, 0)

        # Chart data
        self.charts = {
            "best": ChartData(COLORS["BEST_LINE"], "Best Fitness"),
            "average": ChartData(COLORS["AVG_LINE"], "Average Fitness"),
        }

        # Buttons & legend
        self.buttons = self._init_buttons()
        self.legend = [
            {"type": "sweeper", "color": COLORS["SWEEPER"], "label": "Sweeper"},
            {"type": "sweeper", "color": COLORS["SWEEPER_ELITE"], "label": "Elite genome"},
            {"type": "mine", "color": COLORS["MINE"], "label": "Mine"},
        ]

        # FPS control (normal speed only)
        self.fps_clock = pygame.time.Clock()
        self.fps = cfg.FPS

    def _init_buttons(self):
        """Pause, fast and stop buttons centred under the arena."""
        w, h = 120, 40
        y = self.height - 60
        left = self.arena_x + self.cfg.WIDTH // 2 - (3 * w + 40) // 2
        fast = self.controller.fast_mode
        layout = [
            ("pause_play", "⏸ Pause", COLORS["UI_BUTTON"], COLORS["UI_BUTTON_HOVER"], "toggle_pause"),
            ("fast", "▶ Normal" if fast else "⏩ Fast", COLORS["UI_FAST"] if fast else COLORS["UI_BUTTON"],
             COLORS["UI_BUTTON_HOVER"], "toggle_fast"),
            ("stop", "⏹ Stop", COLORS["UI_STOP"], (255, 150, 150), "stop"),
        ]
        buttons = {}
        for i, (name, text, color, hover, action) in enumerate(layout):
            buttons[name] = {
                "rect": pygame.Rect(left + i * (w + 20), y, w, h),
                "text": text,
                "color": color,
                "hover_color": hover,
                "action": action,
            }
        return buttons

    # ---------- Main loop ----------

    def render(self, frame):
        """Render one FrameState. False once the window is closed."""
        if not handle_events(self):
            return False

        update_chart_data(self, frame)

        self.screen.fill(COLORS["UI_BACKGROUND"])
        if frame.fast_mode:
            arena = pygame.Rect(self.arena_x, self.arena_y, frame.width, frame.height)
            pygame.draw.rect(self.screen, COLORS["ARENA_BG"], arena)
        else:
            draw_arena(self, frame)
            draw_debug_line(self, frame)
        draw_stats(self, frame)
        draw_legend(self)
        draw_status(self, frame)
        draw_charts(self, frame)
        draw_buttons(self)

        pygame.display.flip()
        if not frame.fast_mode or self.is_paused:
            self.fps_clock.tick(self.fps)
        return True

    # ---------- Utility ----------

    def cleanup(self):
        pygame.quit()

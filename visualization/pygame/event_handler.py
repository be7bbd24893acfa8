# event_handler.py
import pygame
from .colors import COLORS


def handle_events(monitor):
    """Drain the pygame queue. False once the window is closed or ESC is hit."""
    keys = {
        pygame.K_f: _toggle_fast,
        pygame.K_SPACE: _toggle_pause,
        pygame.K_s: _stop_simulation,
    }
    for event in pygame.event.get():
        if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
            monitor.controller.stop()
            return False
        if event.type == pygame.KEYDOWN and event.key in keys:
            keys[event.key](monitor)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            _handle_click(monitor, event.pos)
        elif event.type == pygame.MOUSEMOTION:
            monitor.mouse_pos = event.pos
    return True


def _handle_click(monitor, pos):
    actions = {
        "toggle_pause": _toggle_pause,
        "toggle_fast": _toggle_fast,
        "stop": _stop_simulation,
    }
    for button in monitor.buttons.values():
        if button['rect'].collidepoint(pos):
            actions[button['action']](monitor)


def _set_button(monitor, name, text, color):
    monitor.buttons[name]['text'] = text
    monitor.buttons[name]['color'] = color


def _toggle_fast(monitor):
    # the controller owns the flag so headless and windowed runs share it
    if monitor.controller.toggle_fast_mode():
        _set_button(monitor, 'fast', '▶ Normal', COLORS['UI_FAST'])
        print("Simulation speed: accelerated")
    else:
        _set_button(monitor, 'fast', '⏩ Fast', COLORS['UI_BUTTON'])
        print(f"Simulation speed: {monitor.fps} FPS")


def _toggle_pause(monitor):
    monitor.is_paused = not monitor.is_paused
    if monitor.is_paused:
        _set_button(monitor, 'pause_play', '▶ Play', COLORS['UI_PAUSE'])
    else:
        _set_button(monitor, 'pause_play', '⏸ Pause', COLORS['UI_BUTTON'])


def _stop_simulation(monitor):
    monitor.controller.stop()
    _set_button(monitor, 'stop', '⏹ Stopped', (255, 100, 100))

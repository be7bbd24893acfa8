COLORS = {
    # Arena
    'ARENA_BG': (20, 24, 33),
    'ARENA_BORDER': (90, 90, 110),
    'MINE': (127, 255, 212),          # Aquamarine

    # Sweepers
    'SWEEPER': (0, 191, 255),         # Deep sky blue
    'SWEEPER_ELITE': (255, 99, 71),   # Tomato, carries an elite genome

    # Fitness graph
    'BEST_LINE': (214, 39, 40),       # Red
    'AVG_LINE': (44, 160, 44),        # Green

    # UI elements
    'UI_BACKGROUND': (245, 245, 245), # Light gray
    'UI_BORDER': (200, 200, 200),     # Medium gray
    'UI_TEXT': (50, 50, 50),          # Dark gray
    'UI_TEXT_LIGHT': (200, 220, 255), # Overlay text on the arena
    'UI_BUTTON': (100, 149, 237),     # Cornflower blue
    'UI_BUTTON_HOVER': (70, 130, 180), # Steel blue
    'UI_FAST': (255, 215, 0),         # Gold
    'UI_PAUSE': (144, 238, 144),      # Light green
    'UI_STOP': (255, 182, 193),       # Light pink
    'UI_CHART_BG': (255, 255, 255),   # White
    'UI_CHART_GRID': (230, 230, 230), # Light gray
}

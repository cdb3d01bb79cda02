import pygame
import pygame_gui
from terrainmaze.config import (
    get_logger, SIDE_PANEL_WIDTH, BUTTON_BAR_HEIGHT, DEFAULT_ANIMATION_SPEED
)
from terrainmaze.maze.solver import BFS, DFS, DIJKSTRA, ASTAR
from terrainmaze.ui.UItheme import UITheme


class PanelManager:
    """Button bar, speed slider, legend and statistics around the maze surface."""

    def __init__(self, manager, controller, maze_width, maze_height):
        self.logger = get_logger(__name__)
        self.manager = manager
        self.controller = controller
        self.maze_width = maze_width
        self.maze_height = maze_height

        # element instance -> callback mapping for fast event dispatch
        self.element_callbacks = {}
        self.ui_elements = []

        self.legend_rects = []
        self.algorithm_label = None
        self.penalty_label = None
        self.speed_slider = None

        self.create_panel()
        self.logger.info(f"Panel created with {len(self.ui_elements)} elements")

    # ---------------------------
    # CENTRALIZED UI FACTORY
    # ---------------------------
    def init_ui(self, element_type, rect, **kwargs):
        element_map = {
            "button": pygame_gui.elements.UIButton,
            "slider": pygame_gui.elements.UIHorizontalSlider,
            "label": pygame_gui.elements.UILabel,
        }
        element = element_map[element_type](relative_rect=rect, manager=self.manager, **kwargs)
        self.ui_elements.append(element)
        self.logger.debug(f"Created {element_type} at {rect}")
        return element

    def create_panel(self):
        pad = 10

        # button bar under the maze
        labels = [
            (BFS, lambda: self.controller.solve(BFS)),
            (DFS, lambda: self.controller.solve(DFS)),
            (DIJKSTRA, lambda: self.controller.solve(DIJKSTRA)),
            (ASTAR, lambda: self.controller.solve(ASTAR)),
            ("New Maze", self.controller.generate_new_maze),
        ]
        button_w = (self.maze_width - pad * (len(labels) + 1)) // len(labels)
        button_y = self.maze_height + pad
        for i, (text, callback) in enumerate(labels):
            rect = pygame.Rect(pad + i * (button_w + pad), button_y, button_w, BUTTON_BAR_HEIGHT - pad * 2)
            button = self.init_ui("button", rect, text=text)
            self.element_callbacks[button] = callback

        # side panel
        x = self.maze_width + pad
        width = SIDE_PANEL_WIDTH - pad * 2
        y = pad

        self.init_ui("label", pygame.Rect(x, y, width, 20), text="Animation Speed")
        y += 24
        self.speed_slider = self.init_ui(
            "slider", pygame.Rect(x, y, width, 24),
            start_value=int(DEFAULT_ANIMATION_SPEED * 100), value_range=(0, 100)
        )
        y += 40

        self.init_ui("label", pygame.Rect(x, y, width, 20), text="Legend")
        y += 24
        for text, color in UITheme.LEGEND:
            swatch = pygame.Rect(x, y + 2, 16, 16)
            self.legend_rects.append((swatch, color))
            self.init_ui("label", pygame.Rect(x + 22, y, width - 22, 20), text=text)
            y += 24
        y += 16

        self.init_ui("label", pygame.Rect(x, y, width, 20), text="Statistics")
        y += 24
        self.algorithm_label = self.init_ui("label", pygame.Rect(x, y, width, 20), text="Algorithm: -")
        y += 24
        self.penalty_label = self.init_ui("label", pygame.Rect(x, y, width, 20), text="Total Penalty: 0")

    # ---------------------------
    # EVENT LOOP
    # ---------------------------
    def process_events(self, events):
        """Process pygame and UI events. Returns "quit" when the window should close."""
        for event in events:
            self.manager.process_events(event)

            if event.type == pygame.QUIT:
                return "quit"
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return "quit"

            if event.type == pygame_gui.UI_BUTTON_PRESSED:
                callback = self.element_callbacks.get(event.ui_element)
                if callback:
                    self.logger.debug(f"Button pressed: {event.ui_element.text}")
                    callback()
            elif event.type == pygame_gui.UI_HORIZONTAL_SLIDER_MOVED:
                if event.ui_element == self.speed_slider:
                    self.controller.set_animation_speed(event.value / 100.0)
        return None

    def refresh_statistics(self):
        self.algorithm_label.set_text(f"Algorithm: {self.controller.algorithm_name}")
        self.penalty_label.set_text(f"Total Penalty: {self.controller.total_penalty}")

    def draw(self, surface):
        panel_rect = pygame.Rect(self.maze_width, 0, SIDE_PANEL_WIDTH, surface.get_height())
        surface.fill(UITheme.PANEL, panel_rect)
        for swatch, color in self.legend_rects:
            pygame.draw.rect(surface, color, swatch)
            pygame.draw.rect(surface, UITheme.WALL, swatch, 1)

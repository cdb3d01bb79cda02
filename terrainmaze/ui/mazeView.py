import pygame
from terrainmaze.config import CELL_SIZE, MARGIN
from terrainmaze.maze.terrain import ALL_TERRAIN_TYPES
from terrainmaze.ui.UItheme import UITheme


class MazeView:
    """Draws the grid, the replayed exploration and the final path onto a surface."""

    def __init__(self, rows, cols, cell_size=CELL_SIZE, margin=MARGIN):
        self.rows = rows
        self.cols = cols
        self.cell_size = cell_size
        self.margin = margin

        self.width = cols * cell_size + margin * 2
        self.height = rows * cell_size + margin * 2

        # one translucent tile per overlay, blitted per cell
        self._explored_tile = self._overlay_tile(UITheme.EXPLORED)
        self._path_tile = self._overlay_tile(UITheme.PATH)
        self._terrain_colors = [pygame.Color(*t.color) for t in ALL_TERRAIN_TYPES]

    def _overlay_tile(self, color):
        tile = pygame.Surface((self.cell_size, self.cell_size), pygame.SRCALPHA)
        tile.fill(color)
        return tile

    def _cell_origin(self, row, col):
        return self.margin + col * self.cell_size, self.margin + row * self.cell_size

    def draw(self, surface, controller):
        surface.fill(UITheme.BACKGROUND)
        grid = controller.grid
        if grid is None:
            return

        path = set(controller.shortest_path)
        explored = controller.explored_cells
        size = self.cell_size

        # 1. terrain and overlays
        for cell in grid.cells():
            x, y = self._cell_origin(cell.row, cell.col)
            rect = pygame.Rect(x, y, size, size)
            surface.fill(self._terrain_colors[grid.get_terrain(cell).code], rect)

            if cell in path:
                surface.blit(self._path_tile, rect)
            elif cell in explored:
                surface.blit(self._explored_tile, rect)

        # 2. walls: top and left per cell, closing edges on the last row / column
        width = UITheme.WALL_WIDTH
        for cell in grid.cells():
            x, y = self._cell_origin(cell.row, cell.col)
            if grid.has_top_wall(cell):
                pygame.draw.line(surface, UITheme.WALL, (x, y), (x + size, y), width)
            if grid.has_left_wall(cell):
                pygame.draw.line(surface, UITheme.WALL, (x, y), (x, y + size), width)
            if cell.row == grid.rows - 1 and grid.has_bottom_wall(cell):
                pygame.draw.line(surface, UITheme.WALL, (x, y + size), (x + size, y + size), width)
            if cell.col == grid.cols - 1 and grid.has_right_wall(cell):
                pygame.draw.line(surface, UITheme.WALL, (x + size, y), (x + size, y + size), width)

        # 3. markers
        self._draw_marker(surface, controller.start, UITheme.START)
        for dest in controller.destinations:
            self._draw_marker(surface, dest, UITheme.FINISH)

    def _draw_marker(self, surface, cell, color):
        x, y = self._cell_origin(cell.row, cell.col)
        pad = UITheme.MARKER_PADDING
        rect = pygame.Rect(x + pad, y + pad, self.cell_size - pad * 2, self.cell_size - pad * 2)
        pygame.draw.ellipse(surface, color, rect)
        pygame.draw.ellipse(surface, UITheme.MARKER_OUTLINE, rect, 1)

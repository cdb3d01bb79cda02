import pygame
from terrainmaze.maze.terrain import grass, mud, water


class UITheme:

    # colour scheme for the maze window and side panel

    BACKGROUND = pygame.Color(245, 245, 245)  # behind the maze surface
    PANEL = pygame.Color(230, 230, 235)

    WALL = pygame.Color(50, 50, 50)
    EXPLORED = pygame.Color(65, 105, 225, 100)  # translucent royal blue
    PATH = pygame.Color(220, 20, 60, 150)  # translucent crimson
    START = pygame.Color(50, 205, 50)  # lime green
    FINISH = pygame.Color(255, 215, 0)  # gold
    MARKER_OUTLINE = pygame.Color(255, 255, 255)

    # label, colour pairs for the legend box
    LEGEND = (
        ("Start", START),
        ("Finish (x3)", FINISH),
        ("Grass", pygame.Color(*grass.color)),
        ("Mud", pygame.Color(*mud.color)),
        ("Water", pygame.Color(*water.color)),
    )

    WALL_WIDTH = 2
    MARKER_PADDING = 5

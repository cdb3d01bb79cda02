import numpy as np


class Terrain:
    def __init__(self, code, name, penalty, color):
        self.code = code  # index into the lookup tables below, stored in Grid.terrain
        self.name = name  # name of the terrain type
        self.penalty = penalty  # cost of entering a cell of this terrain
        self.color = color  # RGB fill used by the maze view

    def __repr__(self):
        return f"Terrain({self.name}, penalty={self.penalty})"


# define objects for terrain class
default = Terrain(0, "Default", 0, (255, 255, 255))
grass = Terrain(1, "Grass", 1, (144, 238, 144))
mud = Terrain(2, "Mud", 5, (139, 119, 101))
water = Terrain(3, "Water", 10, (100, 149, 237))

ALL_TERRAIN_TYPES = (default, grass, mud, water)

# code -> penalty, for vectorized cost sums over numpy terrain arrays
PENALTY_TABLE = np.array([t.penalty for t in ALL_TERRAIN_TYPES], dtype=np.int64)


def terrain_from_code(code):
    return ALL_TERRAIN_TYPES[int(code)]

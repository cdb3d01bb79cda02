from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Cell:
    # identity, hashing and ordering come from the coordinates only;
    # ordering is row-major, which heaps use to break priority ties

    # row of the cell, 0 is the top row
    row: int

    # column of the cell, 0 is the left column
    col: int

    def index(self, cols):  # row-major offset into a grid with `cols` columns
        return self.row * cols + self.col

    def __str__(self):
        return f"Cell({self.row}, {self.col})"


ORIGIN = Cell(0, 0)

"""The rectangular grid of cells the agents live in."""


class MapIndexError(IndexError):
    """Raised when a row or a position lies outside the map."""

    def __init__(self, message="Error: index out of range"):
        super().__init__(message)


class WorldMap:
    """A rectangular grid of single-character cells."""

    def __init__(self, rows):
        grid = [list(row) for row in rows]
        if not grid or not grid[0]:
            raise ValueError("a map needs at least one row and one column")
        width = len(grid[0])
        if any(len(row) != width for row in grid):
            raise ValueError("all map rows must have the same length")
        self._rows = grid

    def __getitem__(self, index):
        if not 0 <= index < len(self._rows):
            raise MapIndexError()
        return self._rows[index]

    def __len__(self):
        return len(self._rows)

    def __iter__(self):
        return iter(self._rows)

    def __eq__(self, other):
        if not isinstance(other, WorldMap):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self):
        return f"WorldMap({self._rows!r})"

    @property
    def height(self):
        """Number of rows."""
        return len(self._rows)

    @property
    def width(self):
        """Number of columns."""
        return len(self._rows[0])

    @property
    def rows(self):
        """The live, mutable list of rows."""
        return self._rows

    def surrounding(self, x, y, size):
        """Return the square of side ``2*size+1`` centred on (x, y).

        Cells beyond the edge of the map read as walls (``'1'``).
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise MapIndexError()
        offsets = range(-size, size + 1)
        return [
            [
                self._rows[y + dy][x + dx]
                if 0 <= x + dx < self.width and 0 <= y + dy < self.height
                else "1"
                for dx in offsets
            ]
            for dy in offsets
        ]

    def copy(self):
        """Return an independent copy of the map."""
        return WorldMap(self._rows)
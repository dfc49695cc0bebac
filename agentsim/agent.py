"""A creature that wanders the map, eats trees, ages and reproduces."""

import math
import random

_MOVES = ((0, 0), (1, 0), (0, 1), (-1, 0), (0, -1))
_SEARCH_LIMIT = math.hypot(100, 100)


class NoFood(LookupError):
    """Raised when no food is visible to an agent."""

    def __init__(self, message="No food"):
        super().__init__(message)


class Agent:
    """A single creature with a position, needs and inheritable traits."""

    def __init__(self, x, y):
        self.x = x
        self.y = y
        self.time_death = 30
        self.view = 3
        self.age = 0
        self.hunger = 0
        self.speed = 4
        self.location = "0"
        self.walls = frozenset("1A")
        self.slower = frozenset("O")
        self.food = frozenset("T")
        self.time_hungry = 100
        self.time_child = 10
        self._surrounding = []

    def __repr__(self):
        return (
            f"Agent(x={self.x}, y={self.y}, age={self.age}, hunger={self.hunger}, "
            f"speed={self.speed}, view={self.view})"
        )

    @property
    def surrounding(self):
        """The part of the map the agent currently sees."""
        return self._surrounding

    @surrounding.setter
    def surrounding(self, rows):
        self._surrounding = [list(row) for row in rows]

    def find_food(self):
        """Return the (row, column) offset of the nearest visible food.

        Only food lying on or below and on or right of the agent is noticed.
        Raises NoFood when nothing qualifies.
        """
        span = self.view * 2 + 1
        best = None
        best_distance = _SEARCH_LIMIT
        for i, row in enumerate(self._surrounding[:span]):
            dy = i - self.view
            if dy < 0:
                continue
            for j, cell in enumerate(row[:span]):
                dx = j - self.view
                if dx < 0 or cell not in self.food:
                    continue
                distance = math.hypot(dy, dx)
                if distance < best_distance:
                    best, best_distance = (dy, dx), distance
        if best is None:
            raise NoFood()
        return best

    def _leave(self, grid):
        if self.location not in self.food:
            grid[self.y][self.x] = self.location

    def move(self, grid, rng=None):
        """Take one step: towards food if any is seen, otherwise at random."""
        try:
            dy, dx = self.find_food()
        except NoFood:
            self._wander(grid, random.Random() if rng is None else rng)
            return
        self.hunger += 1
        self._leave(grid)
        if dy < 0:
            self.y -= 1
        elif dy > 0:
            self.y += 1
        elif dx < 0:
            self.x -= 1
        elif dx > 0:
            self.x += 1
        self.location = grid[self.y][self.x]

    def _wander(self, grid, rng):
        height, width = len(grid), len(grid[0])
        while True:
            dx, dy = _MOVES[rng.randrange(len(_MOVES))]
            x, y = self.x + dx, self.y + dy
            if not (0 <= x < width and 0 <= y < height):
                continue
            if grid[y][x] not in self.walls:
                break
        if (x, y) == (self.x, self.y):
            return
        self.hunger += 1
        self._leave(grid)
        self.x, self.y = x, y
        self.location = grid[y][x]
        if self.location in self.slower:
            self.speed = 1
        elif self.location == "T":
            self.hunger = 0
        else:
            self.speed = 2

    def child(self, mutation, rng=None):
        """Age by one and return an offspring, mutated with ``mutation``% chance."""
        rng = random.Random() if rng is None else rng
        self.age += 1
        offspring = self._clone()
        if rng.randrange(100) >= mutation:
            return offspring
        trait = rng.randrange(5)
        delta = 1 if rng.randrange(2) else -1
        if trait == 0:
            offspring.time_child += delta
        elif trait == 1:
            offspring.time_death += delta
        elif trait == 2:
            offspring.time_hungry += delta
        elif trait == 3:
            if not (delta == -1 and offspring.speed == 1):
                offspring.speed += delta
        elif not (delta == -1 and offspring.view == 1):
            offspring.view += delta
        return offspring

    def _clone(self):
        twin = Agent(self.x, self.y)
        twin.time_death = self.time_death
        twin.view = self.view
        twin.speed = self.speed
        twin.location = self.location
        twin.walls = self.walls
        twin.slower = self.slower
        twin.food = self.food
        twin.time_hungry = self.time_hungry
        twin.time_child = self.time_child
        return twin

    def add_age(self):
        """Grow one unit older."""
        self.age += 1

    def is_dead(self):
        """True once the agent has starved or reached its lifespan."""
        return self.hunger == self.time_hungry or self.age == self.time_death
"""The simulation driver: owns the map and the agents and advances time."""

import random
import sys
import time

from agentsim.agent import Agent
from agentsim.display import CLEAR_SCREEN, REPLACE_CURSOR, colorful_display
from agentsim.world import WorldMap

MUTATION_PERCENT = 20
TREE_PERCENT = 30
_GROWTH_NEIGHBOURS = frozenset("OT")


class OutOfRange(IndexError):
    """Raised when an agent index or a position lies outside the simulation."""

    def __init__(self, message="Error: index out of range"):
        super().__init__(message)


def can_grow_tree(world, i, j):
    """True when the cell at row ``i``, column ``j`` touches water or a tree.

    Neighbours in the last row or the last column are never considered.
    """
    last_row = world.height - 1
    last_col = world.width - 1
    return any(
        0 <= r < last_row and 0 <= c < last_col and world[r][c] in _GROWTH_NEIGHBOURS
        for r, c in ((i - 1, j), (i + 1, j), (i, j - 1), (i, j + 1))
    )


class Server:
    """Runs the world: moves, ages, breeds and buries agents, grows trees."""

    def __init__(self, rows, rng=None):
        self.world = WorldMap(rows)
        self.tick = 0
        self._rng = random.Random() if rng is None else rng
        self.agents = [
            Agent(x, y)
            for y, row in enumerate(self.world)
            for x, cell in enumerate(row)
            if cell == "A"
        ]

    @property
    def agent_count(self):
        """Number of living agents."""
        return len(self.agents)

    def agent(self, index):
        """Return the agent at position ``index`` in the population."""
        if not 0 <= index < len(self.agents):
            raise OutOfRange()
        return self.agents[index]

    def agent_at(self, x, y):
        """Return the first agent standing at (x, y), or None."""
        if not (0 <= x < self.world.width and 0 <= y < self.world.height):
            raise OutOfRange()
        return next((a for a in self.agents if a.x == x and a.y == y), None)

    def update_surroundings(self):
        """Give every agent a fresh view of the map around it."""
        for agent in self.agents:
            agent.surrounding = self.world.surrounding(agent.x, agent.y, agent.view)

    def step(self):
        """Advance the simulation by one tick."""
        self.update_surroundings()
        self.tick += 1
        i = 0
        while i < len(self.agents):
            agent = self.agents[i]
            if self.tick % (10 // agent.speed) == 0:
                agent.move(self.world.rows, self._rng)
            if self.tick % 10 == 0:
                agent.add_age()
            if agent.age == agent.time_child:
                self.agents.append(agent.child(MUTATION_PERCENT, self._rng))
                self.update_surroundings()
            if agent.is_dead():
                self.kill_agent(agent)
                continue
            i += 1
        if self.tick % 20 == 0:
            self.create_tree(TREE_PERCENT)
        self.place_agents_in_map()

    def play(self, out=None, delay=0.1):
        """Run and draw the simulation until every agent is dead.

        Returns the number of ticks played.
        """
        stream = sys.stdout if out is None else out
        stream.write(CLEAR_SCREEN)
        while True:
            stream.write(REPLACE_CURSOR)
            colorful_display(self.world, stream)
            self.update_surroundings()
            if self.agents:
                colorful_display(self.agents[0].surrounding, stream)
            self.step()
            if delay:
                time.sleep(delay)
            if not self.agents:
                break
        stream.write(REPLACE_CURSOR)
        colorful_display(self.world, stream)
        return self.tick

    def kill_agent(self, agent):
        """Remove ``agent`` from the population; unknown agents are ignored."""
        for index, candidate in enumerate(self.agents):
            if candidate is agent:
                del self.agents[index]
                return

    def place_agents_in_map(self):
        """Restore the terrain under stale markers and mark every agent."""
        for y, row in enumerate(self.world):
            for x, cell in enumerate(row):
                if cell == "A":
                    occupant = self.agent_at(x, y)
                    row[x] = "0" if occupant is None else occupant.location
        for agent in self.agents:
            if not (0 <= agent.x < self.world.width and 0 <= agent.y < self.world.height):
                raise OutOfRange()
            self.world[agent.y][agent.x] = "A"

    def create_tree(self, percent):
        """Try to grow one tree next to water or another tree.

        Returns the (row, column) of the new tree, or None if none grew.
        """
        height, width = self.world.height, self.world.width
        for i in range(self._rng.randrange(height), height):
            row = self.world[i]
            for j in range(self._rng.randrange(width), width):
                if row[j] != "0" or not can_grow_tree(self.world, i, j):
                    continue
                if self._rng.randrange(100) < percent:
                    row[j] = "T"
                    return i, j
        return None
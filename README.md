# agentsim

agentsim is a small artificial-life simulation. Agents live on a grid of land,
water and trees. Each tick they look around them and walk towards the nearest
tree they notice, or wander at random when none is in sight. Walking into
water slows them down; stepping onto a tree while wandering resets their
hunger. They grow older and hungrier, have children, and die once their hunger
or their age reaches its limit. A child can carry a small mutation of its
parent's speed, field of view, lifespan, hunger tolerance or time before
breeding. Every twenty ticks a tree may sprout on open land next to water or
another tree.

An agent only notices trees that lie level with or below it and level with or
to the right of it in its field of view.

The world is drawn in the terminal with coloured cells:

- black: an agent (`A`)
- blue: water (`O`)
- magenta: a tree (`T`)
- green: anything else, such as open land (`0`)

Cells marked `1` act as walls, and cells beyond the edge of the map are seen
as walls too.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
agentsim
```

This starts the built-in world with a single agent and redraws it in place
every tick, together with the view of the first agent, until every agent has
died; it then draws the final state of the map.

Options:

- `--map FILE`: read the world from a file, one row per line (blank lines are
  skipped; all rows must have the same length). Each `A` in the map becomes an
  agent.
- `--seed N`: seed the random number generator, for repeatable runs.
- `--delay SECONDS`: pause between ticks (default `0.1`).

If the map cannot be read or is malformed, the error is printed to standard
error and the command exits with status 1.

## Using it from Python

```python
import random

from agentsim.server import Server
from agentsim.display import render

rows = [
    "0000O",
    "0A00O",
    "000TO",
]
server = Server(rows, random.Random(1))
server.step()
print(render(server.world))
print(server.agent_count)
```

- `Server.step()` advances the world by one tick.
- `Server.play(out=None, delay=0.1)` keeps stepping and drawing to `out`
  (standard output by default) until no agent is left, and returns the number
  of ticks played.
- `Server.agents` is the list of living `Agent` objects; `Server.agent(index)`
  and `Server.agent_at(x, y)` look one up, raising `OutOfRange` for a bad index
  or position.
- `Server.create_tree(percent)` tries to grow one tree and returns its
  `(row, column)`, or `None`.
- `WorldMap.surrounding(x, y, size)` gives the square of side `2*size+1` around
  a cell, with cells beyond the edge shown as walls (`'1'`).
- `render(grid)` returns the coloured text of a grid; `colorful_display(grid,
  out)` writes it.

## What it does not do

The simulation runs in the terminal only. It has no graphical window, takes no
input while running, and does not save the state of a world or the history of
a run.
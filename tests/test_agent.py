import pytest

from agentsim.agent import Agent, NoFood
from agentsim.world import WorldMap


class _ScriptedRng:
    def __init__(self, values):
        self._values = list(values)

    def randrange(self, stop):
        value = self._values.pop(0)
        assert 0 <= value < stop
        return value


def _blank(width, height):
    return [["0"] * width for _ in range(height)]


def test_new_agent_defaults():
    agent = Agent(4, 6)
    assert (agent.x, agent.y) == (4, 6)
    assert agent.view == 3
    assert agent.speed == 4
    assert agent.time_death == 30
    assert agent.time_hungry == 100
    assert agent.time_child == 10
    assert agent.location == "0"
    assert (agent.age, agent.hunger) == (0, 0)


def test_find_food_without_surrounding():
    with pytest.raises(NoFood):
        Agent(0, 0).find_food()


def test_find_food_returns_offset():
    agent = Agent(3, 3)
    grid = _blank(7, 7)
    grid[5][3] = "T"
    agent.surrounding = WorldMap(grid).surrounding(3, 3, agent.view)
    assert agent.find_food() == (2, 0)


def test_find_food_prefers_nearest():
    agent = Agent(3, 3)
    grid = _blank(7, 7)
    grid[6][6] = "T"
    grid[4][5] = "T"
    agent.surrounding = WorldMap(grid).surrounding(3, 3, agent.view)
    assert agent.find_food() == (1, 2)


def test_food_above_or_left_is_not_noticed():
    agent = Agent(3, 3)
    grid = _blank(7, 7)
    grid[0][3] = "T"
    grid[3][0] = "T"
    agent.surrounding = WorldMap(grid).surrounding(3, 3, agent.view)
    with pytest.raises(NoFood):
        agent.find_food()


def test_surrounding_is_copied():
    rows = [["0"]]
    agent = Agent(0, 0)
    agent.surrounding = rows
    rows[0][0] = "T"
    assert agent.surrounding == [["0"]]


def test_move_towards_food():
    grid = _blank(7, 7)
    grid[5][3] = "T"
    agent = Agent(3, 3)
    agent.surrounding = WorldMap(grid).surrounding(3, 3, agent.view)
    agent.move(grid, _ScriptedRng([]))
    assert (agent.x, agent.y) == (3, 4)
    assert agent.hunger == 1
    assert agent.location == "0"
    assert grid[3][3] == "0"


def test_random_move_into_water_slows_down():
    grid = [["1", "1", "1"], ["1", "0", "O"], ["1", "1", "1"]]
    agent = Agent(1, 1)
    agent.move(grid, _ScriptedRng([1]))
    assert (agent.x, agent.y) == (2, 1)
    assert agent.speed == 1
    assert agent.location == "O"
    assert agent.hunger == 1


def test_random_move_onto_tree_resets_hunger():
    grid = [["0", "T"]]
    agent = Agent(0, 0)
    agent.hunger = 5
    agent.move(grid, _ScriptedRng([1]))
    assert (agent.x, agent.y) == (1, 0)
    assert agent.hunger == 0
    assert agent.speed == 4


def test_random_move_retries_until_free_cell():
    grid = [["0", "1"], ["0", "0"]]
    agent = Agent(0, 0)
    agent.move(grid, _ScriptedRng([3, 4, 1, 2]))
    assert (agent.x, agent.y) == (0, 1)
    assert agent.speed == 2
    assert agent.hunger == 1


def test_staying_put_changes_nothing():
    grid = _blank(2, 2)
    agent = Agent(0, 0)
    agent.move(grid, _ScriptedRng([0]))
    assert (agent.x, agent.y) == (0, 0)
    assert agent.hunger == 0
    assert agent.speed == 4


def test_leaving_a_tree_does_not_restore_it():
    grid = [["A", "0"]]
    agent = Agent(0, 0)
    agent.location = "T"
    agent.move(grid, _ScriptedRng([1]))
    assert grid[0][0] == "A"
    assert (agent.x, agent.y) == (1, 0)


def test_child_without_mutation():
    parent = Agent(2, 5)
    parent.hunger = 7
    parent.age = 3
    baby = parent.child(20, _ScriptedRng([50]))
    assert parent.age == 4
    assert (baby.x, baby.y) == (2, 5)
    assert (baby.age, baby.hunger) == (0, 0)
    assert (baby.speed, baby.view) == (parent.speed, parent.view)
    assert baby.time_child == parent.time_child
    assert baby.time_death == parent.time_death
    assert baby.time_hungry == parent.time_hungry
    assert baby is not parent


@pytest.mark.parametrize(
    "script, attribute, delta",
    [
        ([0, 0, 1], "time_child", 1),
        ([0, 1, 0], "time_death", -1),
        ([0, 2, 1], "time_hungry", 1),
        ([0, 3, 1], "speed", 1),
        ([0, 4, 0], "view", -1),
    ],
)
def test_child_mutates_one_trait(script, attribute, delta):
    parent = Agent(0, 0)
    baby = parent.child(20, _ScriptedRng(script))
    assert getattr(baby, attribute) == getattr(parent, attribute) + delta


@pytest.mark.parametrize("attribute, trait", [("speed", 3), ("view", 4)])
def test_child_trait_never_drops_below_one(attribute, trait):
    parent = Agent(0, 0)
    setattr(parent, attribute, 1)
    baby = parent.child(100, _ScriptedRng([0, trait, 0]))
    assert getattr(baby, attribute) == 1


def test_dies_of_hunger():
    agent = Agent(0, 0)
    agent.hunger = agent.time_hungry - 1
    assert not agent.is_dead()
    agent.hunger += 1
    assert agent.is_dead()


def test_dies_of_age():
    agent = Agent(0, 0)
    for _ in range(agent.time_death - 1):
        agent.add_age()
    assert not agent.is_dead()
    agent.add_age()
    assert agent.age == agent.time_death
    assert agent.is_dead()
from agentsim.cli import DEFAULT_MAP, main
from agentsim.display import CLEAR_SCREEN, REPLACE_CURSOR, render
from agentsim.world import WorldMap


def test_default_map_is_rectangular_with_one_agent():
    world = WorldMap(DEFAULT_MAP)
    assert world.height == 12
    assert sum(row.count("A") for row in world) == 1
    assert world[6][11] == "A"


def test_map_without_agents_runs_once(tmp_path, capsys):
    path = tmp_path / "lake.txt"
    path.write_text("0O0\n000\n", encoding="utf-8")
    assert main(["--map", str(path), "--delay", "0", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    drawn = render(["0O0", "000"])
    assert out == CLEAR_SCREEN + REPLACE_CURSOR + drawn + REPLACE_CURSOR + drawn


def test_ragged_map_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("000\n00\n", encoding="utf-8")
    assert main(["--map", str(path), "--delay", "0"]) == 1
    assert "same length" in capsys.readouterr().err


def test_missing_map_file_reports_error(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main(["--map", str(missing)]) == 1
    assert "absent.txt" in capsys.readouterr().err
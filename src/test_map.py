# file: test_map.py

# When fixing a bug, add a failing test first, as a separate commit. That way
# it becomes easy to verify for anyone that test indeed fails without the
# follow up fix.
# - @matklad [Git Things](https://matklad.github.io/2023/12/31/git-things.html)


from pathlib import Path
from typing import List

import pytest

from internal.prelude import MAP_PATH, TileKind


@pytest.fixture(params=sorted(MAP_PATH.glob("*.txt")), ids=lambda p: p.name)
def map_rows(request: pytest.FixtureRequest) -> List[str]:
    return fs_load_map_level(request.param)


def fs_load_map_level(filepath: Path) -> List[str]:
    assert filepath.is_file(), f"Map file {filepath.name} does not exist or is not a file"
    with open(filepath, "r") as f:
        rows = [line.rstrip("\n") for line in f if line.strip() and not line.startswith("#")]
    assert rows, f"Map data is empty for file {filepath.name}"
    return rows


def test_at_least_one_map_is_shipped():
    assert (MAP_PATH / "0.txt").is_file()


def test_map_is_rectangular(map_rows: List[str]):
    assert len({len(row) for row in map_rows}) == 1, "Every row should have the same width"


def test_map_has_one_player_spawn(map_rows: List[str]):
    assert sum(row.count(TileKind.PLAYER.value) for row in map_rows) == 1


def test_map_has_food(map_rows: List[str]):
    assert any(TileKind.FOOD.value in row for row in map_rows), "A level without food is cleared at once"


def test_map_border_is_walled(map_rows: List[str]):
    wall = TileKind.WALL.value
    assert set(map_rows[0]) == {wall} and set(map_rows[-1]) == {wall}
    assert all(row[0] == wall and row[-1] == wall for row in map_rows)

import json

import pytest

from mazegen import MazeFormatError, generate_maze
from mazegen.serialization.json_serializer import MazeJSONSerializer


def test_serialize_maze_structure(maze_15):
    data = MazeJSONSerializer.serialize_maze(maze_15)

    assert data["version"] == MazeJSONSerializer.VERSION
    assert data["metadata"]["seed"] == 42
    assert data["metadata"]["width"] == 15
    assert data["metadata"]["height"] == 15
    assert data["metadata"]["carve_steps"] == maze_15.carve_steps
    assert data["goal_zones"]["exit"] == {"top": 11, "left": 0, "bottom": 14, "right": 3}
    assert data["goal_zones"]["start"] == {"top": 0, "left": 11, "bottom": 3, "right": 14}
    assert data["grid"][14].startswith("....")
    assert set("".join(data["grid"])) <= {"#", "."}


def test_save_and_load_maze(tmp_path, maze_15):
    filepath = tmp_path / "maze.json"
    MazeJSONSerializer.save_maze(str(filepath), maze_15)

    loaded = MazeJSONSerializer.load_maze(str(filepath))
    assert loaded.to_rows() == maze_15.to_rows()
    assert loaded.seed == maze_15.seed
    assert (loaded.width, loaded.height) == (15, 15)
    assert loaded.backtracks == maze_15.backtracks
    assert loaded.goal_zones == maze_15.goal_zones


def test_loaded_maze_matches_regeneration_from_seed(tmp_path):
    maze = generate_maze(21, 13, seed=99)
    filepath = tmp_path / "maze.json"
    MazeJSONSerializer.save_maze(str(filepath), maze)

    loaded = MazeJSONSerializer.load_maze(str(filepath))
    assert generate_maze(loaded.width, loaded.height, seed=loaded.seed).to_rows() == loaded.to_rows()


def test_version_mismatch_only_warns(maze_15, caplog):
    data = MazeJSONSerializer.serialize_maze(maze_15)
    data["version"] = "0.1"

    with caplog.at_level("WARNING"):
        loaded = MazeJSONSerializer.deserialize_maze(data)
    assert "version mismatch" in caplog.text
    assert loaded.to_rows() == maze_15.to_rows()


@pytest.mark.parametrize("grid", [
    None,
    [],
    ["#####", "####"],
    ["#####", "#.x.#", "#####", "#####", "#####"],
    ["####", "#..#", "####", "####"],
])
def test_malformed_grid_is_rejected(grid):
    with pytest.raises(MazeFormatError):
        MazeJSONSerializer.deserialize_maze({"version": "1.0", "grid": grid})


def test_size_mismatch_in_metadata_is_rejected(maze_15):
    data = MazeJSONSerializer.serialize_maze(maze_15)
    data["metadata"]["width"] = 21
    with pytest.raises(MazeFormatError, match="does not match"):
        MazeJSONSerializer.deserialize_maze(data)


@pytest.mark.parametrize("metadata", [None, [], "x", 5])
def test_metadata_that_is_not_an_object_is_rejected(maze_15, metadata):
    data = MazeJSONSerializer.serialize_maze(maze_15)
    data["metadata"] = metadata
    with pytest.raises(MazeFormatError, match="metadata"):
        MazeJSONSerializer.deserialize_maze(data)


def test_missing_metadata_is_allowed(maze_15):
    data = MazeJSONSerializer.serialize_maze(maze_15)
    del data["metadata"]
    loaded = MazeJSONSerializer.deserialize_maze(data)
    assert loaded.seed is None
    assert loaded.to_rows() == maze_15.to_rows()


def test_invalid_stored_seed_is_rejected(maze_15):
    data = MazeJSONSerializer.serialize_maze(maze_15)
    data["metadata"]["seed"] = -42
    with pytest.raises(MazeFormatError, match="invalid"):
        MazeJSONSerializer.deserialize_maze(data)


def test_invalid_json_file(tmp_path):
    filepath = tmp_path / "broken.json"
    filepath.write_text("{not json", encoding="utf-8")
    with pytest.raises(MazeFormatError):
        MazeJSONSerializer.load_maze(str(filepath))


def test_non_utf8_file(tmp_path):
    filepath = tmp_path / "latin.json"
    filepath.write_bytes(b'{"grid": ["\xff\xfe"]}')
    with pytest.raises(MazeFormatError):
        MazeJSONSerializer.load_maze(str(filepath))


def test_saved_file_is_plain_json(tmp_path, maze_15):
    filepath = tmp_path / "maze.json"
    MazeJSONSerializer.save_maze(str(filepath), maze_15)
    with open(filepath, encoding="utf-8") as f:
        data = json.load(f)
    assert len(data["grid"]) == 15

import json

from cords.app import config_from_args, initial_window_size


def test_window_size_defaults():
    assert initial_window_size([]) == (420, 860)


def test_window_size_from_config_file(tmp_path):
    path = tmp_path / "cords.json"
    path.write_text(json.dumps({"window_size": [300, 640]}))
    args = ["--seed", "3", "--config", str(path), "--log-level", "DEBUG"]
    assert initial_window_size(args) == (300, 640)


def test_config_from_args(tmp_path):
    path = tmp_path / "cords.json"
    path.write_text(json.dumps({"seed": 1, "density": 2.0}))

    config = config_from_args(str(path), seed=9)
    assert config.seed == 9
    assert config.density == 2.0

    assert config_from_args(str(path)).seed == 1
    assert config_from_args().seed is None

import json
import logging

import pytest

from cords.config import CordsConfig, CordFieldConfig, CountdownConfig, load_config
from cords.logging_config import setup_logging


def test_defaults():
    config = CordsConfig()
    assert config.cords.max_cords == 15
    assert config.cords.lanes == 25
    assert config.countdown.start == 6
    assert config.intro.title_delay_ms == 700.0
    assert config.dp(15) == 15.0


def test_from_dict_nested():
    config = CordsConfig.from_dict({
        "density": 2.0,
        "seed": 7,
        "window_size": [300, 600],
        "cords": {"max_cords": 5, "spawn_threshold": 20},
        "countdown": {"start": 3},
    })
    assert config.density == 2.0
    assert config.seed == 7
    assert config.window_size == (300, 600)
    assert config.cords.max_cords == 5
    assert config.cords.lanes == 25
    assert config.countdown.start == 3
    assert config.dp(15) == 30.0


def test_unknown_keys_rejected():
    with pytest.raises(ValueError):
        CordsConfig.from_dict({"speed": 3})
    with pytest.raises(ValueError):
        CordsConfig.from_dict({"cords": {"colour": "red"}})


def test_validation():
    with pytest.raises(ValueError):
        CordFieldConfig(spawn_threshold=100)
    with pytest.raises(ValueError):
        CordFieldConfig(max_cords=-1)
    with pytest.raises(ValueError):
        CordFieldConfig(cull_position=200.0)
    with pytest.raises(ValueError):
        CountdownConfig(tick_ms=0)
    with pytest.raises(ValueError):
        CordsConfig(density=0)


def test_load_config(tmp_path):
    path = tmp_path / "cords.json"
    path.write_text(json.dumps({"crossfade_ms": 0, "intro": {"loading_ms": 100}}))
    config = load_config(path)
    assert config.crossfade_ms == 0
    assert config.intro.loading_ms == 100


def test_load_config_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(ValueError):
        load_config(bad)

    listed = tmp_path / "list.json"
    listed.write_text("[1, 2]")
    with pytest.raises(ValueError):
        load_config(listed)


def test_setup_logging_levels(tmp_path):
    logger = logging.getLogger("cords")
    log_file = tmp_path / "cords.log"
    try:
        setup_logging("debug", str(log_file))
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

        setup_logging(logging.WARNING)
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

        with pytest.raises(ValueError):
            setup_logging("loud")
    finally:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)

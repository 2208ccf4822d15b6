import json

import pytest

from blockbreaker.config import ConfigError, GameConfig, load_config
from blockbreaker.simulation import Simulation


def test_defaults_are_valid():
    cfg = GameConfig().validate()
    assert cfg.field_width == 800 and cfg.field_height == 600
    assert cfg.paddle_y == 570
    assert cfg.ball_rest_y == 550
    assert cfg.grid_width == 760
    assert cfg.block_count == 45
    assert cfg.rng_seed is None


@pytest.mark.parametrize(
    "name",
    ["field_width", "field_height", "paddle_width", "paddle_height", "ball_radius", "block_width", "initial_lives"],
)
def test_non_positive_dimension_rejected(name):
    with pytest.raises(ConfigError, match=name):
        GameConfig(**{name: 0}).validate()


def test_negative_spacing_rejected():
    with pytest.raises(ConfigError):
        GameConfig(block_spacing=-1).validate()


def test_grid_must_fit_between_side_margins():
    with pytest.raises(ConfigError, match="grid"):
        GameConfig(block_cols=10).validate()
    with pytest.raises(ConfigError, match="grid"):
        GameConfig(side_margin=21).validate()


def test_ball_speed_cannot_exceed_smallest_block_side():
    GameConfig(ball_speed=30.0).validate()
    with pytest.raises(ConfigError, match="ball_speed"):
        GameConfig(ball_speed=30.5).validate()


def test_simulation_validates_config():
    with pytest.raises(ConfigError):
        Simulation(GameConfig(ball_radius=0))


def test_from_dict_rejects_unknown_and_mistyped_keys():
    with pytest.raises(ConfigError, match="unknown"):
        GameConfig.from_dict({"gravity": 9.8})
    with pytest.raises(ConfigError):
        GameConfig.from_dict({"block_rows": True})
    with pytest.raises(ConfigError):
        GameConfig.from_dict({"rng_seed": "abc"})
    with pytest.raises(ConfigError, match="block_rows"):
        GameConfig.from_dict({"block_rows": 2.5})
    with pytest.raises(ConfigError, match="block_cols"):
        GameConfig.from_dict({"block_cols": 9.5})


def test_from_dict_accepts_integral_floats_as_counts():
    cfg = GameConfig.from_dict({"block_cols": 9.0, "initial_lives": 4.0})
    assert cfg.block_cols == 9 and type(cfg.block_cols) is int
    assert cfg.initial_lives == 4 and type(cfg.initial_lives) is int
    assert len(Simulation(cfg).blocks) == 45


@pytest.mark.parametrize(
    "name, value",
    [("block_rows", 2.5), ("block_cols", 4.0), ("initial_lives", 3.0), ("block_width", True)],
)
def test_non_integer_counts_rejected(name, value):
    with pytest.raises(ConfigError, match=name):
        GameConfig(**{name: value}).validate()
    with pytest.raises(ConfigError, match=name):
        Simulation(GameConfig(**{name: value}))


def test_from_dict_overrides():
    cfg = GameConfig.from_dict({"block_rows": 2, "ball_speed": 4, "rng_seed": 9})
    assert cfg.block_rows == 2
    assert cfg.ball_speed == 4.0
    assert cfg.rng_seed == 9


def test_load_config_from_file_and_env(tmp_path):
    path = tmp_path / "game.json"
    path.write_text(json.dumps({"initial_lives": 5}))
    cfg = load_config(path, env={"BLOCKBREAKER_SEED": "77"})
    assert cfg.initial_lives == 5
    assert cfg.rng_seed == 77


def test_load_config_env_path(tmp_path):
    path = tmp_path / "game.json"
    path.write_text(json.dumps({"score_per_block": 25}))
    cfg = load_config(env={"BLOCKBREAKER_CONFIG": str(path)})
    assert cfg.score_per_block == 25


def test_load_config_defaults_without_overrides():
    assert load_config(env={}) == GameConfig()


def test_load_config_errors(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(ConfigError):
        load_config(bad, env={})
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.json", env={})
    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]")
    with pytest.raises(ConfigError):
        load_config(listing, env={})
    with pytest.raises(ConfigError):
        load_config(env={"BLOCKBREAKER_SEED": "soon"})

"""Tests for CityConfig validation and TOML loading."""

import pytest
from township import City, CityConfig, ConfigError, load_config


def test_defaults():
    config = CityConfig()
    assert config.size == 16
    assert config.money == 5000
    assert config.name == "Township"
    assert config.seed is None
    assert config.move_in_chance == 0.25


@pytest.mark.parametrize("kwargs", [
    {"size": 0},
    {"money": -1},
    {"move_in_chance": 1.5},
    {"move_in_chance": -0.1},
])
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        CityConfig(**kwargs)


def test_config_is_frozen():
    config = CityConfig()
    with pytest.raises(AttributeError):
        config.size = 3


def test_load_full_table(tmp_path):
    path = tmp_path / "city.toml"
    path.write_text(
        '[city]\nsize = 8\nmoney = 1500\nname = "Harbor"\nseed = 11\nmove_in_chance = 0.5\n'
    )
    config = load_config(path)
    assert config == CityConfig(size=8, money=1500, name="Harbor", seed=11, move_in_chance=0.5)


def test_load_partial_table_uses_defaults(tmp_path):
    path = tmp_path / "city.toml"
    path.write_text("[city]\nsize = 6\n")
    config = load_config(str(path))
    assert config.size == 6
    assert config.money == 5000


def test_missing_table_uses_defaults(tmp_path):
    path = tmp_path / "city.toml"
    path.write_text("")
    assert load_config(path) == CityConfig()


def test_unknown_key(tmp_path):
    path = tmp_path / "city.toml"
    path.write_text("[city]\npopulation = 3\n")
    with pytest.raises(ConfigError, match="population"):
        load_config(path)


def test_invalid_value_becomes_config_error(tmp_path):
    path = tmp_path / "city.toml"
    path.write_text("[city]\nsize = -2\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_malformed_toml(tmp_path):
    path = tmp_path / "city.toml"
    path.write_text("[city\nsize = ")
    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.toml")


def test_city_table_must_be_table(tmp_path):
    path = tmp_path / "city.toml"
    path.write_text('city = "big"\n')
    with pytest.raises(ConfigError):
        load_config(path)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_city_from_loaded_config(tmp_path):
    path = tmp_path / "city.toml"
    path.write_text("[city]\nsize = 3\nmoney = 700\nseed = 1\n")
    city = City.from_config(load_config(path))
    assert city.size == 3
    assert city.money == 700
    assert city.seed == 1

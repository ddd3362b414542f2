import dataclasses
from enum import Enum

import pytest
from boundednumbers import BoundType

from css3images.config import LinearGradientConfig
from css3images.errors import ConstructionError
from css3images.types import Direction, ImageMode


class Setting(Enum):
    WIDTH = "width"
    COLOR_STOPS = "color_stops"


def test_defaults():
    config = LinearGradientConfig(width=1, color_stops=[("#000", 0), ("#fff", 17)])
    assert config.direction is Direction.HORIZONTAL
    assert config.mode is ImageMode.RGB
    assert config.unit_transform is None
    assert config.bound_type == BoundType.CLAMP


def test_strings_are_coerced():
    config = LinearGradientConfig(width=1, color_stops=[], direction="VERTICAL", mode="rgba")
    assert config.direction is Direction.VERTICAL
    assert config.mode is ImageMode.RGBA


def test_invalid_direction():
    with pytest.raises(ValueError):
        LinearGradientConfig(width=1, color_stops=[], direction="diagonal")


def test_config_is_frozen():
    config = LinearGradientConfig(width=1, color_stops=[])
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.width = 2


def test_from_mapping_accepts_symbol_and_enum_keys():
    stops = [("#000", 0), ("#fff", 17)]
    assert LinearGradientConfig.from_mapping({":width": 1, ":color_stops": stops}).width == 1
    config = LinearGradientConfig.from_mapping({Setting.WIDTH: 4, Setting.COLOR_STOPS: stops})
    assert config.width == 4
    assert config.color_stops == tuple(stops)


def test_from_mapping_ignores_unknown_keys():
    config = LinearGradientConfig.from_mapping({"width": 1, "color_stops": [], "height": 99})
    assert not hasattr(config, "height")


@pytest.mark.parametrize(
    "attributes, missing",
    [
        ({"color_stops": []}, "width"),
        ({"width": 1}, "color_stops"),
        ({}, "width"),
    ],
)
def test_from_mapping_requires_fields(attributes, missing):
    with pytest.raises(ConstructionError, match=missing) as excinfo:
        LinearGradientConfig.from_mapping(attributes)
    assert excinfo.value.field == missing


def test_color_stops_may_be_none():
    config = LinearGradientConfig.from_mapping({"width": 1, "color_stops": None})
    assert config.color_stops is None


def test_color_stops_are_copied_into_a_tuple():
    stops = [["#000", 0], ["#fff", 17]]
    config = LinearGradientConfig(width=1, color_stops=(stop for stop in stops))
    assert config.color_stops == (["#000", 0], ["#fff", 17])
    assert config.color_stops == LinearGradientConfig(width=1, color_stops=config.color_stops).color_stops


@pytest.mark.parametrize(
    "kwargs, missing",
    [
        ({"color_stops": []}, "width"),
        ({"width": 1}, "color_stops"),
        ({}, "width"),
    ],
)
def test_omitted_fields_are_construction_errors(kwargs, missing):
    with pytest.raises(ConstructionError) as excinfo:
        LinearGradientConfig(**kwargs)
    assert excinfo.value.field == missing

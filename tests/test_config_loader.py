import pytest

from street_scatter import SceneConfig, SegmentConfig, UnitsConfig, load_config_from_yaml
from street_scatter.utils.config_loader import from_dict, merge_configs


def write(path, text):
    path.write_text(text)
    return path


def test_default_config(default_config_path):
    config = load_config_from_yaml(str(default_config_path))
    assert isinstance(config, SceneConfig)
    assert (config.H, config.W) == (160, 720)
    assert config.ground_level == 150
    assert config.background.mode == "color"
    assert isinstance(config.units, UnitsConfig)
    assert config.units.segment_padding == 2.0
    assert len(config.segments) == 3
    assert all(isinstance(s, SegmentConfig) for s in config.segments)
    people = config.segments[2]
    assert people.pool[3] == {"id": "person-child", "width": 1.5, "disallow_first": True}
    assert "car" in config.sprites.placeholders


def test_sparse_config_keeps_defaults(tmp_path):
    path = write(tmp_path / "scene.yaml", "W: 300\nsegments:\n  - pool: [a]\n    width: 5\n")
    config = load_config_from_yaml(str(path))
    assert config.W == 300
    assert config.H == 128
    assert config.segments[0].seed == 0
    assert config.units == UnitsConfig()


def test_relative_sprite_paths(tmp_path):
    path = write(tmp_path / "scene.yaml", "sprites:\n  sprite_dir: art\n  defs_path: defs.yaml\n")
    config = load_config_from_yaml(str(path))
    assert config.sprites.sprite_dir == str(tmp_path / "art")
    assert config.sprites.defs_path == str(tmp_path / "defs.yaml")


def test_extends(tmp_path):
    write(tmp_path / "base.yaml", "H: 200\nW: 400\nbackground:\n  mode: color\n  color_name: sky\n")
    path = write(tmp_path / "night.yaml", "extends: base.yaml\nW: 800\nbackground:\n  color_name: indigo\n")
    config = load_config_from_yaml(str(path))
    assert (config.H, config.W) == (200, 800)
    assert config.background.mode == "color"
    assert config.background.color_name == "indigo"


def test_circular_extends(tmp_path):
    write(tmp_path / "a.yaml", "extends: b.yaml\n")
    write(tmp_path / "b.yaml", "extends: a.yaml\n")
    with pytest.raises(AssertionError):
        load_config_from_yaml(str(tmp_path / "a.yaml"))


def test_missing_file(tmp_path):
    with pytest.raises(AssertionError):
        load_config_from_yaml(str(tmp_path / "missing.yaml"))


@pytest.mark.parametrize(
    "segment",
    [
        {"pool": []},
        {"pool": ["a"], "min_spacing": 3, "max_spacing": 1},
        {"pool": ["a"], "min_spacing": -1},
        {"pool": ["a"], "width": 0},
        {"pool": [{"id": "a"}]},
        {"pool": [7]},
    ],
)
def test_invalid_segment(segment):
    with pytest.raises(AssertionError):
        from_dict(SegmentConfig, segment)


@pytest.mark.parametrize(
    "data",
    [
        {"background": {"mode": "image"}},
        {"background": {"color_name": "plaid"}},
        {"ground_color": "plaid"},
        {"dpi": 0},
        {"units": {"tile_size": 0}},
        {"units": {"segment_padding": -1}},
        {"sprites": {"placeholders": {"x": {"shape": "blob", "width_px": 1, "height_px": 1}}}},
        {"sprites": {"placeholders": {"x": {"shape": "rect", "width_px": 0, "height_px": 1}}}},
        {"colour": "red"},
    ],
)
def test_invalid_scene(data):
    with pytest.raises(AssertionError):
        from_dict(SceneConfig, data)


def test_merge_configs():
    base = {"a": 1, "nested": {"x": 1, "y": 2}, "items": [1, 2]}
    override = {"nested": {"y": 3}, "items": [9]}
    assert merge_configs(base, override) == {"a": 1, "nested": {"x": 1, "y": 3}, "items": [9]}
    assert base["nested"] == {"x": 1, "y": 2}

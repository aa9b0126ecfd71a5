import numpy as np
import pytest
from PIL import Image

from street_scatter import SpriteConfig, SpriteRegistry, UnresolvableAssetError, build_sprite_registry
from street_scatter.entities.sprites import load_sprite_defs, load_sprites_from_directory
from street_scatter.utils.shapes import make_placeholder_sprite, shape_mask

from conftest import solid_sprite


def write_png(path, width, height, color=(255, 0, 0, 255)):
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", (width, height), color).save(path)


class TestRegistry:
    def test_register_and_get(self):
        registry = SpriteRegistry()
        registry.register("cone", solid_sprite(12, 20))
        sprite = registry.get("cone")
        assert (sprite.width, sprite.height) == (12, 20)
        assert "cone" in registry
        assert registry.ids() == ["cone"]

    def test_unknown_id(self):
        registry = SpriteRegistry()
        with pytest.raises(UnresolvableAssetError):
            registry.get("cone")
        with pytest.raises(KeyError):
            registry.get_def("cone")

    def test_defs_default_to_no_anchor(self, sprites):
        assert sprites.get_def("tree").origin_y is None
        assert sprites.get_def("person").origin_y == 40

    @pytest.mark.parametrize("shape", [(4, 4), (4, 4, 3), (0, 4, 4)])
    def test_rejects_non_rgba(self, shape):
        with pytest.raises(ValueError):
            SpriteRegistry().register("bad", np.zeros(shape, dtype=np.uint8))


def test_load_sprites_from_directory(tmp_path):
    write_png(tmp_path / "oak.png", 48, 96)
    write_png(tmp_path / "people" / "walker.png", 24, 80)
    sprites = load_sprites_from_directory(str(tmp_path))
    assert sorted(sprites) == ["oak", "people/walker"]
    assert sprites["people/walker"].shape == (80, 24, 4)


def test_load_sprites_missing_directory(tmp_path):
    assert load_sprites_from_directory(str(tmp_path / "nope")) == {}


def test_load_sprite_defs(tmp_path):
    defs_path = tmp_path / "sprites.yaml"
    defs_path.write_text("people/walker:\n  originY: 70\noak:\n  origin_y: 90\nbench: {}\n")
    defs = load_sprite_defs(str(defs_path))
    assert defs["people/walker"].origin_y == 70
    assert defs["oak"].origin_y == 90
    assert defs["bench"].origin_y is None


@pytest.mark.parametrize("text", ["- walker\n- runner\n", "just a string\n", "walker: 90\n"])
def test_load_sprite_defs_rejects_non_mapping(tmp_path, text):
    defs_path = tmp_path / "defs.yaml"
    defs_path.write_text(text)
    with pytest.raises(ValueError):
        load_sprite_defs(str(defs_path))


def test_load_sprite_defs_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_sprite_defs(str(tmp_path / "missing.yaml"))


def test_build_sprite_registry(tmp_path):
    write_png(tmp_path / "art" / "oak.png", 48, 96)
    defs_path = tmp_path / "defs.yaml"
    defs_path.write_text("oak:\n  origin_y: 90\n")
    config = SpriteConfig(
        sprite_dir=str(tmp_path / "art"),
        defs_path=str(defs_path),
        placeholders={"car": {"shape": "rect", "color": "red", "width_px": 96, "height_px": 40, "origin_y": 36}},
    )
    registry = build_sprite_registry(config)
    assert registry.ids() == ["car", "oak"]
    assert registry.get_def("oak").origin_y == 90
    assert registry.get_def("car").origin_y == 36
    assert registry.get("car").width == 96


class TestPlaceholders:
    def test_rect_is_opaque(self):
        sprite = np.asarray(make_placeholder_sprite("rect", "red", 6, 4))
        assert sprite.shape == (4, 6, 4)
        assert (sprite[..., 3] == 255).all()
        assert (sprite[..., :3] == [255, 0, 0]).all()

    def test_circle_corners_transparent(self):
        sprite = np.asarray(make_placeholder_sprite("circle", (1, 2, 3), 10, 10))
        assert sprite[0, 0, 3] == 0
        assert sprite[5, 5, 3] == 255

    def test_triangle_widens_downwards(self):
        mask = np.asarray(shape_mask("triangle", 10, 10))
        assert mask[-1].sum() > mask[0].sum()

    def test_unknown_shape(self):
        with pytest.raises(ValueError):
            make_placeholder_sprite("hexagon", "red", 4, 4)

    def test_unknown_color(self):
        with pytest.raises(ValueError):
            make_placeholder_sprite("rect", "plaid", 4, 4)

    def test_non_positive_size(self):
        with pytest.raises(ValueError):
            make_placeholder_sprite("rect", "red", 0, 4)

import numpy as np

from street_scatter import SceneConfig, SegmentConfig, SpriteConfig, load_config_from_yaml, render_scene
from street_scatter.core.scene import segment_offsets
from street_scatter.systems.generation.background import COLOR_PALETTE


def test_render_default_scene(default_config_path):
    config = load_config_from_yaml(str(default_config_path))
    seen = []
    image = np.asarray(render_scene(config, on_segment=lambda i, calls: seen.append((i, len(calls)))))
    assert image.shape == (160, 720, 3)
    assert image.dtype == np.uint8
    assert [i for i, _ in seen] == [0, 1, 2]
    assert all(n >= 1 for _, n in seen)
    # Sky above everything that was drawn, ground band below the ground line.
    assert tuple(image[0, 719]) == COLOR_PALETTE["sky"]
    assert tuple(image[155, 719]) == COLOR_PALETTE["asphalt"]


def test_render_is_deterministic(default_config_path):
    config = load_config_from_yaml(str(default_config_path))
    assert np.array_equal(np.asarray(render_scene(config)), np.asarray(render_scene(config)))


def test_dpi_scales_canvas(default_config_path):
    config = load_config_from_yaml(str(default_config_path))
    config.dpi = 2
    assert render_scene(config).shape == (320, 1440, 3)


def test_segment_offsets():
    config = SceneConfig(
        street_offset=10,
        segments=[
            SegmentConfig(pool=["a"], width=5),
            SegmentConfig(pool=["a"], width=2, offset_left=200),
            SegmentConfig(pool=["a"], width=4),
        ],
    )
    assert segment_offsets(config) == [10.0, 200.0, 224.0]


def test_segments_drawn_in_place():
    config = SceneConfig(
        H=60,
        W=120,
        ground_thickness=0,
        sprites=SpriteConfig(placeholders={"box": {"shape": "rect", "color": "white", "width_px": 24, "height_px": 24}}),
        segments=[SegmentConfig(pool=["box"], width=3, offset_left=30)],
    )
    image = np.asarray(render_scene(config))
    # One 12 px box centered in the 36 px wide segment, resting on the bottom edge.
    assert (image[48:60, 42:54] == 255).all()
    assert image[:, :42].sum() == 0
    assert image[:, 54:].sum() == 0

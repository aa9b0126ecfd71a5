from pathlib import Path

import jax.numpy as jnp
import pytest

from street_scatter import ObjectDescriptor, SpriteRegistry

CONFIG_DIR = Path(__file__).resolve().parents[1] / "src" / "street_scatter" / "configs"


def solid_sprite(width, height, color=(255, 0, 0), alpha=255):
    rgba = jnp.array(list(color) + [alpha], dtype=jnp.uint8)
    return jnp.broadcast_to(rgba[None, None, :], (height, width, 4))


@pytest.fixture
def sprites():
    registry = SpriteRegistry()
    registry.register("tree", solid_sprite(48, 96, (0, 128, 0)))  # 2 ft wide
    registry.register("lamp", solid_sprite(24, 120, (192, 192, 192)))  # 1 ft wide
    registry.register("person", solid_sprite(24, 48, (0, 0, 255)), origin_y=40)
    registry.register("sign", solid_sprite(24, 48, (255, 255, 0)))
    return registry


@pytest.fixture
def street_pool():
    return [
        ObjectDescriptor(width=2),
        ObjectDescriptor(width=3),
        ObjectDescriptor(width=2),
        ObjectDescriptor(width=2),
        ObjectDescriptor(width=1, disallow_first=True),
    ]


@pytest.fixture
def default_config_path():
    return CONFIG_DIR / "default_config.yaml"

import yaml
from typing import Type, TypeVar, Any, Dict, get_args, get_origin, get_type_hints
from dataclasses import is_dataclass, fields
from pathlib import Path
from termcolor import colored
from ..core.config import SceneConfig
from ..systems.generation.background import BACKGROUND_MODES, COLOR_PALETTE
from ..utils.shapes import SHAPE_COLORS, SHAPE_TYPES

T = TypeVar("T")


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries.
    Values in override take precedence over base.
    """
    merged = base.copy()
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value
    return merged


def _error(section: str, problem: str, required: str, provided: Any) -> str:
    return (
        f"{colored(f'{section} CONFIG ERROR', 'white', 'on_red', attrs=['bold'])}\n"
        f"{colored('Problem:', 'red', attrs=['bold'])} {problem}\n"
        f"{colored('Required:', 'cyan')} {required}\n"
        f"{colored('Provided:', 'yellow')} {provided}"
    )


def _validate_segment(data: Dict[str, Any]) -> None:
    pool = data.get("pool")
    assert isinstance(pool, list) and len(pool) > 0, _error(
        "SEGMENT", "Segment pool is missing or empty",
        "pool must be a non-empty list of sprite ids or mappings", pool,
    )
    for entry in pool:
        if isinstance(entry, dict):
            width = entry.get("width")
            assert isinstance(width, (int, float)) and width > 0, _error(
                "SEGMENT", "Pool entry has an invalid width",
                "width must be a number > 0", entry,
            )
        else:
            assert isinstance(entry, str), _error(
                "SEGMENT", "Invalid pool entry type",
                "Each entry must be a sprite id string or a mapping", f"{entry} ({type(entry).__name__})",
            )

    if "width" in data:
        assert data["width"] > 0, _error("SEGMENT", "Invalid segment width", "Value must be > 0", data["width"])

    min_spacing = data.get("min_spacing", 0.0)
    max_spacing = data.get("max_spacing", 0.0)
    assert min_spacing >= 0, _error("SEGMENT", "Invalid min_spacing value", "Value must be >= 0", min_spacing)
    assert max_spacing >= min_spacing, _error(
        "SEGMENT", "Invalid spacing range",
        "max_spacing must be >= min_spacing",
        f"min_spacing={min_spacing}, max_spacing={max_spacing}",
    )


def _validate_placeholders(placeholders: Dict[str, Any]) -> None:
    for sprite_id, params in placeholders.items():
        shape = params.get("shape", "rect")
        assert shape in SHAPE_TYPES, (
            f"{colored('SPRITES CONFIG ERROR', 'white', 'on_red', attrs=['bold'])}\n"
            f"{colored('Problem:', 'red', attrs=['bold'])} Invalid placeholder shape for {sprite_id!r}\n"
            f"{colored('Invalid shape:', 'yellow')} {shape}\n"
            f"{colored('Valid shapes:', 'cyan')} {sorted(SHAPE_TYPES)}\n"
            f"{colored('Solution:', 'green', attrs=['bold'])} Use only valid shape names from the list above"
        )
        color = params.get("color", "gray")
        assert color in SHAPE_COLORS, (
            f"{colored('SPRITES CONFIG ERROR', 'white', 'on_red', attrs=['bold'])}\n"
            f"{colored('Problem:', 'red', attrs=['bold'])} Invalid placeholder color for {sprite_id!r}\n"
            f"{colored('Invalid color:', 'yellow')} {color}\n"
            f"{colored('Valid colors:', 'cyan')} {list(SHAPE_COLORS.keys())}\n"
            f"{colored('Solution:', 'green', attrs=['bold'])} Use only valid color names from the list above"
        )
        for key in ("width_px", "height_px"):
            value = params.get(key)
            assert isinstance(value, int) and value > 0, _error(
                "SPRITES", f"Invalid placeholder {key} for {sprite_id!r}", "Value must be int > 0", value,
            )


def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
    """
    Convert dictionary to dataclass recursively.
    """
    if not is_dataclass(cls):
        return data

    if cls.__name__ == "SegmentConfig":
        _validate_segment(data)

    if cls.__name__ == "SpriteConfig":
        _validate_placeholders(data.get("placeholders") or {})

    if cls.__name__ == "BackgroundConfig":
        mode = data.get("mode", "black")
        assert mode in BACKGROUND_MODES, _error(
            "BACKGROUND", "Invalid background mode", f"One of {list(BACKGROUND_MODES)}", mode,
        )
        if "color_name" in data:
            assert data["color_name"] in COLOR_PALETTE, _error(
                "BACKGROUND", "Invalid background color", f"One of {sorted(COLOR_PALETTE)}", data["color_name"],
            )

    if cls.__name__ == "SceneConfig":
        if "ground_color" in data:
            assert data["ground_color"] in COLOR_PALETTE, _error(
                "SCENE", "Invalid ground color", f"One of {sorted(COLOR_PALETTE)}", data["ground_color"],
            )
        for key in ("scale", "dpi"):
            if key in data:
                assert data[key] > 0, _error("SCENE", f"Invalid {key} value", "Value must be > 0", data[key])

    if cls.__name__ == "UnitsConfig":
        for key in ("tile_size", "tile_size_actual"):
            if key in data:
                assert data[key] > 0, _error("UNITS", f"Invalid {key} value", "Value must be > 0", data[key])
        if "segment_padding" in data:
            assert data["segment_padding"] >= 0, _error(
                "UNITS", "Invalid segment_padding value", "Value must be >= 0", data["segment_padding"],
            )

    # Use get_type_hints to resolve string forward references
    try:
        type_hints = get_type_hints(cls)
    except Exception:
        # Fallback if resolving fails (e.g. strict forward refs not in scope)
        type_hints = {f.name: f.type for f in fields(cls)}

    kwargs = {}

    for key, value in data.items():
        assert key in type_hints, _error(
            cls.__name__.replace("Config", "").upper(), f"Unknown field {key!r}",
            f"One of {sorted(f.name for f in fields(cls))}", key,
        )
        field_type = type_hints[key]

        # list[SomeConfig]
        if get_origin(field_type) is list and isinstance(value, list):
            args = get_args(field_type)
            if args and is_dataclass(args[0]):
                kwargs[key] = [from_dict(args[0], item) for item in value]
                continue

        # Optional[SomeConfig]
        if get_origin(field_type) is not None:
            real_type = next((a for a in get_args(field_type) if a is not type(None)), None)
            if real_type and is_dataclass(real_type) and isinstance(value, dict):
                kwargs[key] = from_dict(real_type, value)
                continue

        if is_dataclass(field_type) and isinstance(value, dict):
            kwargs[key] = from_dict(field_type, value)
        else:
            kwargs[key] = value

    return cls(**kwargs)


def _read_yaml(path: Path, seen: tuple = ()) -> Dict[str, Any]:
    """Read a YAML config, resolving relative sprite paths and ``extends``."""
    assert path.exists(), (
        f"{colored('FILE ERROR', 'white', 'on_red', attrs=['bold'])}\n"
        f"{colored('Problem:', 'red', attrs=['bold'])} Configuration file not found\n"
        f"{colored('Path:', 'cyan')} {path}\n"
        f"{colored('Solution:', 'green', attrs=['bold'])} Check if the file exists and path is correct"
    )
    resolved = path.resolve()
    assert resolved not in seen, _error("FILE", "Circular extends chain", "Acyclic extends", resolved)

    with open(path, "r") as f:
        yaml_config = yaml.safe_load(f) or {}

    # Relative sprite paths are resolved against the config file's directory.
    sprites = yaml_config.get("sprites") or {}
    for key in ("sprite_dir", "defs_path"):
        if sprites.get(key) is not None and not Path(sprites[key]).is_absolute():
            sprites[key] = str(path.parent / sprites[key])

    parent = yaml_config.pop("extends", None)
    if parent is None:
        return yaml_config
    base = _read_yaml(path.parent / parent, seen + (resolved,))
    return merge_configs(base, yaml_config)


def load_config_from_yaml(config_path: str) -> SceneConfig:
    """
    Load configuration from YAML file.

    A file may name a base config with ``extends: other.yaml``; its values
    are merged under the file's own (see merge_configs). Lists such as
    ``segments`` are replaced, not merged.

    Args:
        config_path: Path to YAML config file

    Returns:
        SceneConfig: Loaded configuration
    """
    yaml_config = _read_yaml(Path(config_path))

    # Use the recursive from_dict loader which inspects the class structure, so a
    # sparse dict keeps the dataclass defaults for missing fields.
    return from_dict(SceneConfig, yaml_config)

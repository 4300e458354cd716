from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

DEFAULT_CONFIG_NAME = "config.default.yaml"
LOCAL_CONFIG_NAME = "config.yaml"

# Used when the default YAML file is not present in the config directory
BUILTIN_DEFAULTS: Dict[str, Any] = {
    "input_path": "source.txt",
    "output_path": "sortedlist.txt",
    "logging": {"level": "info"},
    "metrics": {"enabled": True},
}


def _read_yaml_dict(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping: {path}")
    return data


def merge_sections(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay ``override`` on ``base`` one section deep.

    Top-level keys replace; a section (``logging``, ``metrics``) present as
    a mapping on both sides keeps the base keys the override leaves out.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = {**current, **value}
        else:
            merged[key] = value
    return merged


def load_effective_config(
    base_dir: Path,
    default_name: str = DEFAULT_CONFIG_NAME,
    local_name: str = LOCAL_CONFIG_NAME,
) -> Tuple[Dict[str, Any], bool]:
    """Return the defaults with the optional local file laid over them.

    The flag tells whether a local file was found.
    """
    default_path = base_dir / default_name
    if default_path.exists():
        cfg = _read_yaml_dict(default_path)
    else:
        cfg = copy.deepcopy(BUILTIN_DEFAULTS)

    local_path = base_dir / local_name
    if not local_path.exists():
        return cfg, False
    return merge_sections(cfg, _read_yaml_dict(local_path)), True

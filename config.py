from __future__ import annotations

from copy import deepcopy
from typing import Any, Mapping, Optional, TypedDict


class Config(TypedDict):
    input_path: str
    output_path: str
    log_level: str
    window_width: int
    window_height: int
    max_scale: int


DEFAULT_CONFIG: Config = {
    "input_path": "example.pbm",
    "output_path": "output.pbm",
    "log_level": "INFO",
    "window_width": 700,
    "window_height": 400,
    "max_scale": 20,        # upper bound of the viewer's zoom slider
}


def get_config(overrides: Optional[Mapping[str, Any]] = None) -> Config:
    config = deepcopy(DEFAULT_CONFIG)
    for key, value in (overrides or {}).items():
        if key not in config:
            raise KeyError(f"unknown config key: {key}")
        config[key] = value
    return config

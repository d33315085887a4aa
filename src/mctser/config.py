"""Search configuration loading from YAML."""

from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .mcts.search import SearchConfig


def config_from_dict(data: Dict[str, Any]) -> SearchConfig:
    """Build a validated SearchConfig from a plain dict.

    Accepts the fields at top level or under a ``search`` section.
    """
    if "search" in data:
        data = data["search"] or {}
    if not isinstance(data, dict):
        raise ValueError(f"Search config must be a dict, got {type(data)}")

    known = {f.name for f in fields(SearchConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown search config keys: {', '.join(unknown)}")

    return SearchConfig(**data).validate()


def load_config(path: Union[str, Path]) -> SearchConfig:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {p}")
    with open(p) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be dict, got {type(data)}")
    return config_from_dict(data)

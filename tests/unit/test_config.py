"""Test YAML search configuration loading."""

import math

import pytest
import yaml

from mctser.config import config_from_dict, load_config
from mctser.mcts.search import SearchConfig


def _write(tmp_path, data, name="search.yaml"):
    path = tmp_path / name
    path.write_text(yaml.safe_dump(data))
    return path


def test_defaults():
    config = SearchConfig()
    assert config.exploration_constant == pytest.approx(math.sqrt(2))
    assert config.tie_break == "first"
    assert config.expansion_order == "random"
    assert config.seed is None
    assert config.log_every == 0


def test_load_search_section(tmp_path):
    path = _write(tmp_path, {"search": {"exploration_constant": 0.7, "seed": 3}})
    config = load_config(path)

    assert config.exploration_constant == 0.7
    assert config.seed == 3
    assert config.tie_break == "first"


def test_load_top_level(tmp_path):
    path = _write(tmp_path, {"tie_break": "random", "log_every": 100})
    config = load_config(str(path))

    assert config.tie_break == "random"
    assert config.log_every == 100


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == SearchConfig()


def test_unknown_key():
    with pytest.raises(ValueError, match="ucb_c"):
        config_from_dict({"ucb_c": 1.41})


def test_invalid_value():
    with pytest.raises(ValueError):
        config_from_dict({"search": {"expansion_order": "widest"}})


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_non_dict_root(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_shipped_config():
    from pathlib import Path

    path = Path(__file__).resolve().parents[2] / "configs" / "search.yaml"
    config = load_config(path)
    assert config.seed == 42
    assert config.exploration_constant == pytest.approx(math.sqrt(2))

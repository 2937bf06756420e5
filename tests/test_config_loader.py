"""
Tests for loading the YAML configuration.
"""

import pytest
import yaml

from kpsearch.solvers.classic import DPSolver, ExhaustiveSolver
from kpsearch.utils.config_loader import ALGORITHM_REGISTRY, load_config


def test_default_config_loads():
    cfg = load_config()
    assert cfg.instance.num_items == 20
    assert cfg.instance.capacity_ratio == 0.5
    assert set(cfg.solvers.algorithms_to_test) == set(ALGORITHM_REGISTRY)
    assert cfg.solvers.algorithms_to_test["exhaustive"] is ExhaustiveSolver
    assert cfg.solvers.max_items["dynamic_programming"] is None


def _write_config(tmp_path, algorithms, max_items=None):
    config = {
        "paths": {"data": "data", "artifacts": "artifacts", "logs": "logs"},
        "instance": {"num_items": 5, "seed": 1},
        "solvers": {"algorithms_to_test": algorithms, "max_items": max_items},
    }
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(config))
    return str(path)


def test_paths_are_absolute(tmp_path):
    cfg = load_config(_write_config(tmp_path, ["dynamic_programming"]))
    assert cfg.paths.data.endswith("data")
    assert cfg.paths.root in cfg.paths.data
    assert cfg.solvers.algorithms_to_test == {"dynamic_programming": DPSolver}
    assert cfg.solvers.max_items == {}


def test_unknown_algorithm_raises(tmp_path):
    with pytest.raises(ValueError):
        load_config(_write_config(tmp_path, ["simulated_annealing"]))


def test_unknown_max_items_key_raises(tmp_path):
    with pytest.raises(ValueError):
        load_config(_write_config(tmp_path, ["exhaustive"], {"greedy": 10}))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))

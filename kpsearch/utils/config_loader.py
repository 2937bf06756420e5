# kpsearch/utils/config_loader.py
import yaml
import os
from types import SimpleNamespace
from typing import Dict, Any

# --- Import solver CLASSes here ---
from kpsearch.solvers.classic.exhaustive import ExhaustiveSolver
from kpsearch.solvers.classic.branch_and_bound import BranchAndBoundSolver
from kpsearch.solvers.classic.blocking import BlockingSolver, SortedBlockingSolver
from kpsearch.solvers.classic.dp_solver import DPSolver

# The registry maps a config name to a Solver Class.
ALGORITHM_REGISTRY = {
    "exhaustive": ExhaustiveSolver,
    "branch_and_bound": BranchAndBoundSolver,
    "blocking": BlockingSolver,
    "sorted_blocking": SortedBlockingSolver,
    "dynamic_programming": DPSolver,
}

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))


def _post_process_config(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    Processes the raw config dict to add absolute paths and solver classes.
    This function contains all logic that cannot be represented in a static YAML file.
    """
    # --- 1. Build absolute paths for all entries in the 'paths' section ---
    for key, rel_path in config_dict['paths'].items():
        config_dict['paths'][key] = os.path.join(PROJECT_ROOT, rel_path)
    config_dict['paths']['root'] = PROJECT_ROOT

    # --- 2. Map Algorithm Names to Solver Classes ---
    solvers_cfg = config_dict['solvers']
    try:
        solvers_cfg['algorithms_to_test'] = {
            name: ALGORITHM_REGISTRY[name] for name in solvers_cfg['algorithms_to_test']
        }
    except KeyError as e:
        raise ValueError(f"Algorithm '{e.args[0]}' is defined in the config but not found in ALGORITHM_REGISTRY in config_loader.py.") from e

    # max_items stays a plain dict: a missing or null entry means "no limit"
    max_items = solvers_cfg.get('max_items') or {}
    unknown = set(max_items) - set(ALGORITHM_REGISTRY)
    if unknown:
        raise ValueError(f"max_items refers to unknown algorithms: {sorted(unknown)}")
    solvers_cfg['max_items'] = max_items

    return config_dict


def load_config(config_path: str = 'configs/config.yaml') -> SimpleNamespace:
    """
    Loads, processes, and returns the project configuration from a YAML file
    as a SimpleNamespace object for dot notation access.
    A relative path is resolved against the project root.
    """
    full_config_path = os.path.join(PROJECT_ROOT, config_path)

    try:
        with open(full_config_path, 'r') as f:
            config_dict = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found at: {full_config_path}")

    processed_config = _post_process_config(config_dict)

    # Convert the final dictionary to a SimpleNamespace for easy attribute access.
    # The solver maps are looked up by name, so they stay dicts.
    def dict_to_namespace(d: Dict) -> SimpleNamespace:
        for k, v in d.items():
            if isinstance(v, dict) and k not in ('algorithms_to_test', 'max_items'):
                d[k] = dict_to_namespace(v)
        return SimpleNamespace(**d)

    return dict_to_namespace(processed_config)

# kpsearch/evaluation/runner.py
import logging
import time
from typing import Any, Dict, List, Optional, Tuple, Type

import pandas as pd
from tqdm import tqdm

from kpsearch.core.items import Item, copy_items, sum_weights
from kpsearch.core.result import SolveResult
from kpsearch.solvers.interface import SolverInterface

logger = logging.getLogger(__name__)


def run_algorithm(solver: SolverInterface, items: List[Item], capacity: int) -> Tuple[Dict[str, Any], SolveResult]:
    """
    Runs one engine on a fresh copy of the item set and times it.

    Returns:
        Tuple[Dict[str, Any], SolveResult]: A flat record for the results table
        and the engine's raw result.
    """
    # Copy the items so the run isn't influenced by a previous run.
    test_items = copy_items(items)

    start_time = time.perf_counter()
    result = solver.solve(test_items, capacity)
    elapsed = time.perf_counter() - start_time

    record = {
        "solver": solver.name,
        "n": len(items),
        "capacity": capacity,
        "value": result.value,
        "weight": sum_weights(result.solution),
        "calls": result.calls,
        "time_seconds": elapsed,
    }
    logger.info(f"{solver.name}: value {record['value']}, weight {record['weight']}, "
                f"calls {record['calls']}, elapsed {elapsed:.6f}s")
    return record, result


def compare_solvers(
    items: List[Item],
    capacity: int,
    solvers: Dict[str, Type[SolverInterface]],
    max_items: Optional[Dict[str, Optional[int]]] = None,
) -> Tuple[pd.DataFrame, Dict[str, SolveResult]]:
    """
    Runs every solver on its own copy of the same instance.

    Args:
        items (List[Item]): The item set, left untouched.
        capacity (int): The maximum capacity of the knapsack.
        solvers (Dict[str, Type[SolverInterface]]): Config name -> solver class.
        max_items (Dict[str, int | None]): Largest item count each solver is
            run on; missing or None means no limit.

    Returns:
        Tuple[pd.DataFrame, Dict[str, SolveResult]]: One row per solver that
        ran, and the raw results keyed by config name.
    """
    max_items = max_items or {}
    records = []
    results = {}

    for name, SolverClass in tqdm(solvers.items(), desc="Running solvers"):
        solver = SolverClass(config={"max_items": max_items.get(name)})
        if not solver.accepts(items):
            logger.warning(f"Too many items for {name} ({len(items)} > {solver.max_items}), skipping.")
            continue

        logger.info(f"--- Running Solver: {solver.name} ---")
        try:
            record, result = run_algorithm(solver, items, capacity)
        except Exception as e:
            logger.error(f"Solver '{name}' failed. Error: {e}", exc_info=True)
            continue
        records.append(record)
        results[name] = result

    columns = ["solver", "n", "capacity", "value", "weight", "calls", "time_seconds"]
    return pd.DataFrame(records, columns=columns), results

# kpsearch/evaluation/reporting.py
import logging
import os
from typing import Any, Dict, List

import pandas as pd

from kpsearch.core.items import Item, sum_values, sum_weights

logger = logging.getLogger(__name__)


def format_selected(items: List[Item], limit: int = 100) -> str:
    """Renders the selected items as 'index(value, weight)', at most `limit` of them."""
    parts = []
    for i, item in enumerate(items):
        if not item.is_selected:
            continue
        if len(parts) >= limit:
            parts.append("...")
            break
        parts.append(f"{i}({item.value}, {item.weight})")
    return " ".join(parts)


def format_parameters(items: List[Item], capacity: int) -> str:
    return "\n".join([
        "*** Parameters ***",
        f"# items: {len(items)}",
        f"Total value: {sum_values(items, add_all=True)}",
        f"Total weight: {sum_weights(items, add_all=True)}",
        f"Allowed weight: {capacity}",
    ])


def format_result(record: Dict[str, Any], solution: List[Item], limit: int = 100) -> str:
    return "\n".join([
        f"*** {record['solver']} ***",
        f"Elapsed: {record['time_seconds']:.6f}",
        format_selected(solution, limit=limit),
        f"Value: {record['value']}, Weight: {record['weight']}, Calls: {record['calls']}",
    ])


def save_results_to_csv(results_df: pd.DataFrame, save_path: str):
    """Writes the results table to a csv file, creating the directory if needed."""
    directory = os.path.dirname(save_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    results_df.to_csv(save_path, index=False)
    logger.info(f"Results saved to {save_path}")

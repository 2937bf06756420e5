# kpsearch/utils/generator.py
# -*- coding: utf-8 -*-


'''
This module provides functions to generate reproducible knapsack item sets
and to save/load them as instance files.
'''

import random
from typing import List, Tuple
import os
import csv
import logging

from kpsearch.core.errors import InvalidInputError
from kpsearch.core.items import Item, sum_weights

logger = logging.getLogger(__name__)


# Function to generate a seeded item set
def make_items(
    num_items: int,
    min_value: int = 1,
    max_value: int = 10,
    min_weight: int = 4,
    max_weight: int = 10,
    seed: int = 1337
) -> List[Item]:
    """
    Generate a reproducible set of knapsack items.

    The result depends only on the arguments: the same size, ranges and seed
    always produce the same items.

    Args:
        num_items (int): Number of items to generate.
        min_value (int): Minimum value of a single item (inclusive).
        max_value (int): Maximum value of a single item (inclusive).
        min_weight (int): Minimum weight of a single item (inclusive).
        max_weight (int): Maximum weight of a single item (inclusive).
        seed (int): Seed for the pseudo-random number generator.

    Returns:
        List[Item]: Items with ids 0..num_items-1, none selected.
    """
    if num_items < 1:
        raise InvalidInputError("num_items must be at least 1")
    if not (0 < min_value <= max_value):
        raise InvalidInputError(f"Value range must satisfy 0 < min <= max, got [{min_value}, {max_value}]")
    if not (0 < min_weight <= max_weight):
        raise InvalidInputError(f"Weight range must satisfy 0 < min <= max, got [{min_weight}, {max_weight}]")

    rng = random.Random(seed)
    items = []
    for i in range(num_items):
        value = rng.randint(min_value, max_value)
        weight = rng.randint(min_weight, max_weight)
        items.append(Item(id=i, value=value, weight=weight))
    return items


def allowed_weight(items: List[Item], capacity_ratio: float = 0.5) -> int:
    """Knapsack capacity as a ratio of the total weight of all items."""
    if not (0.0 <= capacity_ratio <= 1.0):
        raise InvalidInputError("Capacity ratio must be between 0.0 and 1.0")
    return int(sum_weights(items, add_all=True) * capacity_ratio)


def save_instance_to_file(items: List[Item], capacity: int, filename: str):
    """Saves the item set to a csv file."""
    # Ensure the directory exists
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filename, 'w', newline='') as f:
        # Write the first line with number of total items and capacity
        f.write(f"{len(items)} {capacity}\n")
        writer = csv.writer(f)
        writer.writerow(['value', 'weight'])
        for item in items:
            writer.writerow([item.value, item.weight])

    logger.info(f"Instance successfully saved to {filename}")


def load_instance_from_file(filename: str) -> Tuple[List[Item], int]:
    """
    Loads a knapsack instance from a csv file.
    Assumes first line is 'num_items capacity', then a 'value,weight' header
    and one row per item.

    Returns:
        Tuple[List[Item], int]: (items, capacity)
    """
    items = []

    with open(filename, 'r', newline='') as f:
        # 1. Read and use meta-data from the first line
        meta_line = f.readline().strip()
        num_items_str, capacity_str = meta_line.split()
        capacity = int(capacity_str)
        expected_num_items = int(num_items_str)

        # 2. Use csv.reader to process the rest of the file
        reader = csv.reader(f)

        # 3. Skip the header row
        try:
            next(reader)
        except StopIteration:
            logger.warning(f"File '{filename}' contains no data rows.")

        # 4. Read each data row
        for row in reader:
            if not row:
                continue
            items.append(Item(id=len(items), value=int(row[0]), weight=int(row[1])))

    # 5. Check that the number of items matches the header
    if len(items) != expected_num_items:
        logger.warning(f"Inconsistent data in '{filename}'. "
                       f"Header specified {expected_num_items} items, but file contained {len(items)} items.")

    logger.info(f"Instance successfully loaded from {filename} ({len(items)} items).")
    return items, capacity

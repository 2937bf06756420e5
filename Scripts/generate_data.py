# generate_data.py
# -*- coding: utf-8 -*-

"""
Writes a suite of seeded knapsack instances to disk, using the configuration
from 'configs/config.yaml' and the generator in 'kpsearch/utils/generator.py'.
"""

import os
import argparse
import logging
from tqdm import tqdm

from kpsearch.utils.config_loader import load_config
from kpsearch.utils.logger import setup_logger
import kpsearch.utils.generator as gen


def create_dataset(
    output_dir: str,
    instance_params: dict,
    n_range: tuple,
    num_instances: int = 1,
    base_seed: int = 0
):
    """
    Creates one file per (n, instance) pair.

    Instance i of size n uses seed `base_seed + n * 1000 + i`, so every file
    can be regenerated on its own.

    Args:
        output_dir (str): The directory to save the instance files.
        instance_params (dict): Value/weight ranges and capacity ratio.
        n_range (tuple): Sizes as (start, stop, step), stop inclusive.
        num_instances (int): The number of instances to generate for each size 'n'.
        base_seed (int): Offset for every per-instance seed.

    Returns:
        list: Paths of the written files.
    """
    logger = logging.getLogger(__name__)
    logger.info(f"--- Starting dataset generation in '{output_dir}' ---")
    os.makedirs(output_dir, exist_ok=True)

    range_of_n = range(n_range[0], n_range[1] + 1, n_range[2])
    written = []

    with tqdm(total=len(range_of_n) * num_instances, desc="Generating instances") as pbar:
        for n in range_of_n:
            for i in range(num_instances):
                seed = base_seed + n * 1000 + i
                items = gen.make_items(
                    num_items=n,
                    min_value=instance_params['min_value'],
                    max_value=instance_params['max_value'],
                    min_weight=instance_params['min_weight'],
                    max_weight=instance_params['max_weight'],
                    seed=seed,
                )
                capacity = gen.allowed_weight(items, instance_params['capacity_ratio'])

                filename = os.path.join(output_dir, f"instance_n{n}_seed{seed}.csv")
                gen.save_instance_to_file(items, capacity, filename)
                written.append(filename)
                pbar.update(1)

    logger.info(f"--- Dataset generation complete. {len(written)} files saved in '{output_dir}'. ---")
    return written


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate seeded knapsack instance files.")
    parser.add_argument("--config", type=str, default="configs/config.yaml")
    parser.add_argument("--output-dir", type=str, default=None,
                        help="Defaults to the configured data path.")
    args = parser.parse_args(argv)

    cfg = load_config(args.config)
    setup_logger(run_name="data_generation", log_dir=cfg.paths.logs)

    inst = cfg.instance
    instance_params = {
        'min_value': inst.min_value,
        'max_value': inst.max_value,
        'min_weight': inst.min_weight,
        'max_weight': inst.max_weight,
        'capacity_ratio': inst.capacity_ratio,
    }
    create_dataset(
        output_dir=args.output_dir or cfg.paths.data,
        instance_params=instance_params,
        n_range=tuple(cfg.data_gen.n_range),
        num_instances=cfg.data_gen.instances_per_n,
        base_seed=inst.seed,
    )


if __name__ == '__main__':
    main()

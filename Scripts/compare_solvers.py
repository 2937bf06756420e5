# compare_solvers.py
import logging
import os
import sys
import argparse

from kpsearch.utils.config_loader import load_config, ALGORITHM_REGISTRY
from kpsearch.utils.logger import setup_logger
from kpsearch.utils.run_utils import create_run_name
from kpsearch.utils import generator as gen
from kpsearch.evaluation.runner import compare_solvers
from kpsearch.evaluation.reporting import format_parameters, format_result, save_results_to_csv
from kpsearch.evaluation.plotting import plot_call_counts, plot_times


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare knapsack search engines on a single instance.")
    parser.add_argument("--config", type=str, default="configs/config.yaml",
                        help="Path to the YAML config (relative paths resolve against the project root).")
    parser.add_argument("--instance", type=str, default=None,
                        help="Load the instance from a csv file instead of generating one.")
    parser.add_argument("--num-items", type=int, default=None,
                        help="Override the number of generated items.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Override the generator seed.")
    parser.add_argument("--capacity", type=int, default=None,
                        help="Use this capacity instead of the configured ratio of the total weight.")
    parser.add_argument("--solvers", nargs="+", default=None, choices=sorted(ALGORITHM_REGISTRY),
                        help="Only run these solvers.")
    parser.add_argument("--no-plots", action="store_true",
                        help="Skip plot generation.")
    return parser


def main(argv=None):
    """
    Builds (or loads) one instance, runs every configured solver on a private
    copy of it, then prints and saves the comparison.
    """
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)

    if args.num_items is not None:
        cfg.instance.num_items = args.num_items
    if args.seed is not None:
        cfg.instance.seed = args.seed

    # --- 1. Create a unique name and directory for this run ---
    run_name = create_run_name(cfg)
    run_dir = os.path.join(cfg.paths.artifacts, "runs", "comparison", run_name)
    os.makedirs(run_dir, exist_ok=True)

    setup_logger(run_name="comparison_session", log_dir=run_dir)
    logger = logging.getLogger(__name__)
    logger.info(f"--- Starting New Comparison Run: {run_name} ---")

    # --- 2. Build the instance ---
    if args.instance:
        items, capacity = gen.load_instance_from_file(args.instance)
    else:
        inst = cfg.instance
        items = gen.make_items(
            num_items=inst.num_items,
            min_value=inst.min_value,
            max_value=inst.max_value,
            min_weight=inst.min_weight,
            max_weight=inst.max_weight,
            seed=inst.seed,
        )
        capacity = gen.allowed_weight(items, inst.capacity_ratio)
    if args.capacity is not None:
        capacity = args.capacity

    print(format_parameters(items, capacity))
    print()

    # --- 3. Select solvers ---
    solvers = cfg.solvers.algorithms_to_test
    if args.solvers:
        solvers = {name: ALGORITHM_REGISTRY[name] for name in args.solvers}
    if not solvers:
        logger.critical("No solvers selected. Exiting.")
        sys.exit(1)
    logger.info(f"Solvers to be compared: {list(solvers.keys())}")

    # --- 4. Run ---
    results_df, results = compare_solvers(items, capacity, solvers, cfg.solvers.max_items)
    if results_df.empty:
        logger.critical("CRITICAL: No results were generated from any solver. Exiting.")
        sys.exit(1)

    for record, result in zip(results_df.to_dict("records"), results.values()):
        print(format_result(record, result.solution, limit=cfg.reporting.max_printed))
        print()

    optimal_values = results_df["value"].unique()
    if len(optimal_values) > 1:
        logger.error(f"Solvers disagree on the optimal value: {sorted(optimal_values.tolist())}")

    # --- 5. Save Reports and Generate Plots ---
    save_results_to_csv(results_df, os.path.join(run_dir, "comparison_summary.csv"))
    if cfg.reporting.plots and not args.no_plots:
        plot_call_counts(results_df, os.path.join(run_dir, "calls_per_solver.png"))
        plot_times(results_df, os.path.join(run_dir, "times_per_solver.png"))

    logger.info("--- Comparison finished successfully! ---")


if __name__ == '__main__':
    main()

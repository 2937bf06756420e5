# kpsearch/evaluation/plotting.py
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
import logging

logger = logging.getLogger(__name__)

def plot_call_counts(results_df: pd.DataFrame, save_path: str):
    """Plots the number of recursive calls each solver made on the instance."""
    if results_df is None or results_df.empty:
        logger.warning("No results available to plot call counts.")
        return

    logger.info("Generating call count comparison plot...")
    plt.figure(figsize=(12, 7))
    sns.set_theme(style="whitegrid")

    plot = sns.barplot(data=results_df, x='solver', y='calls', hue='solver')
    plot.set_title(f"Recursive Calls per Solver (n={results_df['n'].iloc[0]})", fontsize=16)
    plot.set_xlabel('Solver', fontsize=12)
    plot.set_ylabel('Calls', fontsize=12)
    plt.yscale('log') # Call counts span several orders of magnitude
    plt.tight_layout()

    try:
        plt.savefig(save_path, dpi=300)
        logger.info(f"Call count plot saved to {save_path}")
    except Exception as e:
        logger.error(f"Failed to save call count plot: {e}")
    finally:
        plt.close()

def plot_times(results_df: pd.DataFrame, save_path: str):
    """Plots a comparison of solve times for all solvers."""
    if results_df is None or results_df.empty:
        logger.warning("No results available to plot times.")
        return

    logger.info("Generating time comparison plot...")
    plt.figure(figsize=(12, 7))
    sns.set_theme(style="whitegrid")

    times = results_df.assign(time_ms=results_df['time_seconds'] * 1000)
    plot = sns.barplot(data=times, x='solver', y='time_ms', hue='solver')
    plot.set_title(f"Solver Performance: Time (n={results_df['n'].iloc[0]})", fontsize=16)
    plot.set_xlabel('Solver', fontsize=12)
    plot.set_ylabel('Elapsed Time (ms)', fontsize=12)
    plt.yscale('log')
    plt.grid(True, which="both", ls="--")
    plt.tight_layout()

    try:
        plt.savefig(save_path, dpi=300)
        logger.info(f"Time comparison plot saved to {save_path}")
    except Exception as e:
        logger.error(f"Failed to save time plot: {e}")
    finally:
        plt.close()

# kpsearch/utils/run_utils.py
import datetime
from types import SimpleNamespace

def create_run_name(config: SimpleNamespace) -> str:
    """
    Creates a unique and informative name for a comparison run.

    Args:
        config (SimpleNamespace): The configuration object for the run.

    Returns:
        str: A unique name, e.g., '20250622_210000_n20_seed1337'
    """
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")

    # Extract key parameters from the config to make the name informative
    try:
        num_items = config.instance.num_items
        seed = config.instance.seed
        run_name = f"{timestamp}_n{num_items}_seed{seed}"
    except AttributeError:
        # Fallback for configs without an instance section
        run_name = timestamp

    return run_name

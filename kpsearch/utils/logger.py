# kpsearch/utils/logger.py
import logging
import sys
import os
from datetime import datetime

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

# Plotting libraries log font and backend lookups at DEBUG
QUIET_LOGGERS = ("matplotlib", "PIL")


def log_file_path(run_name: str, log_dir: str) -> str:
    """One file per run: '<run_name>_<YYYYmmdd_HHMMSS>.log' inside log_dir."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return os.path.join(log_dir, f"{run_name}_{timestamp}.log")


def setup_logger(run_name: str, log_dir: str, level=logging.INFO):
    """
    Configures the root logger for a kpsearch run.

    The run's log file receives everything from DEBUG up (engine start and
    finish lines included), the console only `level` and above. Loggers in
    QUIET_LOGGERS are raised to WARNING so plot generation does not fill the
    run file.

    Returns:
        str | None: Path of the log file, or None if the root logger was
        already configured.
    """
    root = logging.getLogger()
    if root.hasHandlers():
        return None

    root.setLevel(logging.DEBUG)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    os.makedirs(log_dir, exist_ok=True)
    log_filepath = log_file_path(run_name, log_dir)

    file_handler = logging.FileHandler(log_filepath, mode='w')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    root.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(console_handler)

    root.info(f"Run '{run_name}' logging to {log_filepath}")
    return log_filepath

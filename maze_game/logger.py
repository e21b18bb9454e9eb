"""
Logging setup for the maze game.

curses owns the terminal for the whole session, so log records go to a file
that is rewritten on every run.

Modification History:
    - 2026-10-17: Added a level argument and reset any handlers left by an earlier setup.
"""

import logging
import os

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(log_file="debug.log", level=logging.DEBUG):
    """
    Points the root logger at a file.

    Args:
        log_file (str): The path to the log file. Missing parent directories are created.
        level (int): Minimum level written to the file.
    """
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    logging.basicConfig(
        filename=log_file,
        filemode='w', # Overwrite log on each run
        level=level,
        format=LOG_FORMAT,
        force=True,
    )

    logging.getLogger(__name__).info("Logging to %s.", log_file)

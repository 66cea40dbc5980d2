"""
Configuration & Global Constants
================================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (input limits, cell sizes, colours)
   scattered throughout the model and the views.
2. Tuning: The base cell size can be overridden from the environment without
   touching the code (NUMBERSTACKS_BASE_CELL).

Exports:
    INPUT_MIN (int): Smallest number accepted by the input widget.
    INPUT_MAX (int): Largest number accepted by the input widget.
    DEFAULT_NUMBER (int): Number shown on start-up.
    BASE_CELL_SIZE (float): Side of one unit square for narrow grids (px).
    SCROLL_HINT_COLUMNS (int): Grids at least this wide get a horizontal scroll area.
"""
import logging
import os

logger = logging.getLogger(__name__)


def get_env_float(name: str, default: float) -> float:
    """
    Read a positive float from the environment, falling back to `default`.
    """
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not a number.")
        return default
    if value <= 0:
        logger.warning(f"Ignoring {name}={raw!r}: must be positive.")
        return default
    return value


# Input range of the reference UI
INPUT_MIN: int = 2
INPUT_MAX: int = 200
DEFAULT_NUMBER: int = 16

# Grid sizing
BASE_CELL_SIZE: float = get_env_float("NUMBERSTACKS_BASE_CELL", 26.0)
SCROLL_HINT_COLUMNS: int = 10

# Cell outline drawn around every unit square
CELL_BORDER_COLOUR: str = "#F1F5F9"

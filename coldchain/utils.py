"""Shared utility functions for the cold-chain routing engine."""
import logging
import math
import sys


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure and return logger that writes to stdout."""
    logger = logging.getLogger("coldchain")

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def round_half_up(value: float, digits: int = 0) -> float:
    """Round for display with halves going up (2.25 -> 2.3), not to even.

    Non-finite values pass through untouched.
    """
    if not math.isfinite(value):
        return value
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def format_path_nodes(nodes) -> str:
    """Format path nodes as arrow-separated string: farm_1->cc_1->plant_1"""
    return "->".join(nodes)

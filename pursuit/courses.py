"""
Reference course generators
"""

from typing import Tuple

import numpy as np


def straight_course(length: float = 10.0, step: float = 1.0) -> Tuple[np.ndarray, np.ndarray]:
    """
    Straight line along the x axis from 0 to length, both ends included

    Args:
        length: Course length (m)
        step: Waypoint spacing (m)

    Returns:
        Tuple of (cx, cy)
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    n_points = int(np.floor(length / step + 1e-9)) + 1
    cx = np.arange(n_points) * step
    return cx, np.zeros_like(cx)


def sine_course(length: float = 50.0, step: float = 0.5) -> Tuple[np.ndarray, np.ndarray]:
    """
    Growing sine wave, y = sin(x / 5) * x / 2

    Args:
        length: Course extent along x, end excluded (m)
        step: Waypoint spacing along x (m)

    Returns:
        Tuple of (cx, cy)
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    cx = np.arange(0, length, step)
    cy = np.sin(cx / 5.0) * cx / 2.0
    return cx, cy

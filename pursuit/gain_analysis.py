"""
Look-ahead gain analysis functions
"""

from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from pursuit.courses import sine_course
from pursuit.params import PursuitParams
from pursuit.simulator import PursuitSimulator


def run_gain_analysis(
    gains: Sequence[float],
    target_speed: float = 10.0 / 3.6,
    max_simulation_time: float = 100.0,
    look_ahead_distance: float = 2.0,
    course: Optional[Tuple[np.ndarray, np.ndarray]] = None
) -> Dict[float, Dict[str, Any]]:
    """
    Run simulation for multiple look-ahead gain values

    Args:
        gains: Look-ahead gains k (s)
        target_speed: Cruise speed (m/s)
        max_simulation_time: Time budget of each run (s)
        look_ahead_distance: Base look-ahead Lfc (m)
        course: (cx, cy) reference course, defaults to sine_course()

    Returns:
        Dictionary with results for each gain
    """
    cx, cy = course if course is not None else sine_course()
    results: Dict[float, Dict[str, Any]] = {}

    for gain in gains:
        params = PursuitParams(
            look_ahead_gain=gain,
            look_ahead_distance=look_ahead_distance,
            target_speed=target_speed,
            max_simulation_time=max_simulation_time,
        )
        simulator = PursuitSimulator(params, cx, cy)

        t, state, steering = simulator.simulate()
        analysis = simulator.analyze_tracking(t, state, steering)

        results[gain] = {
            "time": t,
            "state": state,
            "steering": steering,
            "analysis": analysis,
            "simulator": simulator,
        }

    return results

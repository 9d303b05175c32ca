"""
Longitudinal and lateral controllers
"""

from typing import Tuple

import numpy as np

from pursuit.course import TargetCourse
from pursuit.state import VehicleState


def proportional_control(target: float, current: float, kp: float = 1.0) -> float:
    """
    Proportional speed control

    Args:
        target: Desired speed (m/s)
        current: Current speed (m/s)
        kp: Proportional gain (1/s)

    Returns:
        Commanded acceleration (m/s²)
    """
    return kp * (target - current)


def pure_pursuit_steer_control(
    state: VehicleState, course: TargetCourse, prev_index: int
) -> Tuple[float, int]:
    """
    Pure pursuit steering towards the look-ahead waypoint

    The target index never falls behind ``prev_index``. Once it reaches the
    end of the course the last waypoint is used as target. The returned
    angle is not saturated to any actuator limit.

    Args:
        state: Current vehicle state
        course: Reference course with its search cache
        prev_index: Target index returned on the previous tick

    Returns:
        Tuple of (steering_angle, target_index)
    """
    ind, look_ahead = course.search_target_index(state)

    if prev_index >= ind:
        ind = prev_index

    if ind < len(course):
        target_x, target_y = course.point(ind)
    else:
        target_x, target_y = course.point(course.last_index)
        ind = course.last_index

    # Bearing to the target relative to the current heading
    alpha = np.arctan2(target_y - state.rear_y, target_x - state.rear_x) - state.yaw

    # Arc through the rear axle and the target: curvature = 2 sin(alpha) / Lf
    delta = np.arctan2(2.0 * state.params.wheel_base * np.sin(alpha) / look_ahead, 1.0)

    return float(delta), ind

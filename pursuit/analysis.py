"""
Path tracking analysis functions
"""

from typing import Any, Dict, Optional

import numpy as np
from scipy.spatial import cKDTree

from pursuit.course import TargetCourse
from pursuit.params import PursuitParams


class TrackingAnalyzer:
    """Analyzes simulation results for tracking error, speed and steering behavior"""

    def __init__(
        self,
        params: PursuitParams,
        course: TargetCourse,
        goal_tolerance: Optional[float] = None
    ) -> None:
        """
        Initialize tracking analyzer

        Args:
            params: Controller and vehicle parameters
            course: Reference course the vehicle was asked to follow
            goal_tolerance: Distance to the last waypoint counted as arrival (m).
                Defaults to the cruise look-ahead plus the wheel base, since the
                run stops once the last waypoint becomes the look-ahead target.
        """
        self.params = params
        self.course = course
        if goal_tolerance is None:
            goal_tolerance = course.look_ahead(params.target_speed) + params.wheel_base
        self.goal_tolerance = goal_tolerance
        self._tree = cKDTree(np.column_stack([course.cx, course.cy]))

    def analyze(
        self,
        t: np.ndarray,
        state: np.ndarray,
        steering: np.ndarray,
        course_completed: Optional[bool] = None
    ) -> Dict[str, Any]:
        """
        Analyze a finished run

        Args:
            t: Time array
            state: State history [N x 4] with columns [x, y, yaw, v]
            steering: Steering angle history [N] (rad)
            course_completed: Whether the run stopped because the course was
                exhausted. A run that stopped early never reached the goal,
                however close it ended. None skips this check.

        Returns:
            Dictionary with analysis results
        """
        x = state[:, 0]
        y = state[:, 1]
        v = state[:, 3]

        # Cross-track error approximated by distance to the nearest waypoint
        cross_track, _ = self._tree.query(np.column_stack([x, y]))
        cross_track_max = float(np.max(cross_track)) if len(cross_track) > 0 else 0.0
        cross_track_mean = float(np.mean(cross_track)) if len(cross_track) > 0 else 0.0
        cross_track_rms = float(np.sqrt(np.mean(cross_track**2))) if len(cross_track) > 0 else 0.0

        goal_x, goal_y = self.course.point(self.course.last_index)
        goal_distance = float(np.hypot(x[-1] - goal_x, y[-1] - goal_y)) if len(x) > 0 else 0.0
        reached_goal = goal_distance <= self.goal_tolerance
        if course_completed is not None:
            reached_goal = reached_goal and course_completed

        final_speed = float(v[-1]) if len(v) > 0 else 0.0
        speed_error_rms = (
            float(np.sqrt(np.mean((v - self.params.target_speed) ** 2))) if len(v) > 0 else 0.0
        )

        steering_max = float(np.max(np.abs(steering))) if len(steering) > 0 else 0.0
        # Count left/right reversals, ignoring numerically straight wheels
        steering_sign = np.sign(np.where(np.abs(steering) > 1e-3, steering, 0.0))
        steering_sign = steering_sign[steering_sign != 0]
        steering_sign_changes = int(np.sum(np.diff(steering_sign) != 0))
        duration = float(t[-1] - t[0]) if len(t) > 1 else 0.0
        # More than one reversal per second means the controller is weaving
        is_oscillating = duration > 0 and steering_sign_changes / duration > 1.0

        distance_travelled = float(np.sum(np.hypot(np.diff(x), np.diff(y))))

        return {
            "cross_track_max": cross_track_max,
            "cross_track_mean": cross_track_mean,
            "cross_track_rms": cross_track_rms,
            "goal_distance": goal_distance,
            "reached_goal": bool(reached_goal),
            "final_speed": final_speed,
            "speed_error_rms": speed_error_rms,
            "steering_max": steering_max,
            "steering_sign_changes": steering_sign_changes,
            "is_oscillating": bool(is_oscillating),
            "distance_travelled": distance_travelled,
            "duration": duration,
        }

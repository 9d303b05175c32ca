"""
Main path tracking simulator class
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from pursuit.analysis import TrackingAnalyzer
from pursuit.controllers import proportional_control, pure_pursuit_steer_control
from pursuit.course import TargetCourse
from pursuit.params import PursuitParams
from pursuit.state import VehicleState
from pursuit.trajectory import Trajectory

logger = logging.getLogger(__name__)


class SimulationStatus(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class PursuitSimulator:
    """Simulates a vehicle tracking a reference course with pure pursuit"""

    def __init__(
        self,
        params: PursuitParams,
        cx: Sequence[float],
        cy: Sequence[float],
        initial_state: Optional[VehicleState] = None
    ) -> None:
        """
        Initialize simulator

        Args:
            params: Controller gains, vehicle geometry and timing
            cx: Course waypoint x coordinates (m)
            cy: Course waypoint y coordinates (m)
            initial_state: Starting pose and speed, defaults to the origin at rest.
                Only its x, y, yaw and v are used; geometry comes from params.
        """
        self.params = params
        self.course = TargetCourse(cx, cy, params)
        if initial_state is None:
            self.state = VehicleState(params=params)
        else:
            self.state = VehicleState(
                x=initial_state.x,
                y=initial_state.y,
                yaw=initial_state.yaw,
                v=initial_state.v,
                params=params,
            )
        self.analyzer = TrackingAnalyzer(params, self.course)

        self.elapsed_time = 0.0
        self.stop_reason: Optional[str] = None
        self.target_index, _ = self.course.search_target_index(self.state)

        self.trajectory = Trajectory()
        self.trajectory.append(self.elapsed_time, self.state, 0.0, self.target_index)

        self.status = SimulationStatus.RUNNING
        self._update_status()

    def _update_status(self) -> None:
        if self.target_index >= self.course.last_index:
            self.status = SimulationStatus.STOPPED
            self.stop_reason = "goal"
        elif self.elapsed_time > self.params.max_simulation_time:
            self.status = SimulationStatus.STOPPED
            self.stop_reason = "timeout"

        if self.status is SimulationStatus.STOPPED:
            logger.info(
                "Simulation stopped (%s) at t=%.2fs, target index %d/%d",
                self.stop_reason,
                self.elapsed_time,
                self.target_index,
                self.course.last_index,
            )

    def step(self) -> SimulationStatus:
        """
        Advance the simulation by one tick

        Returns:
            Status after the tick
        """
        if self.status is SimulationStatus.STOPPED:
            raise RuntimeError(f"Simulation already stopped ({self.stop_reason})")

        acceleration = proportional_control(
            self.params.target_speed, self.state.v, self.params.speed_gain
        )
        delta, self.target_index = pure_pursuit_steer_control(
            self.state, self.course, self.target_index
        )
        self.state.update(acceleration, delta)
        self.elapsed_time += self.params.dt

        logger.debug(
            "t=%.2f x=%.3f y=%.3f yaw=%.3f v=%.3f delta=%.4f target=%d",
            self.elapsed_time,
            self.state.x,
            self.state.y,
            self.state.yaw,
            self.state.v,
            delta,
            self.target_index,
        )
        self.trajectory.append(self.elapsed_time, self.state, delta, self.target_index)
        self._update_status()
        return self.status

    def simulate(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Run the simulation until the course is exhausted or time runs out

        Returns:
            Tuple of (time_array, state_history, steering_history)
        """
        while self.status is SimulationStatus.RUNNING:
            self.step()

        return self.trajectory.times(), self.trajectory.states(), self.trajectory.steering()

    def analyze_tracking(
        self, t: np.ndarray, state: np.ndarray, steering: np.ndarray
    ) -> Dict[str, Any]:
        """
        Analyze simulation results

        Args:
            t: Time array
            state: State history
            steering: Steering history

        Returns:
            Dictionary with analysis results. The goal only counts as reached
            when the run stopped on an exhausted course.
        """
        return self.analyzer.analyze(
            t, state, steering, course_completed=self.stop_reason == "goal"
        )

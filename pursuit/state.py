"""
Vehicle kinematic state
"""

from dataclasses import dataclass, field

import numpy as np

from pursuit.params import PursuitParams


@dataclass
class VehicleState:
    """Pose and speed of a single-track (bicycle) vehicle"""

    x: float = 0.0  # Position (m)
    y: float = 0.0  # Position (m)
    yaw: float = 0.0  # Heading (rad)
    v: float = 0.0  # Speed (m/s), signed
    params: PursuitParams = field(default_factory=PursuitParams, repr=False)
    rear_x: float = field(init=False, default=0.0)  # Rear axle center (m)
    rear_y: float = field(init=False, default=0.0)  # Rear axle center (m)

    def __post_init__(self) -> None:
        self._update_rear_axle()

    def _update_rear_axle(self) -> None:
        self.rear_x = self.x - self.params.rear_axle_offset * np.cos(self.yaw)
        self.rear_y = self.y - self.params.rear_axle_offset * np.sin(self.yaw)

    def update(self, acceleration: float, delta: float) -> None:
        """
        Advance the state by one time step of the kinematic bicycle model

        Position and heading are integrated with the speed from before the
        step. The steering angle is used as given.

        Args:
            acceleration: Longitudinal acceleration (m/s²)
            delta: Front wheel steering angle (rad)
        """
        dt = self.params.dt
        self.x += self.v * np.cos(self.yaw) * dt
        self.y += self.v * np.sin(self.yaw) * dt
        self.yaw += self.v / self.params.wheel_base * np.tan(delta) * dt
        self.v += acceleration * dt
        self._update_rear_axle()

    def calc_distance(self, point_x: float, point_y: float) -> float:
        """
        Distance from the rear axle center to a point

        Args:
            point_x: Point x coordinate (m)
            point_y: Point y coordinate (m)

        Returns:
            Euclidean distance (m)
        """
        return float(np.hypot(self.rear_x - point_x, self.rear_y - point_y))

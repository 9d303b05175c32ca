"""
Recorded vehicle motion
"""

from typing import List, Tuple

import numpy as np

from pursuit.state import VehicleState


class Trajectory:
    """History of the vehicle state, one sample per tick"""

    def __init__(self) -> None:
        self.t: List[float] = []
        self.x: List[float] = []
        self.y: List[float] = []
        self.yaw: List[float] = []
        self.v: List[float] = []
        self.delta: List[float] = []
        self.target_index: List[int] = []

    def __len__(self) -> int:
        return len(self.t)

    def append(self, t: float, state: VehicleState, delta: float, target_index: int) -> None:
        """
        Record one sample

        Args:
            t: Simulation time (s)
            state: Vehicle state after the tick
            delta: Steering angle applied during the tick (rad)
            target_index: Target waypoint index used during the tick
        """
        self.t.append(float(t))
        self.x.append(float(state.x))
        self.y.append(float(state.y))
        self.yaw.append(float(state.yaw))
        self.v.append(float(state.v))
        self.delta.append(float(delta))
        self.target_index.append(int(target_index))

    def times(self) -> np.ndarray:
        return np.array(self.t)

    def states(self) -> np.ndarray:
        """State history [N x 4] with columns [x, y, yaw, v]"""
        return np.column_stack([self.x, self.y, self.yaw, self.v]).reshape(-1, 4)

    def steering(self) -> np.ndarray:
        return np.array(self.delta)

    def target_indices(self) -> np.ndarray:
        return np.array(self.target_index, dtype=int)

    def points(self) -> List[Tuple[float, float]]:
        """(x, y) pairs for plotting"""
        return list(zip(self.x, self.y))

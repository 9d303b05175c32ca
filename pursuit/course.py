"""
Reference course and look-ahead target search
"""

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from pursuit.params import PursuitParams
from pursuit.state import VehicleState

logger = logging.getLogger(__name__)


class TargetCourse:
    """Fixed reference path with a forward-only nearest point search"""

    def __init__(
        self,
        cx: Sequence[float],
        cy: Sequence[float],
        params: Optional[PursuitParams] = None
    ) -> None:
        """
        Initialize target course

        Args:
            cx: Waypoint x coordinates in traversal order (m)
            cy: Waypoint y coordinates in traversal order (m)
            params: Look-ahead gains, defaults to PursuitParams()
        """
        self.cx = np.array(cx, dtype=float)
        self.cy = np.array(cy, dtype=float)
        if self.cx.ndim != 1 or self.cy.ndim != 1:
            raise ValueError("Course coordinates must be one-dimensional sequences")
        if len(self.cx) != len(self.cy):
            raise ValueError(
                f"Course coordinates differ in length: {len(self.cx)} x values, "
                f"{len(self.cy)} y values"
            )
        if len(self.cx) == 0:
            raise ValueError("Course needs at least one waypoint")
        # The path never changes once built
        self.cx.setflags(write=False)
        self.cy.setflags(write=False)

        self.params = params if params is not None else PursuitParams()
        self.nearest_index: Optional[int] = None

    def __len__(self) -> int:
        return len(self.cx)

    @property
    def last_index(self) -> int:
        """Index of the final waypoint"""
        return len(self.cx) - 1

    def point(self, index: int) -> Tuple[float, float]:
        """Waypoint coordinates at index"""
        return float(self.cx[index]), float(self.cy[index])

    def look_ahead(self, speed: float) -> float:
        """Look-ahead distance Lf = k * v + Lfc (m)"""
        return self.params.look_ahead_gain * speed + self.params.look_ahead_distance

    def search_target_index(self, state: VehicleState) -> Tuple[int, float]:
        """
        Find the waypoint to steer towards

        The first call scans the whole course for the waypoint nearest to the
        rear axle. Later calls only walk forward from the cached nearest
        index, so the search never moves backward along the course.

        Args:
            state: Current vehicle state

        Returns:
            Tuple of (target_index, look_ahead_distance)
        """
        if self.nearest_index is None:
            distances = np.hypot(state.rear_x - self.cx, state.rear_y - self.cy)
            # argmin returns the first minimum on ties
            ind = int(np.argmin(distances))
            logger.debug("Initial nearest waypoint %d at %.3f m", ind, distances[ind])
        else:
            ind = self.nearest_index

        distance_this_index = state.calc_distance(self.cx[ind], self.cy[ind])
        while ind < self.last_index:
            distance_next_index = state.calc_distance(self.cx[ind + 1], self.cy[ind + 1])
            if distance_next_index >= distance_this_index:
                break
            ind += 1
            distance_this_index = distance_next_index
        self.nearest_index = ind

        look_ahead = self.look_ahead(state.v)

        # Walk out to the first waypoint at least Lf away from the rear axle
        while look_ahead > state.calc_distance(self.cx[ind], self.cy[ind]):
            if ind + 1 > self.last_index:
                break
            ind += 1

        return ind, look_ahead

"""
Pure pursuit tuning and vehicle parameters
"""

from dataclasses import dataclass


@dataclass
class PursuitParams:
    """Controller gains, vehicle geometry and simulation timing"""

    look_ahead_gain: float = 0.1  # s (k, look-ahead grows by k * v)
    look_ahead_distance: float = 2.0  # m (Lfc, look-ahead at standstill)
    speed_gain: float = 1.0  # 1/s (Kp, proportional speed gain)
    dt: float = 0.1  # s (time tick)
    wheel_base: float = 2.9  # m (WB, front to rear axle)
    target_speed: float = 10.0 / 3.6  # m/s (10 km/h)
    max_simulation_time: float = 100.0  # s
    rear_axle_offset: float = 0.0  # Will be calculated

    def __post_init__(self) -> None:
        """Validate gains and calculate derived parameters"""
        # Lf = k * v + Lfc divides the steering law, so it must stay positive
        if self.look_ahead_distance <= 0:
            raise ValueError(
                f"look_ahead_distance must be positive, got {self.look_ahead_distance}"
            )
        if self.look_ahead_gain < 0:
            raise ValueError(f"look_ahead_gain must be non-negative, got {self.look_ahead_gain}")
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.wheel_base <= 0:
            raise ValueError(f"wheel_base must be positive, got {self.wheel_base}")
        if self.max_simulation_time < 0:
            raise ValueError(
                f"max_simulation_time must be non-negative, got {self.max_simulation_time}"
            )
        # Vehicle origin sits midway between the axles
        self.rear_axle_offset = self.wheel_base / 2

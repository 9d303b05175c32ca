"""
Pure Pursuit Path Tracking Simulation

This package simulates a ground vehicle following a fixed 2D reference course
with the pure pursuit steering law and a proportional speed controller, and
analyzes how well the course is tracked.
"""

from pursuit.params import PursuitParams
from pursuit.state import VehicleState
from pursuit.course import TargetCourse
from pursuit.controllers import proportional_control, pure_pursuit_steer_control
from pursuit.trajectory import Trajectory
from pursuit.simulator import PursuitSimulator, SimulationStatus
from pursuit.analysis import TrackingAnalyzer
from pursuit.courses import sine_course, straight_course
from pursuit.gain_analysis import run_gain_analysis

__all__ = [
    "PursuitParams",
    "VehicleState",
    "TargetCourse",
    "proportional_control",
    "pure_pursuit_steer_control",
    "Trajectory",
    "PursuitSimulator",
    "SimulationStatus",
    "TrackingAnalyzer",
    "sine_course",
    "straight_course",
    "run_gain_analysis",
]

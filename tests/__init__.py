"""
Test suite for Pure Pursuit Path Tracking Simulation.

This package contains unit tests organized by component:
- test_params.py: Tests for PursuitParams class
- test_vehicle_state.py: Tests for the vehicle kinematic state
- test_target_course.py: Tests for the course and target index search
- test_controllers.py: Tests for speed and steering controllers
- test_simulation.py: Tests for simulation execution
- test_tracking_analysis.py: Tests for tracking analysis
- test_integration.py: Integration tests for courses and the gain sweep
- test_app.py: Tests for dashboard input validation
"""

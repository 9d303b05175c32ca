"""
Integration tests for the full analysis workflow.

Tests the run_gain_analysis function which orchestrates one simulation per
look-ahead gain, and the course generators it runs on.
"""

import numpy as np
import pytest

from pursuit import run_gain_analysis, sine_course, straight_course


class TestCourses:
    """Test suite for reference course generators"""

    def test_straight_course_includes_end(self) -> None:
        """Test that the straight course spans [0, length] inclusive"""
        cx, cy = straight_course(10.0, 1.0)

        assert len(cx) == 11
        assert cx[0] == 0.0
        assert cx[-1] == 10.0
        assert np.all(cy == 0.0)

    def test_sine_course_shape(self) -> None:
        """Test the reference sine course y = sin(x / 5) * x / 2"""
        cx, cy = sine_course()

        assert len(cx) == 100
        assert cx[-1] == pytest.approx(49.5)
        assert cy[10] == pytest.approx(np.sin(1.0) * 2.5)

    @pytest.mark.parametrize("generator", [straight_course, sine_course])
    def test_invalid_step_rejected(self, generator) -> None:
        """Test that a non-positive waypoint spacing raises ValueError"""
        with pytest.raises(ValueError):
            generator(10.0, 0.0)


class TestIntegration:
    """Test suite for integration tests"""

    def test_run_gain_analysis_returns_results(self) -> None:
        """Test that run_gain_analysis returns results for all gains"""
        gains = [0.05, 0.1, 0.5]
        results = run_gain_analysis(gains, max_simulation_time=5.0)

        assert len(results) == len(gains)

        for gain in gains:
            assert gain in results

    def test_results_contain_required_keys(self) -> None:
        """Test that results contain all required data"""
        results = run_gain_analysis([0.1], max_simulation_time=5.0)

        for gain, data in results.items():
            assert "time" in data
            assert "state" in data
            assert "steering" in data
            assert "analysis" in data
            assert "simulator" in data

    def test_simulator_preserved_in_results(self) -> None:
        """Test that each simulator carries its own gain"""
        results = run_gain_analysis([0.1, 0.4], max_simulation_time=5.0)

        assert results[0.1]["simulator"].params.look_ahead_gain == 0.1
        assert results[0.4]["simulator"].params.look_ahead_gain == 0.4
        assert results[0.1]["simulator"].params is not results[0.4]["simulator"].params

    def test_different_gains_produce_different_results(self) -> None:
        """Test that the look-ahead gain changes the driven trajectory"""
        results = run_gain_analysis([0.0, 1.0], max_simulation_time=20.0)

        state_low = results[0.0]["state"]
        state_high = results[1.0]["state"]
        n = min(len(state_low), len(state_high))

        assert not np.allclose(state_low[:n, 1], state_high[:n, 1])

    def test_custom_course(self) -> None:
        """Test that a caller-supplied course is used"""
        course = straight_course(20.0, 1.0)
        results = run_gain_analysis([0.1], course=course)

        simulator = results[0.1]["simulator"]
        assert len(simulator.course) == 21
        assert simulator.stop_reason == "goal"
        assert results[0.1]["analysis"]["reached_goal"] is True

    def test_custom_duration(self) -> None:
        """Test that a longer time budget produces a longer run"""
        results_short = run_gain_analysis([0.1], max_simulation_time=1.0)
        results_long = run_gain_analysis([0.1], max_simulation_time=3.0)

        time_short = results_short[0.1]["time"]
        time_long = results_long[0.1]["time"]

        assert len(time_long) > len(time_short)
        assert time_long[-1] > time_short[-1]

    def test_target_speed_applied(self) -> None:
        """Test that the requested cruise speed reaches every simulation"""
        results = run_gain_analysis([0.1], target_speed=5.0, max_simulation_time=30.0)

        state = results[0.1]["state"]
        assert state[-1, 3] == pytest.approx(5.0, rel=1e-2)

    def test_state_data_shape(self) -> None:
        """Test that state data has correct shape"""
        results = run_gain_analysis([0.1], max_simulation_time=2.0)

        time = results[0.1]["time"]
        state = results[0.1]["state"]

        assert state.shape[0] == len(time)
        assert state.shape[1] == 4

    def test_full_reference_run(self) -> None:
        """Test that the default scenario completes the sine course"""
        results = run_gain_analysis([0.1])

        data = results[0.1]
        assert data["simulator"].stop_reason == "goal"
        assert data["analysis"]["distance_travelled"] > 50.0

    def test_results_are_reproducible(self) -> None:
        """Test that running the same analysis twice produces identical results"""
        results1 = run_gain_analysis([0.1], max_simulation_time=10.0)
        results2 = run_gain_analysis([0.1], max_simulation_time=10.0)

        assert np.array_equal(results1[0.1]["state"], results2[0.1]["state"])
        assert results1[0.1]["analysis"] == results2[0.1]["analysis"]

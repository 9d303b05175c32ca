"""
Unit tests for the dashboard input validation.

Tests the update_results callback on invalid form values, which are
rejected before any simulation runs.
"""

import pytest
from dash.exceptions import PreventUpdate

from app import update_results


class TestDashboardInputs:
    """Test suite for dashboard input validation"""

    def test_no_click_prevents_update(self) -> None:
        """Test that the callback does nothing before the button is pressed"""
        with pytest.raises(PreventUpdate):
            update_results(None, "0.1", 10.0, 100.0)

    @pytest.mark.parametrize("speed_kmh", [None, 0.0, 0.5, 60.5])
    def test_target_speed_outside_range_rejected(self, speed_kmh: float) -> None:
        """Test that speeds outside 1 to 60 km/h are reported as errors"""
        results, message = update_results(1, "0.1", speed_kmh, 100.0)

        assert results == []
        assert "Target speed must be between 1 and 60 km/h" in message.children

    @pytest.mark.parametrize("time_budget", [None, 0.0, 0.5, 301.0])
    def test_time_budget_outside_range_rejected(self, time_budget: float) -> None:
        """Test that time budgets outside 1 to 300 s are reported as errors"""
        results, message = update_results(1, "0.1", 10.0, time_budget)

        assert results == []
        assert "Time budget must be between 1 and 300 seconds" in message.children

    def test_negative_gain_rejected(self) -> None:
        """Test that a negative look-ahead gain is reported as an error"""
        results, message = update_results(1, "0.1,-0.2", 10.0, 100.0)

        assert results == []
        assert "non-negative look-ahead gain" in message.children

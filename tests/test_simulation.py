"""Tests for the simulation driver loop."""

import math

import pytest
from wildfire.cell import CellState
from wildfire.config import SimulationConfig
from wildfire.display import render_forest
from wildfire.forest import Forest
from wildfire.grid import Grid
from wildfire.model import WildfireModel
from wildfire.simulation import build_model, format_burn_rate, run_simulation


class RecordingDisplay:
    """Keeps a rendered copy of every frame it is shown."""

    def __init__(self):
        self.frames = []

    def show(self, forest):
        self.frames.append(render_forest(forest))


class TestRunSimulation:
    """Test cases for run_simulation."""

    @pytest.fixture
    def sleeps(self):
        return []

    def test_frames_and_pacing(self, full_forest, sleeps):
        display = RecordingDisplay()
        result = run_simulation(
            WildfireModel(forest=full_forest),
            display,
            cycle_time_ms=250,
            ignition_delay_ms=1500,
            sleep=sleeps.append,
        )

        # initial, after ignition, then one per cycle
        assert len(display.frames) == 2 + 4
        assert display.frames[0] == "|TTT|\n" * 3
        assert display.frames[1] == "|#TT|\n" * 3
        assert display.frames[-1] == "|XXX|\n" * 3
        assert sleeps == [1.5, 0.25, 0.25, 0.25, 0.25]

        assert result.cycles == 4
        assert result.extinguished
        assert result.burn_rate == 1.0
        assert result.counts[CellState.Burned] == 9
        assert result.report == "% forest burned: 1.0"

    def test_fire_never_starts(self, sleeps):
        display = RecordingDisplay()
        result = run_simulation(WildfireModel(forest=Forest(Grid(3, 3))), display, sleep=sleeps.append)

        assert result.cycles == 1
        assert result.extinguished
        assert math.isnan(result.burn_rate)
        assert result.report == "% forest burned: n/a"
        assert len(display.frames) == 3

    def test_truncated_run(self, sleeps):
        model = WildfireModel(forest=Forest.from_rows(["TTTTTT"]), max_cycles=2)
        result = run_simulation(model, sleep=sleeps.append)
        assert result.cycles == 2
        assert not result.extinguished
        assert result.burn_rate == pytest.approx(1 / 4)

    def test_build_model_from_config(self):
        config = SimulationConfig(density=0.5, width=8, height=4, seed=3)
        model = build_model(config)
        assert model.grid == Grid(8, 4)
        result = run_simulation(model, sleep=lambda _: None)
        assert result.extinguished
        assert 0.0 <= result.burn_rate <= 1.0

    def test_build_model_rejects_invalid_config(self):
        with pytest.raises(ValueError):
            build_model(SimulationConfig(density=0.5, width=0))


class TestFormatBurnRate:
    """Test cases for the final report line."""

    def test_value(self):
        assert format_burn_rate(0.25) == "% forest burned: 0.25"

    def test_nan(self):
        assert format_burn_rate(math.nan) == "% forest burned: n/a"

"""Unit tests for WildfireModel class."""

import math

import pytest
from wildfire.cell import CellState
from wildfire.config import InvalidDensityError
from wildfire.forest import Forest
from wildfire.grid import Grid
from wildfire.model import WildfireModel, default_max_cycles


class TestWildfireModel:
    """Test cases for WildfireModel class."""

    def test_model_creation(self):
        """Test creating a wildfire model."""
        model = WildfireModel(width=10, height=5, density=0.5, seed=1)
        assert model.grid.width == 10
        assert model.grid.height == 5
        assert len(model.forest) == 50
        assert model.running
        assert model.cycle == 0

    def test_seed_reproduces_forest(self):
        first = WildfireModel(width=20, height=8, density=0.6, seed=11)
        second = WildfireModel(width=20, height=8, density=0.6, seed=11)
        assert (first.forest.states == second.forest.states).all()

    def test_all_cells_start_living_or_clear(self):
        model = WildfireModel(width=5, height=5, density=0.7, seed=2)
        counts = model.counts()
        assert counts[CellState.Living] + counts[CellState.Clear] == 25

    def test_invalid_density(self):
        with pytest.raises(InvalidDensityError):
            WildfireModel(width=5, height=5, density=1.5)

    def test_default_max_cycles(self):
        model = WildfireModel(width=12, height=7, density=0.5, seed=0)
        assert model.max_cycles == default_max_cycles(Grid(12, 7)) == 86

    def test_start_fire_only_once(self, full_forest):
        model = WildfireModel(forest=full_forest)
        assert model.start_fire() == 3
        with pytest.raises(RuntimeError):
            model.start_fire()

    def test_fire_spreads_and_burns_out(self, full_forest):
        """Test the 3x3 scenario through the model."""
        model = WildfireModel(forest=full_forest)
        model.start_fire()

        for _ in range(3):
            model.step()
            assert model.running

        model.step()
        assert not model.running
        assert model.extinguished
        assert model.cycle == 4
        assert model.burn_rate() == 1.0

    def test_cycle_bound_stops_run(self):
        forest = Forest.from_rows(["TTTTTTTTTT"])
        model = WildfireModel(forest=forest, max_cycles=3)
        model.start_fire()
        while model.running:
            model.step()
        assert model.cycle == 3
        assert not model.extinguished
        assert model.fire_active()

    def test_zero_density_forest(self):
        model = WildfireModel(forest=Forest(Grid(3, 3)))
        assert model.start_fire() == 0
        model.step()
        assert not model.running
        assert model.cycle == 1
        assert math.isnan(model.burn_rate())

    def test_invalid_max_cycles(self, full_forest):
        with pytest.raises(ValueError):
            WildfireModel(forest=full_forest, max_cycles=0)

    def test_datacollector_records_each_cycle(self, full_forest):
        model = WildfireModel(forest=full_forest)
        model.start_fire()
        while model.running:
            model.step()

        burned = model.datacollector.model_vars["Burned"]
        ignited = model.datacollector.model_vars["Ignited"]
        assert burned == [0, 0, 3, 6, 9]
        assert ignited == [3, 3, 3, 0, 0]

#!/usr/bin/env python3
"""Headless runner for wildfire simulations.

Edit the CONFIG block to tweak parameters. Each run prints its final grid
and burn rate; no pacing delays are applied.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from wildfire import SimulationConfig
from wildfire.display import render_forest
from wildfire.simulation import build_model, run_simulation


# ---- User-configurable parameters ----
CONFIG: Dict[str, Any] = {
    # Grid
    "width": 90,
    "height": 30,

    # Forest
    "densities": [0.4, 0.5, 0.55, 0.6, 0.7],
    "seed": 42,

    # Run control
    "max_cycles": None,  # None derives the bound from the grid
    "show_grid": False,
}


def main() -> None:
    """Run one simulation per density and print the burn rates."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")

    for density in CONFIG["densities"]:
        config = SimulationConfig(
            density=density,
            width=CONFIG["width"],
            height=CONFIG["height"],
            cycle_time_ms=0,
            ignition_delay_ms=0,
            max_cycles=CONFIG["max_cycles"],
            seed=CONFIG["seed"],
        )
        model = build_model(config)
        result = run_simulation(model, cycle_time_ms=0, ignition_delay_ms=0, sleep=lambda _: None)

        if CONFIG["show_grid"]:
            print(render_forest(model.forest))
        print(f"density={density:.2f} cycles={result.cycles:4d} {result.report}")


if __name__ == "__main__":
    main()

"""
Command-line interface for the wildfire simulation.

Reads the forest density (prompting for it when not given), runs the
simulation in the terminal and prints the share of the forest that burned.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from .config import (
    CYCLE_TIME_MS,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    IGNITION_DELAY_MS,
    InvalidDensityError,
    SimulationConfig,
    parse_density,
)
from .display import TerminalDisplay
from .simulation import build_model, run_simulation

logger = logging.getLogger(__name__)


DENSITY_PROMPT = "Enter forest density (decimal > 0.0 and <= 1.0)"


def _read_density(text: Optional[str]) -> float:
    """Parse the density option, prompting once when it was not given."""
    if text is None:
        text = click.prompt(DENSITY_PROMPT, type=str)
    try:
        return parse_density(text)
    except InvalidDensityError as e:
        raise click.BadParameter(str(e), param_hint="'--density'") from e


@click.command()
@click.version_option(package_name="wildfire")
@click.option(
    "--density", "-d",
    default=None,
    help="Probability that a cell holds a tree, in (0, 1]. Prompted for when omitted.",
)
@click.option("--width", "-W", type=click.IntRange(min=1), default=DEFAULT_WIDTH, show_default=True,
              help="Grid width in cells.")
@click.option("--height", "-H", type=click.IntRange(min=1), default=DEFAULT_HEIGHT, show_default=True,
              help="Grid height in cells.")
@click.option("--seed", type=int, default=None, help="Random seed for a reproducible forest.")
@click.option("--cycle-time", type=click.IntRange(min=0), default=CYCLE_TIME_MS, show_default=True,
              help="Pause between cycles in milliseconds.")
@click.option("--ignition-delay", type=click.IntRange(min=0), default=IGNITION_DELAY_MS, show_default=True,
              help="Pause before the fire starts in milliseconds.")
@click.option("--max-cycles", type=click.IntRange(min=1), default=None,
              help="Stop after this many cycles (default: derived from the grid size).")
@click.option("--no-clear", is_flag=True, help="Append frames instead of redrawing the screen.")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors.")
def main(
    density: Optional[str],
    width: int,
    height: int,
    seed: Optional[int],
    cycle_time: int,
    ignition_delay: int,
    max_cycles: Optional[int],
    no_clear: bool,
    verbose: bool,
    quiet: bool,
):
    """
    🔥 Simulate a fire spreading through a randomly planted forest.

    \b
    Trees (T) catch fire (#) from burning (%) neighbours and end up
    burned (X). The fire starts along the left edge.
    """
    if quiet:
        log_level = logging.ERROR
    elif verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.WARNING

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    config = SimulationConfig(
        density=_read_density(density),
        width=width,
        height=height,
        cycle_time_ms=cycle_time,
        ignition_delay_ms=ignition_delay,
        max_cycles=max_cycles,
        seed=seed,
    )
    model = build_model(config)
    result = run_simulation(
        model,
        TerminalDisplay(clear=not no_clear),
        cycle_time_ms=config.cycle_time_ms,
        ignition_delay_ms=config.ignition_delay_ms,
    )

    click.echo("")
    click.echo(result.report)
    if not result.extinguished:
        click.echo(f"Stopped after {result.cycles} cycles with the fire still burning.")


if __name__ == "__main__":
    main()

"""Allow ``python -m wildfire``."""

from .cli import main

main()

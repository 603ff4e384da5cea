"""Entry point for ``python -m fault_terrain``."""

from .server import main

main()

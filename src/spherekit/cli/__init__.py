"""
spherekit Command Line Interface.

Usage:
    spherekit --help
    spherekit to-cartesian 1 0 1.5708
    spherekit distance 6371 0.5 0 1.2 0.8
"""

from spherekit.cli.app import cli, main

__all__ = ["cli", "main"]

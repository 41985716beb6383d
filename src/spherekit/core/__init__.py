"""
Core modules for spherekit.

Subpackages:
    geometry: Spherical coordinate conversions and sphere measurements
"""

from spherekit.core import geometry

__all__ = ["geometry"]

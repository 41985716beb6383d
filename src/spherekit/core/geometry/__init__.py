"""
Spherical geometry utilities.

This module provides conversions between spherical and Cartesian
coordinates, great-circle distances, and closed-form area/volume
formulas for spheres, caps, zones, segments and sectors.
"""

from spherekit.core.geometry.spherical import (
    CartesianPoint,
    SphericalPoint,
    to_cartesian,
    from_cartesian,
    surface_area,
    volume,
    great_circle_distance,
    spherical_cap,
    spherical_zone,
    spherical_segment_volume,
    spherical_sector_volume,
)

__all__ = [
    "CartesianPoint",
    "SphericalPoint",
    "to_cartesian",
    "from_cartesian",
    "surface_area",
    "volume",
    "great_circle_distance",
    "spherical_cap",
    "spherical_zone",
    "spherical_segment_volume",
    "spherical_sector_volume",
]

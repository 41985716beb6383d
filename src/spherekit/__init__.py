"""
spherekit: spherical coordinate conversions and sphere measurements.

This package provides pure functions for converting between spherical
and Cartesian coordinates and for evaluating closed-form formulas on
spheres (surface area, volume, great-circle distance, caps, zones,
segments and sectors).
"""

__version__ = "0.1.0"
__author__ = "spherekit Contributors"

_GEOMETRY_EXPORTS = (
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
)


# Lazy imports to keep `import spherekit` light for the CLI
def __getattr__(name: str):
    """Lazy import module attributes."""
    if name == "geometry":
        from spherekit.core import geometry
        return geometry
    elif name in _GEOMETRY_EXPORTS:
        from spherekit.core import geometry
        return getattr(geometry, name)
    elif name == "Config":
        from spherekit.config.schema import Config
        return Config
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "__version__",
    "geometry",
    "Config",
    *_GEOMETRY_EXPORTS,
]

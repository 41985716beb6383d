"""
Spherical coordinate conversions and closed-form sphere measurements.

This module provides functions for converting between spherical and
Cartesian coordinates, computing great-circle distances, and evaluating
surface/volume formulas for spheres and their caps, zones, segments
and sectors.

Convention:
    - radius is the Euclidean distance from the origin
    - theta is the azimuthal angle in the XY-plane from the positive x-axis
    - phi is the polar angle measured from the positive z-axis

Any NaN input yields an all-NaN result; no function raises on bad input.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np

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

logger = logging.getLogger(__name__)


def _any_nan(*values: float) -> bool:
    return any(np.isnan(v) for v in values)


@dataclass(frozen=True)
class CartesianPoint:
    """
    A point in 3D Cartesian space with single-precision components.

    Components are narrowed to ``numpy.float32`` on construction.

    Attributes:
        x: X component
        y: Y component
        z: Z component
    """

    x: np.float32
    y: np.float32
    z: np.float32

    def __post_init__(self):
        object.__setattr__(self, "x", np.float32(self.x))
        object.__setattr__(self, "y", np.float32(self.y))
        object.__setattr__(self, "z", np.float32(self.z))

    @classmethod
    def nan(cls) -> "CartesianPoint":
        """Create a point with every component set to NaN."""
        return cls(np.nan, np.nan, np.nan)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"CartesianPoint(x={self.x:g}, y={self.y:g}, z={self.z:g})"


@dataclass(frozen=True)
class SphericalPoint:
    """
    A point in spherical coordinates (double precision).

    Attributes:
        radius: Distance from origin; negative values mirror the point
        theta: Azimuthal angle in radians, unconstrained
        phi: Polar angle from the positive z-axis in radians

    Values produced by :func:`from_cartesian` have theta in (-π, π]
    and phi in [0, π]. Values passed in directly are kept as given.
    """

    radius: float
    theta: float
    phi: float

    def __post_init__(self):
        object.__setattr__(self, "radius", float(self.radius))
        object.__setattr__(self, "theta", float(self.theta))
        object.__setattr__(self, "phi", float(self.phi))

    @classmethod
    def nan(cls) -> "SphericalPoint":
        """Create a point with every field set to NaN."""
        return cls(np.nan, np.nan, np.nan)

    @classmethod
    def from_cartesian(
        cls, point: Union["CartesianPoint", Sequence[float], np.ndarray]
    ) -> "SphericalPoint":
        """Create spherical point from Cartesian coordinates."""
        return from_cartesian(point)

    def to_cartesian_vector(self) -> CartesianPoint:
        """Convert to a single-precision Cartesian point."""
        return to_cartesian(self.radius, self.theta, self.phi)

    def distance_to(
        self, other: "SphericalPoint", radius: Optional[float] = None
    ) -> float:
        """
        Compute great-circle distance to another point.

        Only the directions of the two points are used; the distance is
        measured on a sphere of ``radius`` (defaults to this point's radius).
        """
        if radius is None:
            radius = self.radius
        return great_circle_distance(
            radius, self.phi, self.theta, other.phi, other.theta
        )

    def __repr__(self) -> str:
        return (
            f"SphericalPoint(r={self.radius:g}, "
            f"θ={self.theta:g}, φ={self.phi:g})"
        )


def to_cartesian(radius: float, theta: float, phi: float) -> CartesianPoint:
    """
    Convert spherical coordinates to Cartesian.

    Trigonometry is evaluated in double precision; components are narrowed
    to single precision only when the resulting point is built.

    Args:
        radius: Distance from origin (negative values mirror through origin)
        theta: Azimuthal angle in radians
        phi: Polar angle from the positive z-axis in radians

    Returns:
        CartesianPoint, all-NaN if any input is NaN
    """
    if _any_nan(radius, theta, phi):
        logger.debug("NaN input to to_cartesian(%r, %r, %r)", radius, theta, phi)
        return CartesianPoint.nan()

    sin_phi = np.sin(phi)
    x = radius * sin_phi * np.cos(theta)
    y = radius * sin_phi * np.sin(theta)
    z = radius * np.cos(phi)
    return CartesianPoint(x, y, z)


def from_cartesian(
    point: Union[CartesianPoint, Sequence[float], np.ndarray]
) -> SphericalPoint:
    """
    Convert Cartesian coordinates to spherical.

    Args:
        point: CartesianPoint or any (x, y, z) sequence

    Returns:
        SphericalPoint with theta in (-π, π] and phi in [0, π].
        The origin maps to (0, 0, 0); any NaN component maps to all-NaN.
    """
    x, y, z = (float(c) for c in point)
    if _any_nan(x, y, z):
        logger.debug("NaN input to from_cartesian(%r, %r, %r)", x, y, z)
        return SphericalPoint.nan()

    radius = np.sqrt(x * x + y * y + z * z)

    # Exact zero only: direction is undefined and z / radius would divide by zero
    if radius == 0:
        logger.debug("Zero-length vector in from_cartesian, returning origin")
        return SphericalPoint(0.0, 0.0, 0.0)

    theta = np.arctan2(y, x)
    phi = np.arccos(z / radius)
    return SphericalPoint(radius, theta, phi)


def surface_area(radius: float) -> float:
    """Surface area of a sphere, 4πr²."""
    if _any_nan(radius):
        return np.nan
    return 4 * np.pi * radius * radius


def volume(radius: float) -> float:
    """Volume of a sphere, (4/3)πr³."""
    if _any_nan(radius):
        return np.nan
    return (4.0 / 3.0) * np.pi * radius * radius * radius


def great_circle_distance(
    radius: float,
    phi1: float,
    theta1: float,
    phi2: float,
    theta2: float,
) -> float:
    """
    Compute great-circle distance between two points on a sphere.

    Uses the spherical law of cosines:
        cos(d) = sin(φ₁)sin(φ₂) + cos(φ₁)cos(φ₂)cos(θ₂ - θ₁)

    Args:
        radius: Sphere radius
        phi1, theta1: First point (polar, azimuth) in radians
        phi2, theta2: Second point (polar, azimuth) in radians

    Returns:
        Arc length radius * acos(cos(d)), NaN if any input is NaN
    """
    if _any_nan(radius, phi1, theta1, phi2, theta2):
        logger.debug("NaN input to great_circle_distance")
        return np.nan

    delta_theta = theta2 - theta1

    cos_dist = (
        np.sin(phi1) * np.sin(phi2) +
        np.cos(phi1) * np.cos(phi2) * np.cos(delta_theta)
    )

    # Clamp to valid range to handle numerical errors
    cos_dist = np.clip(cos_dist, -1.0, 1.0)

    return radius * np.arccos(cos_dist)


def spherical_cap(radius: float, height: float) -> float:
    """Curved surface area of a spherical cap, 2πrh."""
    if _any_nan(radius, height):
        return np.nan
    return 2 * np.pi * radius * height


def spherical_zone(radius: float, height1: float, height2: float) -> float:
    """Curved surface area of a spherical zone between two parallel planes."""
    if _any_nan(radius, height1, height2):
        return np.nan
    return 2 * np.pi * radius * abs(height2 - height1)


def spherical_segment_volume(radius: float, height: float) -> float:
    """
    Volume of a spherical segment (cap solid) of the given height.

    V = πh²(3r - h) / 3
    """
    if _any_nan(radius, height):
        return np.nan
    return (np.pi * height * height * (3 * radius - height)) / 3


def spherical_sector_volume(radius: float, phi: float) -> float:
    """
    Volume of a spherical sector with half-angle ``phi``.

    V = (2/3)πr³(1 - cos φ)
    """
    if _any_nan(radius, phi):
        return np.nan
    return (2.0 / 3.0) * np.pi * radius * radius * radius * (1 - np.cos(phi))

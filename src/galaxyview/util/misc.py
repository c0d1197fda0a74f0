import astropy.units as u
import numpy as np
from scipy.spatial.transform import Rotation as R


def _to_angle(angle, unit=u.deg):
    """
    Interpret a bare number as an angle in the given unit, pass Quantities
    through
    """
    return u.Quantity(angle, unit)


def cyl_to_cartesian(azimuth, distance, elevation):
    """
    Convert a cylindrical galaxy position to scene coordinates

    Args:
        azimuth (float or astropy Quantity):
            Azimuth around the galactic center, degrees if a bare number
        distance (float):
            Radial distance from the galactic center
        elevation (float):
            Height above the galactic plane

    Returns:
        pos (np.array):
            [x, y, z] where y is the up axis
    """
    az = _to_angle(azimuth).to(u.rad).value
    return np.array(
        [distance * np.cos(az), elevation, distance * np.sin(az)], dtype=float
    )


def cartesian_to_azimuth(x, z):
    """
    Recover the azimuth of a scene position, in [0, 360) degrees
    """
    return (np.arctan2(z, x) * u.rad).to(u.deg) % (360 * u.deg)


def rotate_vectors(vectors, axis, angle):
    """
    Rotates a set of Nx3 vectors around a single axis by a single angle
    Args:
        vectors (np.array):
            Nx3 array of vectors
        axis (list):
            3-element array specifying rotation axis (e.g. [0,0,1]
            for z-axis)
        angle (u.Quantity or float):
            Angle to rotate vectors by, degrees if a bare number
    """
    rot = R.from_rotvec(np.array(axis, dtype=float) * _to_angle(angle).to(u.rad).value)
    return rot.apply(vectors)


def tilt_orbital_plane(vectors, inclination):
    """
    Tilt points from the orbital (x, z) plane by the inclination.

    Only the z component is rotated into the y/z plane, so that
    y = z sin(inc) and z' = z cos(inc). This is the right handed rotation
    about the -x axis.

    Args:
        vectors (np.array):
            Nx3 (or 3) array of points with y == 0
        inclination (u.Quantity or float):
            Orbit inclination, degrees if a bare number

    Returns:
        vectors (np.array):
            Tilted points with the same shape as the input
    """
    vectors = np.asarray(vectors, dtype=float)
    return rotate_vectors(vectors, [-1, 0, 0], inclination)


def closed_circle(radius, segments):
    """
    Closed polyline of a circle in the (x, z) plane, segments + 1 points
    """
    theta = np.linspace(0, 2 * np.pi, segments + 1)
    pts = np.stack(
        [radius * np.cos(theta), np.zeros_like(theta), radius * np.sin(theta)], axis=1
    )
    # Make the closure exact rather than off by sin(2 pi)
    pts[-1] = pts[0]
    return pts


def as_float(value, default):
    """
    Coerce a record field to a finite float, falling back to the default
    for missing, non-numeric or non-finite values
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        value = float(value)
    except (TypeError, ValueError):
        return default
    if not np.isfinite(value):
        return default
    return value

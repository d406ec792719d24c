"""Angle conversions shared by the games."""

PI = 3.14159265
MIN_PI = 3.14


def to_radians(degrees):
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180


def to_degrees(radians):
    """Convert an angle in radians to degrees."""
    return (radians * 180) / PI
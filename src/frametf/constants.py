"""
The `constants` module defines the mathematical constants and the fixed Euler
angles from which the canonical frame rotations are derived.
"""

from math import pi as PI

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

# Canonical Frame Rotations

"""
Roll, pitch, yaw of the NED <-> ENU rotation: +PI about X (North/East)
followed by +PI/2 about Z (Down/Up). Units: *rad*
"""
NED_ENU_RPY = (PI, 0.0, PI / 2.0)

"""
Roll, pitch, yaw of the Aircraft <-> BaseLink rotation: +PI about X
(Forward). Maps Forward-Right-Down onto Forward-Left-Up. Units: *rad*
"""
AIRCRAFT_BASELINK_RPY = (PI, 0.0, 0.0)

"""Static frame conversion selectors.

Provides the ``StaticTF`` enum naming the four fixed conversions and the
two-variant ``RotationFamily`` enum that decides which canonical rotation
is applied.  Both canonical rotations are half turns and therefore their
own inverse, so a conversion and its reverse share one family; the
direction carried by ``StaticTF`` is informational only.
"""

from __future__ import annotations

import enum


class RotationFamily(enum.Enum):
    """The two canonical frame rotations.

    Attributes:
        NED_ENU: World-frame change of basis between North-East-Down and
            East-North-Up.
        AIRCRAFT_BASELINK: Body-frame change of basis between
            Forward-Right-Down (aircraft) and Forward-Left-Up (base_link).
    """

    NED_ENU = "ned_enu"
    AIRCRAFT_BASELINK = "aircraft_baselink"


class StaticTF(enum.IntEnum):
    """Fixed frame conversions.

    Attributes:
        NED_TO_ENU: North-East-Down to East-North-Up.
        ENU_TO_NED: East-North-Up to North-East-Down.
        AIRCRAFT_TO_BASELINK: Forward-Right-Down to Forward-Left-Up.
        BASELINK_TO_AIRCRAFT: Forward-Left-Up to Forward-Right-Down.
    """

    NED_TO_ENU = 0
    ENU_TO_NED = 1
    AIRCRAFT_TO_BASELINK = 2
    BASELINK_TO_AIRCRAFT = 3

    @property
    def family(self) -> RotationFamily:
        """Canonical rotation applied by this conversion."""
        return _FAMILIES[self]

    @property
    def reverse(self) -> StaticTF:
        """The conversion in the opposite direction."""
        return _REVERSE[self]


_FAMILIES = {
    StaticTF.NED_TO_ENU: RotationFamily.NED_ENU,
    StaticTF.ENU_TO_NED: RotationFamily.NED_ENU,
    StaticTF.AIRCRAFT_TO_BASELINK: RotationFamily.AIRCRAFT_BASELINK,
    StaticTF.BASELINK_TO_AIRCRAFT: RotationFamily.AIRCRAFT_BASELINK,
}

_REVERSE = {
    StaticTF.NED_TO_ENU: StaticTF.ENU_TO_NED,
    StaticTF.ENU_TO_NED: StaticTF.NED_TO_ENU,
    StaticTF.AIRCRAFT_TO_BASELINK: StaticTF.BASELINK_TO_AIRCRAFT,
    StaticTF.BASELINK_TO_AIRCRAFT: StaticTF.AIRCRAFT_TO_BASELINK,
}

"""The tacho motors that ship with the EV3 kit."""

from __future__ import annotations

from ..tacho import TachoMotor


class LargeMotor(TachoMotor):
    """The EV3 large servo motor."""

    DRIVER = "lego-ev3-l-motor"


class MediumMotor(TachoMotor):
    """The EV3 medium servo motor."""

    DRIVER = "lego-ev3-m-motor"
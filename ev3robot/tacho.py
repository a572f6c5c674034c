"""Tacho motors: commands, states, units and the motor device itself."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum, Flag
from typing import Any, ClassVar

from .device import Device
from .motor import DutyCycleController, Polarity
from .percentage import Percentage, SignedPercentage


class Command(str, Enum):
    """Commands accepted by a tacho motor."""

    RUN_FOREVER = "run-forever"
    RUN_TO_ABS_POS = "run-to-abs-pos"
    RUN_TO_REL_POS = "run-to-rel-pos"
    RUN_TIMED = "run-timed"
    RUN_DIRECT = "run-direct"
    STOP = "stop"
    RESET = "reset"

    def __str__(self) -> str:
        return self.value


class StopAction(str, Enum):
    """What a motor does when told to stop."""

    COAST = "coast"
    BRAKE = "brake"
    HOLD = "hold"

    def __str__(self) -> str:
        return self.value


class State(Flag):
    """Flags describing what a tacho motor is doing."""

    RUNNING = 1
    RAMPING = 2
    HOLDING = 4
    OVERLOADED = 8
    STALLED = 16

    @classmethod
    def parse(cls, text: str) -> State:
        """Parse whitespace-separated flag names; no names means no flags."""
        state = cls(0)
        for flag in text.split():
            try:
                state |= _STATE_NAMES[flag]
            except KeyError:
                raise ValueError(f"invalid flag `{flag}`") from None
        return state


_STATE_NAMES = {
    "running": State.RUNNING,
    "ramping": State.RAMPING,
    "holding": State.HOLDING,
    "overloaded": State.OVERLOADED,
    "stalled": State.STALLED,
}


def _require_int(owner: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{owner} needs an int, got {value!r}")


def _round_half_away(x: float) -> int:
    magnitude = math.floor(abs(x) + 0.5)
    return -magnitude if x < 0 else magnitude


def _div_trunc(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass(frozen=True, order=True)
class TachoCounts:
    """A distance or speed in the motor's own tacho counts."""

    value: int

    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

    def __post_init__(self) -> None:
        _require_int(type(self).__name__, self.value)

    @classmethod
    def parse(cls, text: str) -> TachoCounts:
        if cls._PATTERN.fullmatch(text) is None:
            raise ValueError(f"invalid tacho counts {text!r}")
        return cls(int(text))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True, repr=False)
class Degrees:
    """A whole number of degrees."""

    value: int

    def __post_init__(self) -> None:
        _require_int(type(self).__name__, self.value)

    def to_revolutions(self) -> Revolutions:
        return Revolutions(self.value / 360)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{self.value}°"


@dataclass(frozen=True, order=True)
class Revolutions:
    """A possibly fractional number of full turns."""

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"Revolutions needs a number, got {self.value!r}")
        object.__setattr__(self, "value", float(self.value))

    def to_degrees(self) -> Degrees:
        """Convert to degrees, rounding halves away from zero."""
        return Degrees(_round_half_away(self.value * 360))

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


def _to_degrees(value: Any) -> Degrees:
    if isinstance(value, Degrees):
        return value
    if isinstance(value, Revolutions):
        return value.to_degrees()
    if isinstance(value, int) and not isinstance(value, bool):
        return Degrees(value)
    raise TypeError(f"cannot express {value!r} in degrees")


def _degrees_to_counts(value: Any, count_per_rot: TachoCounts) -> TachoCounts:
    degrees = _to_degrees(value)
    return TachoCounts(_div_trunc(degrees.value * count_per_rot.value, 360))


def speed_tacho_counts(
    speed: Any, count_per_rot: TachoCounts, max_speed: TachoCounts
) -> TachoCounts:
    """Express a speed in tacho counts per second.

    Percentages are of ``max_speed``; degrees, revolutions and plain ints
    (taken as degrees) are per second.
    """
    if isinstance(speed, TachoCounts):
        return speed
    if isinstance(speed, (Percentage, SignedPercentage)):
        return TachoCounts(_round_half_away(max_speed.value * speed.to_fraction()))
    return _degrees_to_counts(speed, count_per_rot)


def position_tacho_counts(shift: Any, count_per_rot: TachoCounts) -> TachoCounts:
    """Express a position shift in tacho counts.

    Degrees, revolutions and plain ints (taken as degrees) are converted.
    """
    if isinstance(shift, TachoCounts):
        return shift
    return _degrees_to_counts(shift, count_per_rot)


_TACHO_ATTRIBUTES: dict[str, Any] = {
    "command": "w",
    "count_per_rot": TachoCounts.parse,
    "duty_cycle": "r",
    "duty_cycle_sp": "rw",
    "polarity": "rw",
    "position": "rw",
    "position_sp": "rw",
    "max_speed": TachoCounts.parse,
    "state": "r",
    "speed": "r",
    "speed_sp": "rw",
    "stop_action": "rw",
}


class TachoMotor(Device):
    """A motor with a rotation sensor, driven through its attribute files."""

    CLASS_NAME = "tacho-motor"
    ATTRIBUTES = {f"_{name}": kind for name, kind in _TACHO_ATTRIBUTES.items()}
    ATTRIBUTE_NAMES = {f"_{name}": name for name in _TACHO_ATTRIBUTES}

    def command(self, value: Command | str) -> None:
        self._command.set_value(Command(value))

    @property
    def count_per_rot(self) -> TachoCounts:
        return self._count_per_rot

    @property
    def max_speed(self) -> TachoCounts:
        return self._max_speed

    @property
    def duty_cycle(self) -> SignedPercentage:
        return self._duty_cycle.value(SignedPercentage.parse)

    @property
    def duty_cycle_sp(self) -> SignedPercentage:
        return self._duty_cycle_sp.value(SignedPercentage.parse)

    @duty_cycle_sp.setter
    def duty_cycle_sp(self, value: SignedPercentage | int) -> None:
        if not isinstance(value, SignedPercentage):
            value = SignedPercentage(value)
        self._duty_cycle_sp.set_value(value)

    @property
    def polarity(self) -> Polarity:
        return self._polarity.value(Polarity)

    @polarity.setter
    def polarity(self, value: Polarity | str) -> None:
        self._polarity.set_value(Polarity(value))

    @property
    def position(self) -> TachoCounts:
        return self._position.value(TachoCounts.parse)

    @position.setter
    def position(self, value: TachoCounts) -> None:
        self._position.set_value(value)

    @property
    def position_sp(self) -> TachoCounts:
        return self._position_sp.value(TachoCounts.parse)

    @position_sp.setter
    def position_sp(self, value: TachoCounts) -> None:
        self._position_sp.set_value(value)

    @property
    def state(self) -> State:
        return self._state.value(State.parse)

    @property
    def speed(self) -> TachoCounts:
        return self._speed.value(TachoCounts.parse)

    @property
    def speed_sp(self) -> TachoCounts:
        return self._speed_sp.value(TachoCounts.parse)

    @speed_sp.setter
    def speed_sp(self, value: TachoCounts) -> None:
        self._speed_sp.set_value(value)

    @property
    def stop_action(self) -> StopAction:
        return self._stop_action.value(StopAction)

    @stop_action.setter
    def stop_action(self, value: StopAction | str) -> None:
        self._stop_action.set_value(StopAction(value))

    def run(self, speed: Any) -> None:
        """Run at ``speed`` until told otherwise."""
        self.speed_sp = speed_tacho_counts(speed, self.count_per_rot, self.max_speed)
        self.command(Command.RUN_FOREVER)

    def is_running(self) -> bool:
        return State.RUNNING in self.state

    def is_holding(self) -> bool:
        return State.HOLDING in self.state

    def _stop(self, action: StopAction) -> None:
        self.stop_action = action
        self.command(Command.STOP)

    def coast(self) -> None:
        self._stop(StopAction.COAST)

    def brake(self) -> None:
        self._stop(StopAction.BRAKE)

    def hold(self) -> None:
        self._stop(StopAction.HOLD)

    def rotate(self, speed: Any, shift: Any, stop_action: StopAction) -> None:
        """Turn by ``shift`` relative to the current position at ``speed``."""
        count_per_rot = self.count_per_rot
        self.speed_sp = speed_tacho_counts(speed, count_per_rot, self.max_speed)
        self.position_sp = position_tacho_counts(shift, count_per_rot)
        self.stop_action = stop_action
        self.command(Command.RUN_TO_REL_POS)

    def run_direct(self, duty_cycle: SignedPercentage) -> DutyCycleController:
        """Run at a duty cycle that the returned controller can change."""
        self.duty_cycle_sp = duty_cycle
        self.command(Command.RUN_DIRECT)

        def set_duty_cycle(value: SignedPercentage) -> None:
            self.duty_cycle_sp = value

        return DutyCycleController(set_duty_cycle)
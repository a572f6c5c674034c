"""The EV3 color and ultrasonic sensors and their measuring modes."""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable, TypeVar

from ..device import Device
from ..percentage import Percentage

_T = TypeVar("_T")

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U8_MAX = 2**8 - 1
_U32_MAX = 2**32 - 1


def _parse_unsigned(text: str, maximum: int) -> int:
    if _UNSIGNED.fullmatch(text) is None:
        raise ValueError(f"invalid unsigned integer {text!r}")
    number = int(text)
    if number > maximum:
        raise ValueError(f"number {text!r} is too large")
    return number


def _parse_u8(text: str) -> int:
    return _parse_unsigned(text, _U8_MAX)


def _parse_u32(text: str) -> int:
    return _parse_unsigned(text, _U32_MAX)


def _parse_char(text: str) -> str:
    if len(text) != 1:
        raise ValueError(f"expected a single character, got {text!r}")
    return text


class _ModeSensor(Device):
    """A sensor read through ``value0`` after choosing a ``mode``."""

    CLASS_NAME = "lego-sensor"
    ATTRIBUTES = {"_mode": "rw", "_value": "r"}
    ATTRIBUTE_NAMES = {"_mode": "mode", "_value": "value0"}

    def _set_mode(self, mode: str) -> None:
        self._mode.set_value(mode)

    def _read(self, parser: Callable[[str], _T]) -> _T:
        return self._value.value(parser)


class Color(Enum):
    """Colors recognised by the color sensor."""

    NONE = 0
    BLACK = 1
    BLUE = 2
    GREEN = 3
    YELLOW = 4
    RED = 5
    WHITE = 6
    BROWN = 7


class ColorSensor(_ModeSensor):
    """The EV3 color sensor."""

    DRIVER = "lego-ev3-color"

    def measure_reflected_light(self) -> ReflectedLightMeter:
        self._set_mode("COL-REFLECT")
        return ReflectedLightMeter(self)

    def measure_ambient_light(self) -> AmbientLightMeter:
        self._set_mode("COL-AMBIENT")
        return AmbientLightMeter(self)

    def measure_color(self) -> ColorMeter:
        self._set_mode("COL-COLOR")
        return ColorMeter(self)


class _ColorSensorMode:
    def __init__(self, color_sensor: ColorSensor) -> None:
        self.color_sensor = color_sensor

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color_sensor!r})"


class ReflectedLightMeter(_ColorSensorMode):
    """The color sensor measuring light reflected from a surface."""

    def reflected_light_intensity(self) -> Percentage:
        return self.color_sensor._read(Percentage.parse)


class AmbientLightMeter(_ColorSensorMode):
    """The color sensor measuring the surrounding light."""

    def ambient_light_intensity(self) -> Percentage:
        return self.color_sensor._read(Percentage.parse)


class ColorMeter(_ColorSensorMode):
    """The color sensor recognising colors."""

    def color(self) -> Color:
        code = self.color_sensor._read(_parse_u8)
        try:
            return Color(code)
        except ValueError:
            raise ValueError("invalid value") from None


class UltrasonicSensor(_ModeSensor):
    """The EV3 ultrasonic distance sensor."""

    DRIVER = "lego-ev3-us"

    def measure_cm(self) -> CmMeter:
        self._set_mode("US-DIST-CM")
        return CmMeter(self)

    def measure_inches(self) -> InchMeter:
        self._set_mode("US-DIST-IN")
        return InchMeter(self)

    def listen(self) -> UltrasoundListener:
        self._set_mode("US-LISTEN")
        return UltrasoundListener(self)


class _UltrasonicSensorMode:
    def __init__(self, ultrasonic_sensor: UltrasonicSensor) -> None:
        self.ultrasonic_sensor = ultrasonic_sensor

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.ultrasonic_sensor!r})"


class CmMeter(_UltrasonicSensorMode):
    """The ultrasonic sensor measuring distance in centimetres."""

    def cm(self) -> float:
        return self.ultrasonic_sensor._read(_parse_u32) / 10


class InchMeter(_UltrasonicSensorMode):
    """The ultrasonic sensor measuring distance in inches."""

    def inches(self) -> float:
        return self.ultrasonic_sensor._read(_parse_u32) / 10


class UltrasoundListener(_UltrasonicSensorMode):
    """The ultrasonic sensor listening for other ultrasound sources."""

    def is_ultrasound_present(self) -> bool:
        return self.ultrasonic_sensor._read(_parse_char) == "1"
"""Motor polarity, duty-cycle control and groups of motors driven together."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from .percentage import SignedPercentage

_M = TypeVar("_M")
_T = TypeVar("_T")


class Polarity(str, Enum):
    """Direction a motor turns for positive speeds."""

    NORMAL = "normal"
    INVERSED = "inversed"

    def __str__(self) -> str:
        return self.value


class DutyCycleController:
    """Adjusts the duty cycle of motors running in direct mode."""

    def __init__(self, setter: Callable[[SignedPercentage], None]) -> None:
        self._setter = setter

    def set_duty_cycle(self, value: SignedPercentage) -> None:
        self._setter(value)

    def __call__(self, value: SignedPercentage) -> None:
        self.set_duty_cycle(value)


class MotorsBunch(Generic[_M]):
    """Several motors that receive every command together, in order."""

    def __init__(self, motors: Iterable[_M] = ()) -> None:
        self._motors: list[_M] = list(motors)

    def exec(self, func: Callable[[_M], _T]) -> list[_T]:
        """Apply ``func`` to each motor in turn, stopping at the first error."""
        return [func(motor) for motor in self._motors]

    def __getitem__(self, index: int) -> _M:
        return self._motors[index]

    def __setitem__(self, index: int, motor: _M) -> None:
        self._motors[index] = motor

    def __iter__(self) -> Iterator[_M]:
        return iter(self._motors)

    def __len__(self) -> int:
        return len(self._motors)

    def __repr__(self) -> str:
        return f"MotorsBunch({self._motors!r})"

    def run(self, speed: Any) -> None:
        self.exec(lambda motor: motor.run(speed))

    def is_running(self) -> bool:
        """Whether any motor runs; every motor is queried."""
        return any(self.exec(lambda motor: motor.is_running()))

    def is_holding(self) -> bool:
        """Whether any motor holds; every motor is queried."""
        return any(self.exec(lambda motor: motor.is_holding()))

    def coast(self) -> None:
        self.exec(lambda motor: motor.coast())

    def brake(self) -> None:
        self.exec(lambda motor: motor.brake())

    def hold(self) -> None:
        self.exec(lambda motor: motor.hold())

    def rotate(self, speed: Any, shift: Any, stop_action: Any) -> None:
        self.exec(lambda motor: motor.rotate(speed, shift, stop_action))

    def run_direct(self, duty_cycle: SignedPercentage) -> DutyCycleController:
        """Start every motor in direct mode; the controller adjusts them all."""
        controllers = self.exec(lambda motor: motor.run_direct(duty_cycle))

        def set_all(value: SignedPercentage) -> None:
            for controller in controllers:
                controller.set_duty_cycle(value)

        return DutyCycleController(set_all)
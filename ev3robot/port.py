"""Named device ports, including the ports of the EV3 brick."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Port:
    """A port identified by its address string."""

    name: str

    def __post_init__(self) -> None:
        if isinstance(self.name, Port):
            object.__setattr__(self, "name", self.name.name)
        elif not isinstance(self.name, str):
            raise TypeError(f"port name must be a string, got {self.name!r}")

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Port({self.name!r})"


IN_1 = Port("ev3-ports:in1")
IN_2 = Port("ev3-ports:in2")
IN_3 = Port("ev3-ports:in3")
IN_4 = Port("ev3-ports:in4")

OUT_A = Port("ev3-ports:outA")
OUT_B = Port("ev3-ports:outB")
OUT_C = Port("ev3-ports:outC")
OUT_D = Port("ev3-ports:outD")
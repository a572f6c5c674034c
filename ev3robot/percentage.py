"""Percentages restricted to a fixed range of whole numbers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, TypeVar

_P = TypeVar("_P", bound="_BasePercentage")


@dataclass(frozen=True, order=True, repr=False)
class _BasePercentage:
    """A whole-number percentage bounded by ``MINIMUM`` and ``MAXIMUM``."""

    value: int

    MINIMUM: ClassVar[int] = 0
    MAXIMUM: ClassVar[int] = 100
    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"\+?[0-9]+")

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"{type(self).__name__} needs an int, got {self.value!r}"
            )
        if not self.MINIMUM <= self.value <= self.MAXIMUM:
            raise ValueError("invalid percentage")

    @classmethod
    def _parse(cls: type[_P], text: str) -> _P:
        if cls._PATTERN.fullmatch(text) is None:
            raise ValueError(f"invalid percentage {text!r}")
        return cls(int(text))

    def _fraction(self) -> float:
        return self.value / 100

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)

    def __repr__(self) -> str:
        return f"{self.value}%"


class Percentage(_BasePercentage):
    """A percentage from 0 to 100."""

    MINIMUM = 0
    MAXIMUM = 100
    _PATTERN = re.compile(r"\+?[0-9]+")

    @classmethod
    def parse(cls, text: str) -> Percentage:
        """Parse a percentage from its decimal representation."""
        return cls._parse(text)

    def to_fraction(self) -> float:
        """Return the percentage as a fraction of one."""
        return self._fraction()


class SignedPercentage(_BasePercentage):
    """A percentage from -100 to 100."""

    MINIMUM = -100
    MAXIMUM = 100
    _PATTERN = re.compile(r"[+-]?[0-9]+")

    @classmethod
    def parse(cls, text: str) -> SignedPercentage:
        """Parse a signed percentage from its decimal representation."""
        return cls._parse(text)

    def to_fraction(self) -> float:
        """Return the percentage as a fraction of one."""
        return self._fraction()
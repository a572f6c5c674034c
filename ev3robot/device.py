"""Device nodes exposed as attribute files, and devices built from them."""

from __future__ import annotations

import io
import os
from pathlib import Path
from typing import Any, Callable, ClassVar, Mapping, TypeVar, Union

from .find import find_in
from .port import Port

SYSFS_CLASS_ROOT = Path("/sys/class")

_T = TypeVar("_T")
_D = TypeVar("_D", bound="Device")

_ACCESS_MODES = {
    "r": (True, False),
    "w": (False, True),
    "rw": (True, True),
}


class AttributeFile:
    """An open attribute file of a device node."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        readable: bool = True,
        writable: bool = False,
    ) -> None:
        if not (readable or writable):
            raise ValueError("an attribute file must be readable or writable")
        self.path = Path(path)
        self.readable = readable
        self.writable = writable
        if readable and writable:
            flags, mode = os.O_RDWR, "r+"
        elif readable:
            flags, mode = os.O_RDONLY, "r"
        else:
            flags, mode = os.O_WRONLY, "w"
        fd = os.open(self.path, flags)
        try:
            self._file = io.FileIO(fd, mode)
        except BaseException:
            os.close(fd)
            raise

    def value(self, parser: Callable[[str], _T] = str) -> _T:
        """Read the whole attribute and parse it without trailing whitespace."""
        if not self.readable:
            raise io.UnsupportedOperation(f"{self.path} is not readable")
        self._file.seek(0)
        try:
            raw = self._file.readall().decode().rstrip()
            return parser(raw)
        except ValueError as err:
            raise ValueError(f"invalid data in {self.path}: {err}") from err

    def set_value(self, value: object) -> None:
        """Write the string form of ``value`` at the start of the attribute."""
        if not self.writable:
            raise io.UnsupportedOperation(f"{self.path} is not writable")
        data = memoryview(str(value).encode())
        self._file.seek(0)
        while data:
            written = self._file.write(data)
            if not written:
                raise OSError(f"failed to write whole value to {self.path}")
            data = data[written:]

    @property
    def closed(self) -> bool:
        return self._file.closed

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> AttributeFile:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        access = ("r" if self.readable else "") + ("w" if self.writable else "")
        return f"AttributeFile({str(self.path)!r}, {access!r})"


def read_attribute(
    device_node: str | os.PathLike[str],
    name: str,
    parser: Callable[[str], _T] = str,
) -> _T:
    """Read and parse one attribute of a device node."""
    with AttributeFile(Path(device_node) / name, readable=True) as file:
        return file.value(parser)


def device_nodes_by_class(
    class_name: str, root: str | os.PathLike[str] | None = None
) -> list[Path]:
    """List the device nodes of a class; an unreadable class has none."""
    class_path = (SYSFS_CLASS_ROOT if root is None else Path(root)) / class_name
    try:
        return sorted(class_path.iterdir())
    except OSError:
        return []


def device_node_driver_name(device_node: str | os.PathLike[str]) -> str:
    return read_attribute(device_node, "driver_name")


def device_node_port(device_node: str | os.PathLike[str]) -> Port:
    return read_attribute(device_node, "address", Port)


def _read_or_none(read: Callable[[Path], _T], node: Path) -> _T | None:
    try:
        return read(node)
    except (OSError, ValueError):
        return None


_AttributeKind = Union[str, Callable[[str], Any]]


class Device:
    """A device opened from a node, with attributes declared on the class.

    ``ATTRIBUTES`` maps each field to either an access mode (``"r"``,
    ``"w"`` or ``"rw"``), which keeps the attribute file open, or a parser,
    whose result is read once when the device is opened. ``ATTRIBUTE_NAMES``
    maps fields to attribute names where the two differ.
    """

    CLASS_NAME: ClassVar[str | None] = None
    DRIVER: ClassVar[str | None] = None
    ATTRIBUTES: ClassVar[Mapping[str, _AttributeKind]] = {}
    ATTRIBUTE_NAMES: ClassVar[Mapping[str, str]] = {}

    device_node: Path
    _files: list[AttributeFile]

    @classmethod
    def open(cls: type[_D], device_node: str | os.PathLike[str]) -> _D:
        """Open every declared attribute of the device at ``device_node``."""
        device = cls.__new__(cls)
        device.device_node = Path(device_node)
        device._files = []
        try:
            for field, kind in cls.ATTRIBUTES.items():
                setattr(device, field, device._load(field, kind))
            device._initialize()
        except BaseException:
            device.close()
            raise
        return device

    def _load(self, field: str, kind: _AttributeKind) -> Any:
        attr_name = self.ATTRIBUTE_NAMES.get(field, field)
        if isinstance(kind, str):
            try:
                readable, writable = _ACCESS_MODES[kind]
            except KeyError:
                raise ValueError(
                    f"unknown access mode {kind!r} for attribute {attr_name}"
                ) from None
            handle = AttributeFile(self.device_node / attr_name, readable, writable)
            self._files.append(handle)
            return handle
        return read_attribute(self.device_node, attr_name, kind)

    def _initialize(self) -> None:
        """Hook run once all attributes are loaded."""

    def close(self) -> None:
        for file in self._files:
            file.close()

    def __enter__(self: _D) -> _D:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @classmethod
    def find_device_nodes(
        cls, root: str | os.PathLike[str] | None = None
    ) -> list[Path]:
        """List the nodes of the device class, filtered by driver if set."""
        if cls.CLASS_NAME is None:
            raise TypeError(f"{cls.__name__} does not name a device class")
        nodes = device_nodes_by_class(cls.CLASS_NAME, root)
        if cls.DRIVER is None:
            return nodes
        return [
            node
            for node in nodes
            if _read_or_none(device_node_driver_name, node) == cls.DRIVER
        ]

    @classmethod
    def find(cls: type[_D], root: str | os.PathLike[str] | None = None) -> _D:
        """Open the only device of this kind."""
        return cls.open(find_in(cls.find_device_nodes(root)))

    @classmethod
    def find_by_port(
        cls: type[_D],
        port: Port | str,
        root: str | os.PathLike[str] | None = None,
    ) -> _D:
        """Open the only device of this kind attached to ``port``."""
        wanted = Port(port)
        node = find_in(
            node
            for node in cls.find_device_nodes(root)
            if _read_or_none(device_node_port, node) == wanted
        )
        return cls.open(node)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.device_node)!r})"
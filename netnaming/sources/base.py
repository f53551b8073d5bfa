"""Collaborator interfaces."""

from __future__ import annotations

from typing import Any, Protocol


class BootParamReader(Protocol):
    def get_key(self, key: str) -> str | None:
        """Return the value of a boot parameter, or None if it is not set."""


class PropertyStore(Protocol):
    """Typed access to device properties and sysattrs.

    Missing values raise PropertyNotFoundError, unparsable ones
    InvalidValueError, and I/O failures PropertyReadError.
    """

    def get_property_bool(self, device: Any, key: str) -> bool: ...

    def get_sysattr_int(self, device: Any, name: str) -> int: ...

    def get_sysattr_unsigned(self, device: Any, name: str) -> int: ...

    def get_sysattr_bool(self, device: Any, name: str) -> bool: ...

    def get_sysattr_value(self, device: Any, name: str) -> str: ...

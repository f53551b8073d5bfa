"""Sysattr visibility filtering.

Administrators can hide device attributes from interface naming with udev
properties. ``ID_NET_NAME_ALLOW`` sets the default for a device and
``ID_NET_NAME_ALLOW_<SYSATTR>`` overrides it for one attribute. A hidden
attribute reads exactly like a missing one.
"""

from __future__ import annotations

from typing import Any

from netnaming.core.errors import PropertyNotFoundError, SysattrNotFoundError
from netnaming.sources.base import PropertyStore

ALLOW_PROPERTY = "ID_NET_NAME_ALLOW"
ALLOW_PROPERTY_PREFIX = "ID_NET_NAME_ALLOW_"


def _ascii_upper(value: str) -> str:
    return "".join(chr(ord(c) - 32) if "a" <= c <= "z" else c for c in value)


def sysattr_property_key(sysattr: str) -> str:
    return _ascii_upper(ALLOW_PROPERTY_PREFIX + sysattr)


class SysattrFilter:
    def __init__(self, store: PropertyStore) -> None:
        self.store = store

    def allowed_by_default(self, device: Any) -> bool:
        try:
            return self.store.get_property_bool(device, ALLOW_PROPERTY)
        except PropertyNotFoundError:
            return True

    def allowed(self, device: Any, sysattr: str) -> bool:
        try:
            return self.store.get_property_bool(device, sysattr_property_key(sysattr))
        except PropertyNotFoundError:
            return self.allowed_by_default(device)

    def _check(self, device: Any, sysattr: str) -> None:
        if not self.allowed(device, sysattr):
            raise SysattrNotFoundError(f"Sysattr '{sysattr}' not found")

    def get_filtered_int(self, device: Any, sysattr: str) -> int:
        self._check(device, sysattr)
        return self.store.get_sysattr_int(device, sysattr)

    def get_filtered_unsigned(self, device: Any, sysattr: str) -> int:
        self._check(device, sysattr)
        return self.store.get_sysattr_unsigned(device, sysattr)

    def get_filtered_bool(self, device: Any, sysattr: str) -> bool:
        self._check(device, sysattr)
        return self.store.get_sysattr_bool(device, sysattr)

    def get_filtered_string(self, device: Any, sysattr: str) -> str:
        self._check(device, sysattr)
        return self.store.get_sysattr_value(device, sysattr)

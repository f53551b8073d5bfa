"""In-memory property store."""

from __future__ import annotations

from dataclasses import dataclass, field

from netnaming.core.errors import PropertyNotFoundError, SysattrNotFoundError
from netnaming.core.parse import parse_boolean, parse_int, parse_unsigned


@dataclass(frozen=True, eq=False)
class MemoryDevice:
    syspath: str
    properties: dict[str, str] = field(default_factory=dict)
    sysattrs: dict[str, str] = field(default_factory=dict)


class MemoryPropertyStore:
    def get_property(self, device: MemoryDevice, key: str) -> str:
        value = device.properties.get(key)
        if value is None:
            raise PropertyNotFoundError(f"Property '{key}' not set on {device.syspath}")
        return value

    def get_property_bool(self, device: MemoryDevice, key: str) -> bool:
        return parse_boolean(self.get_property(device, key))

    def get_sysattr_value(self, device: MemoryDevice, name: str) -> str:
        value = device.sysattrs.get(name)
        if value is None:
            raise SysattrNotFoundError(f"Sysattr '{name}' not found")
        return value

    def get_sysattr_int(self, device: MemoryDevice, name: str) -> int:
        return parse_int(self.get_sysattr_value(device, name))

    def get_sysattr_unsigned(self, device: MemoryDevice, name: str) -> int:
        return parse_unsigned(self.get_sysattr_value(device, name))

    def get_sysattr_bool(self, device: MemoryDevice, name: str) -> bool:
        return parse_boolean(self.get_sysattr_value(device, name))
